"""Domain models shared by the core engines, the stores and the HTTP layer."""

from .recipe import (
    Difficulty,
    NewRecipe,
    NutritionFacts,
    Recipe,
    RecipeGenerationRequest,
    RecipeRef,
    SavedRecipe,
    Suggestion,
    unique_tags,
)
from .plan import MEAL_SLOTS, WEEKDAYS, DayPlan, Meal, WeekPlan, normalize_day
from .user import UserContext

__all__ = [
    "Difficulty",
    "NewRecipe",
    "NutritionFacts",
    "Recipe",
    "RecipeGenerationRequest",
    "RecipeRef",
    "SavedRecipe",
    "Suggestion",
    "unique_tags",
    "MEAL_SLOTS",
    "WEEKDAYS",
    "DayPlan",
    "Meal",
    "WeekPlan",
    "normalize_day",
    "UserContext",
]
