"""
core/models/recipe.py
────────────────────────────────────────────────────────────────────────
Recipe-side value objects.

Field names are snake_case in Python and camelCase on the wire
(`prepTime`, `nutritionFacts`, `isAIGenerated` …), so the same models
serve the stores, the engines and the HTTP responses.
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Difficulty(str, Enum):
    easy = "Easy"
    medium = "Medium"
    hard = "Hard"


class NutritionFacts(_CamelModel):
    calories: float = Field(..., ge=0)
    protein: float = Field(..., ge=0)
    carbs: float = Field(..., ge=0)
    fat: float = Field(..., ge=0)


class NewRecipe(_CamelModel):
    """Everything a recipe carries before the store assigns id + timestamp."""

    title: str
    description: str
    image_url: str | None = None
    ingredients: list[str]
    instructions: list[str]
    prep_time: int = Field(..., ge=0)
    cook_time: int = Field(..., ge=0)
    servings: int = Field(..., gt=0)
    difficulty: Difficulty
    tags: list[str] = []
    nutrition_facts: NutritionFacts
    is_ai_generated: bool = Field(False, alias="isAIGenerated")


class Recipe(NewRecipe):
    id: int
    created_at: datetime
    # only set on the saved-recipes listing
    is_saved: bool | None = None


class SavedRecipe(_CamelModel):
    id: int
    user_id: int
    recipe_id: int
    saved_at: datetime


class RecipeRef(_CamelModel):
    """Light id+title payload surfaced next to chat replies."""

    id: int
    title: str


class Suggestion(_CamelModel):
    id: int
    title: str
    description: str


class RecipeGenerationRequest(_CamelModel):
    description: str = Field(..., min_length=1)
    dietary_preferences: list[str] | None = None
    cooking_time: int | None = Field(None, gt=0)

    @field_validator("description")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("description must not be blank")
        return v


def unique_tags(tags: Iterable[str]) -> list[str]:
    """Drop blank and case-insensitive duplicate tags, keeping first spelling."""
    seen: set[str] = set()
    out: list[str] = []
    for tag in tags:
        tag = tag.strip()
        if not tag or tag.lower() in seen:
            continue
        seen.add(tag.lower())
        out.append(tag)
    return out
