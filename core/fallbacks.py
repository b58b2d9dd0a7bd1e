"""
core/fallbacks.py
────────────────────────────────────────────────────────────────────────
Deterministic answers used whenever Gemini is unavailable or returns
something we cannot use.

Everything random draws from an injected `numpy.random.Generator`, so a
seeded generator reproduces the same synthetic recipe.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np

from core.models import (
    Difficulty,
    Meal,
    NewRecipe,
    NutritionFacts,
    RecipeGenerationRequest,
    Suggestion,
    unique_tags,
)

MAX_TAGS = 5

DEFAULT_IMAGES = (
    "https://images.unsplash.com/photo-1546069901-ba9599a7e63c",
    "https://images.unsplash.com/photo-1512621776951-a57141f2eefd",
    "https://images.unsplash.com/photo-1593906930848-a79daafbdcda",
    "https://images.unsplash.com/photo-1540420773420-3366772f4999",
)

DIFFICULTY_LEVELS = (Difficulty.easy, Difficulty.medium, Difficulty.hard)

TAG_CATEGORIES: dict[str, tuple[str, ...]] = {
    "cuisines": ("Italian", "Mexican", "Asian", "Mediterranean", "Indian", "American", "French"),
    "dietary": ("Vegetarian", "Vegan", "Gluten-Free", "Dairy-Free", "Low-Carb", "Keto", "Paleo"),
    "meal_types": ("Breakfast", "Lunch", "Dinner", "Snack", "Dessert"),
    "characteristics": ("Quick", "Healthy", "High-Protein", "Budget-Friendly", "One-Pot"),
}

# first keyword hit wins
_TITLE_RULES: tuple[tuple[str, str], ...] = (
    ("vegetarian", "Hearty Vegetarian Chili"),
    ("chicken", "Lemon Herb Roasted Chicken"),
    ("quick", "15-Minute Shrimp Pasta"),
    ("healthy", "Super Green Nutrient Bowl"),
)
_DEFAULT_TITLE = "Homestyle Comfort Casserole"

GENERIC_INGREDIENTS = (
    "2 tablespoons olive oil",
    "1 onion, diced",
    "2 cloves garlic, minced",
    "1 pound protein of choice",
    "1 bell pepper, sliced",
    "1 cup vegetables of choice",
    "1 can (14 oz) diced tomatoes",
    "2 cups broth or stock",
    "1 teaspoon mixed herbs",
    "Salt and pepper to taste",
)

GENERIC_INSTRUCTIONS = (
    "Prepare all ingredients before cooking.",
    "Heat oil in a large pan over medium heat.",
    "Add onion and cook until translucent, about 3-4 minutes.",
    "Add garlic and cook for 30 seconds until fragrant.",
    "Add protein and cook until browned.",
    "Add vegetables and cook for 3-5 minutes.",
    "Add remaining ingredients and simmer for 15-20 minutes.",
    "Season with salt and pepper to taste.",
    "Serve hot with your favorite sides.",
)


def _pick(rng: np.random.Generator, options: Sequence):
    return options[int(rng.integers(len(options)))]


def _randint(rng: np.random.Generator, low: int, high: int) -> int:
    """Inclusive on both ends."""
    return int(rng.integers(low, high + 1))


def pick_image(rng: np.random.Generator) -> str:
    return _pick(rng, DEFAULT_IMAGES)


def fallback_title(description: str) -> str:
    text = description.lower()
    for keyword, title in _TITLE_RULES:
        if keyword in text:
            return title
    return _DEFAULT_TITLE


def fallback_cook_time(rng: np.random.Generator, ceiling: int | None) -> int:
    if ceiling is None:
        return _randint(rng, 15, 59)
    upper = min(ceiling, 59)
    return _randint(rng, min(15, upper), upper)


def fallback_tags(rng: np.random.Generator, dietary: Sequence[str] | None) -> list[str]:
    """
    Requested preferences first, then one random tag per category.
    Category tags are the ones dropped when we exceed MAX_TAGS.
    """
    prefs = unique_tags(dietary or [])[:MAX_TAGS]
    extras: list[str] = []
    for category in ("cuisines", "meal_types", "characteristics"):
        extras.append(_pick(rng, TAG_CATEGORIES[category]))
    extras = [t for t in unique_tags(prefs + extras) if t not in prefs]

    room = MAX_TAGS - len(prefs)
    if len(extras) > room:
        keep = set(rng.choice(len(extras), size=room, replace=False).tolist()) if room else set()
        extras = [t for i, t in enumerate(extras) if i in keep]
    return prefs + extras


def fallback_recipe(request: RecipeGenerationRequest, rng: np.random.Generator) -> NewRecipe:
    title = fallback_title(request.description)
    return NewRecipe(
        title=title,
        description=f'{title} - Based on your request: "{request.description}"',
        image_url=pick_image(rng),
        ingredients=list(GENERIC_INGREDIENTS),
        instructions=list(GENERIC_INSTRUCTIONS),
        prep_time=_randint(rng, 5, 24),
        cook_time=fallback_cook_time(rng, request.cooking_time),
        servings=_randint(rng, 2, 5),
        difficulty=_pick(rng, DIFFICULTY_LEVELS),
        tags=fallback_tags(rng, request.dietary_preferences),
        nutrition_facts=NutritionFacts(
            calories=_randint(rng, 200, 599),
            protein=_randint(rng, 10, 39),
            carbs=_randint(rng, 10, 49),
            fat=_randint(rng, 5, 24),
        ),
        is_ai_generated=True,
    )


# ───────────────────────── suggestions ─────────────────────────
# ids ≥ 100 stay clear of store-assigned ids in a demo-sized catalogue
FALLBACK_SUGGESTIONS: tuple[Suggestion, ...] = (
    Suggestion(
        id=101,
        title="Lemon Herb Grilled Chicken",
        description="Tender chicken breasts marinated in lemon, garlic and fresh herbs.",
    ),
    Suggestion(
        id=102,
        title="One-Pot Vegetable Quinoa",
        description="Protein-packed quinoa with seasonal vegetables and herbs.",
    ),
    Suggestion(
        id=103,
        title="Sheet Pan Salmon & Veggies",
        description="Easy cleanup dinner with omega-rich salmon and roasted vegetables.",
    ),
)


# ───────────────────────── chat ─────────────────────────
CHAT_CHICKEN = (
    "I'd recommend a simple roast chicken with herbs. Season a whole chicken with "
    "salt, pepper, and herbs like rosemary and thyme. Stuff with lemon and garlic, "
    "then roast at 375°F for about 1 hour and 15 minutes or until the internal "
    "temperature reaches 165°F. Let it rest for 10 minutes before carving."
)
CHAT_PASTA = (
    "How about a classic spaghetti carbonara? Cook spaghetti according to package "
    "instructions. In a bowl, mix 4 egg yolks, 1 whole egg, and 1 cup grated "
    "Parmesan. In a pan, cook diced pancetta until crispy. Toss hot pasta with the "
    "egg mixture and pancetta. The heat from the pasta cooks the eggs into a creamy "
    "sauce. Finish with black pepper and more cheese."
)
CHAT_VEGETARIAN = (
    "I suggest a hearty vegetable curry. Sauté onions, garlic, and ginger in oil, "
    "then add curry powder and cook until fragrant. Add diced vegetables like "
    "potatoes, carrots, and bell peppers, then pour in coconut milk and simmer until "
    "vegetables are tender. Serve with rice or naan bread."
)
CHAT_DESSERT = (
    "A simple apple crumble is always delicious. Slice 4-5 apples and toss with "
    "cinnamon, sugar, and lemon juice. For the topping, mix oats, flour, butter, and "
    "brown sugar until crumbly. Spread the topping over the apples and bake at 350°F "
    "for 45 minutes until golden and bubbly. Serve warm with ice cream."
)
CHAT_GENERIC = (
    "I'd be happy to help you find a recipe! To get started, could you tell me what "
    "kind of dish you're looking to make? Or do you have specific ingredients you'd "
    "like to use?"
)

_CHAT_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("chicken",), CHAT_CHICKEN),
    (("pasta", "spaghetti"), CHAT_PASTA),
    (("vegetarian", "vegan"), CHAT_VEGETARIAN),
    (("dessert", "sweet"), CHAT_DESSERT),
)


def fallback_chat_response(message: str) -> str:
    text = message.lower()
    for keywords, response in _CHAT_RULES:
        if any(k in text for k in keywords):
            return response
    return CHAT_GENERIC


# ───────────────────────── meal planner ─────────────────────────
FALLBACK_DAY_MEALS: dict[str, Meal] = {
    "breakfast": Meal(
        id=201,
        title="Greek Yogurt Parfait",
        description="Layers of yogurt, granola and fresh berries with a drizzle of honey.",
    ),
    "lunch": Meal(
        id=202,
        title="Mediterranean Chicken Salad",
        description="Grilled chicken, mixed greens, feta and a lemon vinaigrette.",
    ),
    "dinner": Meal(
        id=203,
        title="Quick Vegetable Stir Fry",
        description="Tofu and crisp vegetables in a ginger soy glaze over brown rice.",
    ),
}
