"""
AI recipe generation: the Gemini path, its validation, and the
deterministic fallback.
"""
import asyncio
import json

import numpy as np
import pytest

from core.fallbacks import (
    DEFAULT_IMAGES,
    FALLBACK_SUGGESTIONS,
    GENERIC_INGREDIENTS,
    fallback_recipe,
    fallback_tags,
    fallback_title,
)
from core.generation import RecipeGenerator, build_recipe_prompt
from core.models import RecipeGenerationRequest
from services.gemini import GeminiUnavailable
from services.store import InMemoryRecipeStore
from fakes import RECIPE_JSON, FakeLLM, fenced


def run(coro):
    return asyncio.run(coro)


def _generator(llm: FakeLLM, seed: int = 7) -> RecipeGenerator:
    return RecipeGenerator(InMemoryRecipeStore(), llm, rng=np.random.default_rng(seed))


# ── prompt ───────────────────────────────────────────────────────────
def test_prompt_embeds_request_details():
    prompt = build_recipe_prompt(
        RecipeGenerationRequest(
            description="spicy lentil soup",
            dietary_preferences=["Vegan", "Gluten-Free"],
            cooking_time=30,
        )
    )
    assert '"spicy lentil soup"' in prompt
    assert "Vegan, Gluten-Free" in prompt
    assert "30 minutes" in prompt
    assert '"nutritionFacts"' in prompt


# ── fallback rules ───────────────────────────────────────────────────
@pytest.mark.parametrize(
    "description,title",
    [
        ("A VEGETARIAN chili please", "Hearty Vegetarian Chili"),
        ("chicken for dinner", "Lemon Herb Roasted Chicken"),
        ("something quick", "15-Minute Shrimp Pasta"),
        ("healthy lunch", "Super Green Nutrient Bowl"),
        ("surprise me", "Homestyle Comfort Casserole"),
    ],
)
def test_fallback_title_rules(description, title):
    assert fallback_title(description) == title


@pytest.mark.parametrize("seed", range(25))
def test_fallback_respects_cooking_time_ceiling(seed):
    req = RecipeGenerationRequest(description="dinner", cooking_time=20)
    recipe = fallback_recipe(req, np.random.default_rng(seed))
    assert recipe.cook_time <= 20


@pytest.mark.parametrize("seed", range(25))
def test_fallback_numeric_bounds(seed):
    recipe = fallback_recipe(RecipeGenerationRequest(description="x"), np.random.default_rng(seed))
    assert 5 <= recipe.prep_time <= 24
    assert 15 <= recipe.cook_time <= 59
    assert 2 <= recipe.servings <= 5
    facts = recipe.nutrition_facts
    assert 200 <= facts.calories <= 599
    assert all(v >= 0 and float(v).is_integer() for v in facts.model_dump().values())
    assert recipe.image_url in DEFAULT_IMAGES
    assert recipe.is_ai_generated


@pytest.mark.parametrize(
    "prefs",
    [
        None,
        [],
        ["Vegan"],
        ["Vegan", "vegan", "Keto"],
        ["Vegan", "Keto", "Paleo", "Low-Carb"],
        ["A", "B", "C", "D", "E", "F", "G"],
    ],
)
def test_fallback_tags_unique_and_capped(prefs):
    for seed in range(10):
        tags = fallback_tags(np.random.default_rng(seed), prefs)
        assert 1 <= len(tags) <= 5
        assert len({t.lower() for t in tags}) == len(tags)


def test_fallback_tags_keep_preferences_first():
    tags = fallback_tags(np.random.default_rng(0), ["Vegan", "Keto", "Paleo", "Low-Carb"])
    assert tags[:4] == ["Vegan", "Keto", "Paleo", "Low-Carb"]
    assert len(tags) == 5


def test_fallback_is_reproducible_with_same_seed():
    req = RecipeGenerationRequest(description="anything")
    a = fallback_recipe(req, np.random.default_rng(42))
    b = fallback_recipe(req, np.random.default_rng(42))
    assert a == b


# ── generate(): Gemini path ──────────────────────────────────────────
def test_generate_from_gemini_reply_is_normalised_and_stored():
    llm = FakeLLM(fenced(RECIPE_JSON))
    gen = _generator(llm)
    recipe = run(gen.generate(RecipeGenerationRequest(description="curry", cooking_time=25)))

    assert recipe.id == 1
    assert recipe.title == "Spicy Chickpea Curry"
    assert recipe.difficulty.value == "Medium"
    assert recipe.cook_time == 25  # clamped from 35
    assert recipe.tags == ["Vegan", "Indian", "One-Pot", "Dinner", "Healthy"]
    assert recipe.nutrition_facts.calories == 421
    assert recipe.is_ai_generated
    assert recipe.created_at is not None
    assert len(llm.prompts) == 1


def test_generate_missing_field_falls_back():
    broken = {k: v for k, v in RECIPE_JSON.items() if k != "instructions"}
    gen = _generator(FakeLLM(json.dumps(broken)))
    recipe = run(gen.generate(RecipeGenerationRequest(description="chicken stew")))
    assert recipe.title == "Lemon Herb Roasted Chicken"
    assert recipe.ingredients == list(GENERIC_INGREDIENTS)


def test_generate_garbage_reply_falls_back():
    gen = _generator(FakeLLM("Sorry, I can only talk about recipes."))
    recipe = run(gen.generate(RecipeGenerationRequest(description="vegetarian")))
    assert recipe.title == "Hearty Vegetarian Chili"


def test_generate_service_error_falls_back_and_persists():
    store = InMemoryRecipeStore()
    gen = RecipeGenerator(store, FakeLLM(GeminiUnavailable("503")), rng=np.random.default_rng(1))
    req = RecipeGenerationRequest(description="quick", dietary_preferences=["Keto"], cooking_time=20)
    recipe = run(gen.generate(req))

    assert recipe.cook_time <= 20
    assert recipe.tags[0] == "Keto"
    assert run(store.get_recipe(recipe.id)) == recipe


# ── suggest() ────────────────────────────────────────────────────────
def test_suggest_fallback_when_unavailable():
    ideas = run(_generator(FakeLLM()).suggest("pasta"))
    assert ideas == list(FALLBACK_SUGGESTIONS)
    assert len(ideas) == 3
    assert all(s.id >= 100 for s in ideas)


def test_suggest_from_gemini_array():
    reply = json.dumps(
        [
            {"title": "Pesto Pasta", "description": "Basil and pine nuts."},
            {"title": "Pasta e Fagioli", "description": "Bean soup."},
            {"title": "Baked Ziti", "description": "Cheesy bake."},
            {"title": "Extra", "description": "Ignored."},
        ]
    )
    ideas = run(_generator(FakeLLM(f"Here you go: {reply}")).suggest("pasta"))
    assert [s.id for s in ideas] == [1000, 1001, 1002]
    assert ideas[0].title == "Pesto Pasta"


def test_suggest_too_few_ideas_falls_back():
    reply = json.dumps([{"title": "Only one", "description": "lonely"}])
    ideas = run(_generator(FakeLLM(reply)).suggest("pasta"))
    assert ideas == list(FALLBACK_SUGGESTIONS)
