"""
core/generation.py
────────────────────────────────────────────────────────────────────────
AI recipe generation + quick suggestions.

    RecipeGenerationRequest
          │  build_recipe_prompt()
          ▼
    Gemini  ──►  first balanced {...}  ──►  _RecipePayload (pydantic)
          │ any failure                         │ ok
          ▼                                     ▼
    fallback_recipe(rng)  ───────────────►  NewRecipe ──► store.create_recipe()

Failures never leave this module: they are logged and replaced by the
deterministic fallback.
"""
from __future__ import annotations

import logging

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from core.fallbacks import (
    FALLBACK_SUGGESTIONS,
    MAX_TAGS,
    fallback_recipe,
    pick_image,
)
from core.json_extract import Err
from core.models import (
    Difficulty,
    NewRecipe,
    NutritionFacts,
    Recipe,
    RecipeGenerationRequest,
    Suggestion,
    unique_tags,
)
from services.gemini import TextGenerator, request_json
from services.store import RecipeStore

_LOG = logging.getLogger(__name__)

SUGGESTION_ID_BASE = 1000
SUGGESTION_COUNT = 3


# ───────────────────────── model payloads ─────────────────────────
class _RecipePayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., min_length=1)
    description: str
    ingredients: list[str] = Field(..., min_length=1)
    instructions: list[str] = Field(..., min_length=1)
    prep_time: int = Field(..., ge=0)
    cook_time: int = Field(..., ge=0)
    servings: int = Field(..., gt=0)
    difficulty: Difficulty
    tags: list[str]
    nutrition_facts: NutritionFacts

    @field_validator("difficulty", mode="before")
    @classmethod
    def _title_case(cls, v):
        return v.strip().capitalize() if isinstance(v, str) else v


class _SuggestionPayload(BaseModel):
    title: str = Field(..., min_length=1)
    description: str


# ───────────────────────── prompts ─────────────────────────
def build_recipe_prompt(request: RecipeGenerationRequest) -> str:
    dietary = (
        f"Dietary preferences: {', '.join(request.dietary_preferences)}. "
        if request.dietary_preferences else ""
    )
    timing = (
        f"The cooking time must not exceed {request.cooking_time} minutes. "
        if request.cooking_time else ""
    )
    return (
        f'Create a detailed recipe based on this request: "{request.description}". '
        f"{dietary}{timing}\n\n"
        "Format the response as JSON with these fields:\n"
        "{\n"
        '  "title": "Recipe title",\n'
        '  "description": "Brief description",\n'
        '  "ingredients": ["ingredient 1", "ingredient 2", ...],\n'
        '  "instructions": ["step 1", "step 2", ...],\n'
        '  "prepTime": (preparation time in minutes),\n'
        '  "cookTime": (cooking time in minutes),\n'
        '  "servings": (number of servings),\n'
        '  "difficulty": "Easy" or "Medium" or "Hard",\n'
        f'  "tags": ["tag1", "tag2", ...] (up to {MAX_TAGS} tags),\n'
        '  "nutritionFacts": {"calories": number, "protein": grams, '
        '"carbs": grams, "fat": grams}\n'
        "}\n\n"
        "Ensure all fields are populated. Keep ingredients and instructions "
        "concise but clear. Make sure the recipe is realistic and delicious."
    )


def build_suggest_prompt(query: str) -> str:
    return (
        f'Based on the query "{query}", suggest exactly {SUGGESTION_COUNT} recipe ideas.\n'
        "Provide the response as a JSON array where each item has a title and "
        "a short description:\n"
        "[\n"
        '  {"title": "Recipe Title 1", "description": "Brief description of recipe 1"},\n'
        '  {"title": "Recipe Title 2", "description": "Brief description of recipe 2"},\n'
        '  {"title": "Recipe Title 3", "description": "Brief description of recipe 3"}\n'
        "]"
    )


# ───────────────────────── generator ─────────────────────────
class RecipeGenerator:
    def __init__(
        self,
        store: RecipeStore,
        llm: TextGenerator,
        rng: np.random.Generator | None = None,
    ) -> None:
        self._store = store
        self._llm = llm
        self._rng = rng if rng is not None else np.random.default_rng()

    async def generate(self, request: RecipeGenerationRequest) -> Recipe:
        new = await self._from_gemini(request)
        if new is None:
            _LOG.info("using fallback recipe for %r", request.description)
            new = fallback_recipe(request, self._rng)
        return await self._store.create_recipe(new)

    async def _from_gemini(self, request: RecipeGenerationRequest) -> NewRecipe | None:
        result = await request_json(self._llm, build_recipe_prompt(request))
        if isinstance(result, Err):
            _LOG.warning("recipe generation unavailable: %s", result.reason)
            return None
        try:
            payload = _RecipePayload.model_validate(result.value)
        except ValidationError as exc:
            _LOG.warning("recipe JSON missing/invalid fields: %s", exc.errors())
            return None

        tags = unique_tags(payload.tags)[:MAX_TAGS]
        if not tags:
            _LOG.warning("recipe JSON has no usable tags")
            return None

        cook_time = payload.cook_time
        if request.cooking_time is not None:
            cook_time = min(cook_time, request.cooking_time)

        facts = payload.nutrition_facts
        return NewRecipe(
            title=payload.title,
            description=payload.description,
            image_url=pick_image(self._rng),
            ingredients=payload.ingredients,
            instructions=payload.instructions,
            prep_time=payload.prep_time,
            cook_time=cook_time,
            servings=payload.servings,
            difficulty=payload.difficulty,
            tags=tags,
            nutrition_facts=NutritionFacts(
                calories=round(facts.calories),
                protein=round(facts.protein),
                carbs=round(facts.carbs),
                fat=round(facts.fat),
            ),
            is_ai_generated=True,
        )

    async def suggest(self, query: str) -> list[Suggestion]:
        result = await request_json(self._llm, build_suggest_prompt(query), expect=list)
        if isinstance(result, Err):
            _LOG.warning("suggestions unavailable: %s", result.reason)
            return list(FALLBACK_SUGGESTIONS)

        ideas: list[_SuggestionPayload] = []
        for item in result.value:
            try:
                ideas.append(_SuggestionPayload.model_validate(item))
            except ValidationError:
                continue
        if len(ideas) < SUGGESTION_COUNT:
            _LOG.warning("only %d usable suggestions in reply", len(ideas))
            return list(FALLBACK_SUGGESTIONS)

        return [
            Suggestion(id=SUGGESTION_ID_BASE + i, title=s.title, description=s.description)
            for i, s in enumerate(ideas[:SUGGESTION_COUNT])
        ]
