# api/v1/recipes.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from api.v1.deps import get_matcher, get_store
from core.matching import RecipeMatcher
from core.models import Recipe
from services.store import RecipeStore

router = APIRouter()


def _split_csv(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


@router.get(
    "",
    response_model=list[Recipe],
    response_model_exclude_none=True,
    summary="List every recipe",
)
async def list_recipes(store: RecipeStore = Depends(get_store)) -> list[Recipe]:
    return await store.list_recipes()


@router.get(
    "/search",
    response_model=list[Recipe],
    response_model_exclude_none=True,
    summary="Substring search with an AND-ed tag filter",
)
async def search_recipes(
    q: str = "",
    filters: str | None = None,
    matcher: RecipeMatcher = Depends(get_matcher),
) -> list[Recipe]:
    """
    `q` matches title, description or any ingredient (case-insensitive);
    `filters` is a comma-separated list of tags the recipe must all carry.
    """
    return await matcher.search(q, _split_csv(filters))


@router.get(
    "/{recipe_id}/similar",
    response_model=list[Recipe],
    response_model_exclude_none=True,
    summary="Recipes sharing the most tags with `recipe_id`",
)
async def similar_recipes(
    recipe_id: int,
    limit: int = 3,
    matcher: RecipeMatcher = Depends(get_matcher),
) -> list[Recipe]:
    return await matcher.similar(recipe_id, limit)


@router.get(
    "/{recipe_id}",
    response_model=Recipe,
    response_model_exclude_none=True,
)
async def fetch_recipe(
    recipe_id: int,
    store: RecipeStore = Depends(get_store),
) -> Recipe:
    recipe = await store.get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
    return recipe
