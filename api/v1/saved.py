# api/v1/saved.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from api.v1.deps import get_store, get_user
from api.v1.schemas import SaveRecipeIn
from core.errors import AlreadySavedError
from core.models import Recipe, SavedRecipe, UserContext
from services.store import RecipeStore

router = APIRouter()


@router.get(
    "",
    response_model=list[Recipe],
    response_model_exclude_none=True,
    summary="Recipes saved by the current user, newest first",
)
async def list_saved(
    store: RecipeStore = Depends(get_store),
    user: UserContext = Depends(get_user),
) -> list[Recipe]:
    return await store.list_saved(user)


@router.post(
    "",
    response_model=SavedRecipe,
    status_code=status.HTTP_201_CREATED,
)
async def save_recipe(
    body: SaveRecipeIn,
    store: RecipeStore = Depends(get_store),
    user: UserContext = Depends(get_user),
) -> SavedRecipe:
    if await store.get_recipe(body.recipe_id) is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    if await store.is_saved(user, body.recipe_id):
        raise HTTPException(status_code=409, detail="Recipe is already saved")

    try:
        return await store.save_recipe(user, body.recipe_id)
    except AlreadySavedError:
        # lost a race with a concurrent save
        raise HTTPException(status_code=409, detail="Recipe is already saved")


@router.delete(
    "/{recipe_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a recipe from the saved list (idempotent)",
)
async def unsave_recipe(
    recipe_id: int,
    store: RecipeStore = Depends(get_store),
    user: UserContext = Depends(get_user),
) -> Response:
    await store.unsave_recipe(user, recipe_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
