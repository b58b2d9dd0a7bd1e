"""
services/store.py
────────────────────────────────────────────────────────────────────────
Recipe Store contract + in-memory implementation.

The engines in `core/` only ever see `RecipeStore`; the SQL-backed
variant lives in `services/db.py`.

Ordering contract (both implementations):
* `list_recipes()`  → id ascending (creation order)
* `list_saved()`    → most recently saved first
"""
from __future__ import annotations

import asyncio
import itertools
from datetime import datetime, timezone
from typing import Iterable, Protocol

from core.errors import AlreadySavedError
from core.models import NewRecipe, Recipe, SavedRecipe, UserContext


class RecipeStore(Protocol):
    async def list_recipes(self) -> list[Recipe]: ...

    async def get_recipe(self, recipe_id: int) -> Recipe | None: ...

    async def create_recipe(self, new: NewRecipe) -> Recipe: ...

    async def list_saved(self, user: UserContext) -> list[Recipe]: ...

    async def is_saved(self, user: UserContext, recipe_id: int) -> bool: ...

    async def save_recipe(self, user: UserContext, recipe_id: int) -> SavedRecipe:
        """Raises AlreadySavedError when the (user, recipe) pair exists."""
        ...

    async def unsave_recipe(self, user: UserContext, recipe_id: int) -> None:
        """No-op when nothing is saved."""
        ...


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryRecipeStore:
    """Dict-backed store with monotonically increasing ids."""

    def __init__(self, seed: Iterable[NewRecipe] = ()) -> None:
        self._recipes: dict[int, Recipe] = {}
        self._saved: dict[int, SavedRecipe] = {}
        self._recipe_ids = itertools.count(1)
        self._saved_ids = itertools.count(1)
        self._lock = asyncio.Lock()
        for new in seed:
            self._insert(new)

    def _insert(self, new: NewRecipe) -> Recipe:
        recipe = Recipe(
            **new.model_dump(),
            id=next(self._recipe_ids),
            created_at=_now(),
        )
        self._recipes[recipe.id] = recipe
        return recipe

    # ─────────────── recipes ───────────────
    async def list_recipes(self) -> list[Recipe]:
        return [self._recipes[k] for k in sorted(self._recipes)]

    async def get_recipe(self, recipe_id: int) -> Recipe | None:
        return self._recipes.get(recipe_id)

    async def create_recipe(self, new: NewRecipe) -> Recipe:
        async with self._lock:
            return self._insert(new)

    # ─────────────── saved ───────────────
    def _find_saved(self, user: UserContext, recipe_id: int) -> SavedRecipe | None:
        for sr in self._saved.values():
            if sr.user_id == user.user_id and sr.recipe_id == recipe_id:
                return sr
        return None

    async def list_saved(self, user: UserContext) -> list[Recipe]:
        entries = sorted(
            (sr for sr in self._saved.values() if sr.user_id == user.user_id),
            key=lambda sr: sr.id,
            reverse=True,
        )
        out = []
        for sr in entries:
            recipe = self._recipes.get(sr.recipe_id)
            if recipe is not None:
                out.append(recipe.model_copy(update={"is_saved": True}))
        return out

    async def is_saved(self, user: UserContext, recipe_id: int) -> bool:
        return self._find_saved(user, recipe_id) is not None

    async def save_recipe(self, user: UserContext, recipe_id: int) -> SavedRecipe:
        async with self._lock:
            if self._find_saved(user, recipe_id) is not None:
                raise AlreadySavedError(user.user_id, recipe_id)
            saved = SavedRecipe(
                id=next(self._saved_ids),
                user_id=user.user_id,
                recipe_id=recipe_id,
                saved_at=_now(),
            )
            self._saved[saved.id] = saved
            return saved

    async def unsave_recipe(self, user: UserContext, recipe_id: int) -> None:
        async with self._lock:
            found = self._find_saved(user, recipe_id)
            if found is not None:
                del self._saved[found.id]
