"""
core/matching.py
────────────────────────────────────────────────────────────────────────
Suggestion / matching engine.

Responsibilities
----------------
1.   `search()` – case-insensitive substring match on title, description
     or any ingredient, narrowed by a conjunctive tag filter.
2.   `similar()` – rank other recipes by how many tags they share with
     the target.
3.   `related_for_chat()` – the lighter id+title lookup used next to chat
     replies.

All result lists follow the store's id-ascending order; `similar()` uses
id ascending as the tie-break after the shared-tag count.
"""
from __future__ import annotations

import logging
from typing import Sequence

import pandas as pd

from core.models import Recipe, RecipeRef
from services.store import RecipeStore

_LOG = logging.getLogger(__name__)


# ─────────────────────────────── predicates ───────────────────────── #
def matches_query(recipe: Recipe, query: str) -> bool:
    q = query.lower()
    if not q:
        return True
    return (
        q in recipe.title.lower()
        or q in recipe.description.lower()
        or any(q in ing.lower() for ing in recipe.ingredients)
    )


def has_all_tags(recipe: Recipe, filters: Sequence[str]) -> bool:
    tags = {t.lower() for t in recipe.tags}
    return all(f.lower() in tags for f in filters)


def _searchable_text(recipe: Recipe) -> str:
    return f"{recipe.title} {recipe.description} {' '.join(recipe.ingredients)}".lower()


# ──────────────────────────────── ranking ─────────────────────────── #
def rank_by_shared_tags(
    target: Recipe, candidates: Sequence[Recipe], limit: int
) -> list[Recipe]:
    """Top `limit` candidates by shared-tag count, then id ascending."""
    others = [r for r in candidates if r.id != target.id]
    if limit <= 0 or not others:
        return []

    target_tags = {t.lower() for t in target.tags}
    frame = pd.DataFrame(
        {
            "id": [r.id for r in others],
            "shared": [len({t.lower() for t in r.tags} & target_tags) for r in others],
        }
    )
    top = frame.sort_values(
        ["shared", "id"], ascending=[False, True], kind="mergesort"
    ).head(limit)

    by_id = {r.id: r for r in others}
    return [by_id[i] for i in top["id"].tolist()]


# ──────────────────────────────── engine ──────────────────────────── #
class RecipeMatcher:
    def __init__(self, store: RecipeStore) -> None:
        self._store = store

    async def search(self, query: str = "", filters: Sequence[str] = ()) -> list[Recipe]:
        recipes = await self._store.list_recipes()
        hits = [
            r for r in recipes
            if matches_query(r, query) and (not filters or has_all_tags(r, filters))
        ]
        _LOG.debug("search q=%r filters=%s → %d/%d", query, list(filters), len(hits), len(recipes))
        return hits

    async def similar(self, recipe_id: int, limit: int = 3) -> list[Recipe]:
        target = await self._store.get_recipe(recipe_id)
        if target is None:
            _LOG.debug("similar: recipe %s not found → []", recipe_id)
            return []
        return rank_by_shared_tags(target, await self._store.list_recipes(), limit)

    async def related_for_chat(self, text: str, limit: int = 3) -> list[RecipeRef]:
        q = text.lower()
        refs: list[RecipeRef] = []
        if limit <= 0:
            return refs
        for r in await self._store.list_recipes():
            if q in _searchable_text(r):
                refs.append(RecipeRef(id=r.id, title=r.title))
                if len(refs) >= limit:
                    break
        return refs
