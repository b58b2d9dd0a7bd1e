"""
Seed recipes into the SQL store pointed at by DATABASE_URL.

Usage
-----

    # built-in sample recipes
    python -m scripts.seed_recipes

    # custom list (same camelCase schema as the API) in a JSON file
    python -m scripts.seed_recipes --file path/to/recipes.json
"""
from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path

from config import settings
from core.models import NewRecipe
from services.db import SqlRecipeStore, create_engine_for, init_models
from services.seed_data import SEED_RECIPES


async def _seed(url: str, recipes: list[NewRecipe], force: bool) -> None:
    eng = create_engine_for(url)
    await init_models(eng)
    store = SqlRecipeStore(eng)

    existing = await store.count_recipes()
    if existing and not force:
        print(f"database already has {existing} recipes, skipping (use --force)")
        await eng.dispose()
        return

    for new in recipes:
        await store.create_recipe(new)
    await eng.dispose()
    print(f"✓ inserted {len(recipes)} recipes")


def _load_json(path: Path) -> list[NewRecipe]:
    data = json.loads(path.read_text())
    if not isinstance(data, list):
        raise ValueError("JSON file must contain a list of recipe objects")
    return [NewRecipe.model_validate(item) for item in data]


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--file",
        type=Path,
        help="optional JSON file with recipes to seed (overrides defaults)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="insert even when the recipes table is not empty",
    )
    args = parser.parse_args()

    if not settings.database_url:
        raise SystemExit("Set DATABASE_URL to seed a database")

    recipes = _load_json(args.file) if args.file else SEED_RECIPES
    asyncio.run(_seed(settings.database_url, recipes, args.force))


if __name__ == "__main__":
    main()
