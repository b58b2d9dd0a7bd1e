"""
services/db.py
────────────────────────────────────────────────────────────────────────
* Async SQLAlchemy v2 setup
* Models for the `recipes` and `saved_recipes` tables
* `SqlRecipeStore` – the database-backed `RecipeStore`
"""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    TypeDecorator,
    UniqueConstraint,
    delete,
    func,
    select,
)
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import (
    AsyncAttrs,
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import Mapped, declarative_base, mapped_column
from sqlalchemy.pool import StaticPool

from core.errors import AlreadySavedError
from core.models import NewRecipe, Recipe, SavedRecipe, UserContext

# ───────── connection helper ────────────────────────────────────────


def create_engine_for(url: str) -> AsyncEngine:
    # in-memory SQLite must share one connection or every session sees
    # a fresh, empty database
    if url.startswith("sqlite") and (url.endswith("://") or ":memory:" in url):
        return create_async_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(url, pool_pre_ping=True)


class UtcDateTime(TypeDecorator):
    """Timestamps always come back tz-aware in UTC (SQLite stores them naive)."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


# ───────── declarative base ──────────────────────────────────────────
Base = declarative_base(cls=AsyncAttrs)


class RecipeRow(Base):
    __tablename__ = "recipes"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String)
    description: Mapped[str] = mapped_column(Text)
    image_url: Mapped[str | None] = mapped_column(String)
    ingredients: Mapped[list] = mapped_column(JSON)
    instructions: Mapped[list] = mapped_column(JSON)
    prep_time: Mapped[int] = mapped_column(Integer)
    cook_time: Mapped[int] = mapped_column(Integer)
    servings: Mapped[int] = mapped_column(Integer)
    difficulty: Mapped[str] = mapped_column(String)
    tags: Mapped[list] = mapped_column(JSON)
    nutrition_facts: Mapped[dict] = mapped_column(JSON)
    is_ai_generated: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(UtcDateTime, server_default=func.now())


class SavedRecipeRow(Base):
    __tablename__ = "saved_recipes"
    __table_args__ = (UniqueConstraint("user_id", "recipe_id", name="uq_saved_user_recipe"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, index=True)
    recipe_id: Mapped[int] = mapped_column(ForeignKey("recipes.id"))
    saved_at: Mapped[datetime] = mapped_column(UtcDateTime, server_default=func.now())


async def init_models(eng: AsyncEngine) -> None:
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# ───────── store ─────────────────────────────────────────────────────


def _to_recipe(row: RecipeRow, **extra) -> Recipe:
    return Recipe.model_validate(row, from_attributes=True).model_copy(update=extra)


class SqlRecipeStore:
    def __init__(self, eng: AsyncEngine) -> None:
        self._engine = eng
        self._sessions = async_sessionmaker(eng, expire_on_commit=False)

    async def count_recipes(self) -> int:
        async with self._sessions() as db:
            return (await db.execute(select(func.count()).select_from(RecipeRow))).scalar_one()

    async def list_recipes(self) -> list[Recipe]:
        async with self._sessions() as db:
            rows = (await db.execute(select(RecipeRow).order_by(RecipeRow.id))).scalars().all()
        return [_to_recipe(r) for r in rows]

    async def get_recipe(self, recipe_id: int) -> Recipe | None:
        async with self._sessions() as db:
            row = await db.get(RecipeRow, recipe_id)
        return _to_recipe(row) if row else None

    async def create_recipe(self, new: NewRecipe) -> Recipe:
        payload = new.model_dump(mode="json")
        row = RecipeRow(**payload)
        async with self._sessions() as db:
            db.add(row)
            await db.commit()
            await db.refresh(row)
        return _to_recipe(row)

    async def list_saved(self, user: UserContext) -> list[Recipe]:
        stmt = (
            select(RecipeRow)
            .join(SavedRecipeRow, SavedRecipeRow.recipe_id == RecipeRow.id)
            .where(SavedRecipeRow.user_id == user.user_id)
            .order_by(SavedRecipeRow.saved_at.desc(), SavedRecipeRow.id.desc())
        )
        async with self._sessions() as db:
            rows = (await db.execute(stmt)).scalars().all()
        return [_to_recipe(r, is_saved=True) for r in rows]

    async def is_saved(self, user: UserContext, recipe_id: int) -> bool:
        stmt = select(func.count()).select_from(SavedRecipeRow).where(
            SavedRecipeRow.user_id == user.user_id,
            SavedRecipeRow.recipe_id == recipe_id,
        )
        async with self._sessions() as db:
            return (await db.execute(stmt)).scalar_one() > 0

    async def save_recipe(self, user: UserContext, recipe_id: int) -> SavedRecipe:
        row = SavedRecipeRow(user_id=user.user_id, recipe_id=recipe_id)
        async with self._sessions() as db:
            db.add(row)
            try:
                await db.commit()
            except IntegrityError as exc:
                await db.rollback()
                raise AlreadySavedError(user.user_id, recipe_id) from exc
            await db.refresh(row)
        return SavedRecipe.model_validate(row, from_attributes=True)

    async def unsave_recipe(self, user: UserContext, recipe_id: int) -> None:
        async with self._sessions() as db:
            await db.execute(
                delete(SavedRecipeRow).where(
                    SavedRecipeRow.user_id == user.user_id,
                    SavedRecipeRow.recipe_id == recipe_id,
                )
            )
            await db.commit()
