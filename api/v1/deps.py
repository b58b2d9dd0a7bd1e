# api/v1/deps.py
from __future__ import annotations

from fastapi import Depends, Request

from config import settings
from core.chat import ChefChat
from core.generation import RecipeGenerator
from core.matching import RecipeMatcher
from core.models import UserContext
from core.planner import MealPlanner
from services.gemini import TextGenerator
from services.store import RecipeStore


def get_store(request: Request) -> RecipeStore:
    return request.app.state.store


def get_llm(request: Request) -> TextGenerator:
    return request.app.state.llm


def get_user() -> UserContext:
    # single-user demo until real auth lands
    return UserContext(user_id=settings.default_user_id)


def get_matcher(store: RecipeStore = Depends(get_store)) -> RecipeMatcher:
    return RecipeMatcher(store)


def get_generator(
    request: Request,
    store: RecipeStore = Depends(get_store),
    llm: TextGenerator = Depends(get_llm),
) -> RecipeGenerator:
    return RecipeGenerator(store, llm, rng=getattr(request.app.state, "rng", None))


def get_chef(
    llm: TextGenerator = Depends(get_llm),
    matcher: RecipeMatcher = Depends(get_matcher),
) -> ChefChat:
    return ChefChat(llm, matcher)


def get_planner(llm: TextGenerator = Depends(get_llm)) -> MealPlanner:
    return MealPlanner(llm)
