# api/v1/assistant.py
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from api.v1.deps import get_chef, get_generator
from api.v1.schemas import ChatIn
from core.chat import ChatReply, ChefChat
from core.generation import RecipeGenerator
from core.models import Recipe, RecipeGenerationRequest, Suggestion

router = APIRouter()


@router.post(
    "/generate",
    response_model=Recipe,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Generate and store a recipe from a free-text description",
)
async def generate_recipe(
    body: RecipeGenerationRequest,
    generator: RecipeGenerator = Depends(get_generator),
) -> Recipe:
    return await generator.generate(body)


@router.get(
    "/suggest",
    response_model=list[Suggestion],
    summary="Three quick recipe ideas for a query",
)
async def suggest_recipes(
    query: str = "",
    generator: RecipeGenerator = Depends(get_generator),
) -> list[Suggestion]:
    return await generator.suggest(query)


@router.post("/chat", response_model=ChatReply)
async def chat(
    body: ChatIn,
    chef: ChefChat = Depends(get_chef),
) -> ChatReply:
    return await chef.chat(body.message)
