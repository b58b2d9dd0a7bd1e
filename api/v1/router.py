# api/v1/router.py
from fastapi import APIRouter

from . import assistant, planner, recipes, saved

api_router = APIRouter()

# fixed sub-paths first so /recipes/{recipe_id} does not swallow them
api_router.include_router(saved.router, prefix="/recipes/saved", tags=["Saved"])
api_router.include_router(assistant.router, prefix="/recipes", tags=["Assistant"])
api_router.include_router(recipes.router, prefix="/recipes", tags=["Recipes"])
api_router.include_router(planner.router, prefix="/meal-planner", tags=["Meal planner"])
