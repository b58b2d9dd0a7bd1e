from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SaveRecipeIn(BaseModel):
    recipe_id: int = Field(..., alias="recipeId")

    model_config = ConfigDict(populate_by_name=True)
