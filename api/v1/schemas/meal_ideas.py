from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.models.meal import MealIdea


class MealIdeasOut(BaseModel):
    meal_ideas: list[MealIdea] = Field(default_factory=list)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorOut(BaseModel):
    error: str = Field(..., examples=["Invalid nutrition data provided"])
