from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

MealType = Literal["breakfast", "lunch", "dinner"]


class NutritionResult(BaseModel):
    calories: int
    protein: int        # g
    carbs: int          # g, may be negative for extreme inputs
    fat: int            # g
    bmi: float
    bmr: int

    model_config = ConfigDict(frozen=True)


class MealMacros(BaseModel):
    # whole numbers stay ints on the wire (500, not 500.0)
    calories: int | float = 0
    protein: int | float = 0
    carbs: int | float = 0
    fat: int | float = 0

    model_config = ConfigDict(frozen=True)


class MealIdea(BaseModel):
    meal_type: MealType
    name: str
    description: str = ""
    macros: MealMacros
    cooking_instructions: tuple[str, ...] = ()

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
