from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

HeightUnit = Literal["cm", "ft"]
WeightUnit = Literal["kg", "lb"]


class HeightAnswer(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    value: str = ""
    unit: HeightUnit = "cm"
    inches: str | None = None       # only used when unit == "ft"


class WeightAnswer(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    value: str = ""
    unit: WeightUnit = "kg"


class UserProfile(BaseModel):
    """
    Answers collected during onboarding.

    Numbers stay as the raw strings the user typed; categorical answers are
    "" until chosen.  Only the nutrition calculator parses them.
    """

    height: HeightAnswer = Field(default_factory=HeightAnswer)
    weight: WeightAnswer = Field(default_factory=WeightAnswer)
    age: str = ""
    gender: str = ""                # male / female
    activity_level: str = ""        # sedentary … very_active
    goal: str = ""                  # bulk / cut
    goal_priority: str = ""         # aggressive / balanced / conservative

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        coerce_numbers_to_str=True,
    )
