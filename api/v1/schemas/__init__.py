"""Re-export individual schema modules for easy imports."""

from .meal_ideas import ErrorOut, MealIdeasOut
from .onboarding import OptionOut, StepOut

__all__ = [
    "ErrorOut",
    "MealIdeasOut",
    "OptionOut",
    "StepOut",
]
