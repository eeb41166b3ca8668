"""
core/meal_prompt.py
────────────────────────────────────────────────────────────────────────
Prompt for the meal-idea completion.  The example literal in the
instructions anchors the output shape `core.meal_parser` expects.
"""

from __future__ import annotations

from typing import Any, Mapping

from core.models.meal import NutritionResult

MIN_MEALS = 3
MAX_MEALS = 5

SYSTEM_INSTRUCTION = (
    "You are a helpful nutrition assistant that provides simple, "
    "beginner-friendly meal ideas with accurate macro calculations."
)

_EXAMPLE = """[
  {
    "mealType": "breakfast",
    "name": "Meal Name",
    "description": "Brief description of the meal",
    "macros": {
      "calories": 500,
      "protein": 30,
      "carbs": 50,
      "fat": 15
    },
    "cookingInstructions": [
      "Step 1: Prepare ingredients",
      "Step 2: Cook the main component",
      "Step 3: Add seasonings and serve"
    ]
  },
  ...
]"""


def build_meal_prompt(nutrition: NutritionResult | Mapping[str, Any]) -> str:
    if isinstance(nutrition, NutritionResult):
        nutrition = nutrition.model_dump()

    return (
        "You are a helpful nutrition assistant. "
        f"Generate {MIN_MEALS}-{MAX_MEALS} meal ideas based on the following daily nutrition plan:\n\n"
        "Daily Nutrition Targets:\n"
        f"- Calories: {nutrition.get('calories')} kcal\n"
        f"- Protein: {nutrition.get('protein')} g\n"
        f"- Carbohydrates: {nutrition.get('carbs')} g\n"
        f"- Fat: {nutrition.get('fat')} g\n\n"
        "Requirements:\n"
        f"1. Generate {MIN_MEALS}-{MAX_MEALS} meal ideas total, covering breakfast, lunch, and dinner\n"
        '2. Each meal should be clearly labeled as "breakfast", "lunch", or "dinner"\n'
        "3. Provide a simple, beginner-friendly meal name and brief description\n"
        "4. Include macro breakdown (calories, protein in grams, carbs in grams, "
        "fat in grams) for each meal\n"
        "5. Include cooking instructions as an array of step-by-step instructions\n"
        "6. Keep suggestions simple and practical for someone new to meal planning\n"
        "7. Ensure the meals together roughly align with the daily targets "
        "(they don't need to be exact, just reasonable)\n\n"
        "Format your response as a JSON array of objects with this structure:\n"
        f"{_EXAMPLE}\n\n"
        "Only return valid JSON, no additional text."
    )
