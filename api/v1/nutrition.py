# api/v1/nutrition.py
from __future__ import annotations

from fastapi import APIRouter, status

from core.models.meal import NutritionResult
from core.models.profile import UserProfile
from core.nutrition_calc import NutritionalCalculator

router = APIRouter()
_calc = NutritionalCalculator()


@router.post(
    "",
    response_model=NutritionResult,
    status_code=status.HTTP_200_OK,
    summary="Daily calories and macros for an onboarding profile",
)
def calculate(body: UserProfile) -> NutritionResult:
    return _calc.targets(body)
