# api/v1/router.py
from fastapi import APIRouter

from . import meal_ideas, nutrition, onboarding

api_router = APIRouter()

api_router.include_router(onboarding.router, prefix="/onboarding", tags=["Onboarding"])
api_router.include_router(nutrition.router, prefix="/nutrition", tags=["Nutrition"])
api_router.include_router(meal_ideas.router, prefix="/meal-ideas", tags=["Meal ideas"])
