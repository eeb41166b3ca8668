# api/v1/meal_ideas.py
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status

from config import Settings, get_settings
from services import gemini
from services.meal_ideas import Complete, generate_meal_ideas
from api.v1.schemas import ErrorOut, MealIdeasOut

_LOG = logging.getLogger(__name__)

router = APIRouter()


def get_completion() -> Complete:
    """Completion backend; overridden in tests."""
    return gemini.generate


async def _read_nutrition(request: Request) -> Any:
    try:
        body = await request.json()
    except ValueError:
        _LOG.info("meal-ideas request body is not JSON")
        return None
    return body.get("nutrition") if isinstance(body, dict) else None


@router.post(
    "",
    response_model=MealIdeasOut,
    status_code=status.HTTP_200_OK,
    summary="Suggest meals that fit a daily nutrition target",
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
async def create_meal_ideas(
    request: Request,
    cfg: Settings = Depends(get_settings),
    complete: Complete = Depends(get_completion),
) -> MealIdeasOut:
    """
    Body: `{"nutrition": {"calories", "protein", "carbs", "fat"}}`.

    Failures come back as `{"error": ...}` via the handler in `main.py`.
    """
    nutrition = await _read_nutrition(request)
    ideas = await generate_meal_ideas(nutrition, settings=cfg, complete=complete)
    return MealIdeasOut(meal_ideas=ideas)
