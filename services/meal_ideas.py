"""
services/meal_ideas.py
────────────────────────────────────────────────────────────────────────
One round trip: nutrition target → prompt → Gemini → validated ideas.

Order of checks matters: the credential is looked at before anything
else so a misconfigured deployment never reaches the network, then the
payload, then the single completion call.  Nothing is retried.
"""
from __future__ import annotations

import asyncio
import logging
import numbers
from typing import Any, Awaitable, Callable, Mapping

import httpx
from google.genai import errors as gerrors

from config import Settings, get_settings
from core.errors import ConfigurationError, InputError, ParseError, UpstreamError
from core.meal_parser import parse_meal_ideas
from core.meal_prompt import SYSTEM_INSTRUCTION, build_meal_prompt
from core.models.meal import MealIdea, NutritionResult
from services import gemini

_LOG = logging.getLogger(__name__)

Complete = Callable[..., Awaitable[str]]

MISSING_KEY = "Gemini API key is not configured. Please set GEMINI_API_KEY environment variable."
BAD_INPUT = "Invalid nutrition data provided"
NO_TEXT = "No response from Gemini"
UPSTREAM_FAILED = "Failed to generate meal ideas. Please try again later."


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _check_nutrition(nutrition: Any) -> Mapping[str, Any]:
    if isinstance(nutrition, NutritionResult):
        return nutrition.model_dump()
    if not isinstance(nutrition, Mapping):
        raise InputError(BAD_INPUT)
    if not (_is_number(nutrition.get("calories")) and _is_number(nutrition.get("protein"))):
        raise InputError(BAD_INPUT)
    return nutrition


async def generate_meal_ideas(
    nutrition: NutritionResult | Mapping[str, Any] | None,
    *,
    settings: Settings | None = None,
    complete: Complete = gemini.generate,
) -> list[MealIdea]:
    cfg = settings or get_settings()

    # 1) credential first, before any network use
    if not cfg.gemini_api_key:
        raise ConfigurationError(MISSING_KEY)

    # 2) payload
    target = _check_nutrition(nutrition)

    # 3) single completion
    prompt = build_meal_prompt(target)
    _LOG.debug("requesting meal ideas for %s kcal", target.get("calories"))
    try:
        text = await asyncio.wait_for(
            complete(
                prompt,
                api_key=cfg.gemini_api_key,
                model=cfg.gemini_model,
                system_instruction=SYSTEM_INSTRUCTION,
                temperature=cfg.meal_temperature,
                max_output_tokens=cfg.meal_max_output_tokens,
            ),
            timeout=cfg.meal_request_timeout_s,
        )
    except asyncio.TimeoutError as exc:
        _LOG.error("Gemini call timed out after %.0fs", cfg.meal_request_timeout_s)
        raise UpstreamError(UPSTREAM_FAILED) from exc
    except (gerrors.APIError, httpx.HTTPError) as exc:
        _LOG.error("Gemini generation failed: %s", exc)
        raise UpstreamError(UPSTREAM_FAILED) from exc
    except Exception as exc:
        _LOG.exception("Gemini client raised unexpectedly")
        raise UpstreamError(UPSTREAM_FAILED) from exc

    # 4) usable text
    if not text or not text.strip():
        raise UpstreamError(NO_TEXT)

    # 5) validation; ParseError propagates unchanged
    try:
        return parse_meal_ideas(text)
    except ParseError:
        _LOG.debug("raw Gemini output >>> %s", text[:2000])
        raise
