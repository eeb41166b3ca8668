"""
core/meal_parser.py
────────────────────────────────────────────────────────────────────────
Turn raw completion text into `MealIdea` objects.

The text is untrusted.  `check_meal_ideas()` never raises: it walks the
whole payload, collects every problem it sees and only hands back ideas
when there were none.  `parse_meal_ideas()` is the strict wrapper the
orchestrator uses; it raises `ParseError` carrying those problems.

Extraction order
----------------
1. body of a ```json fenced block
2. body of any fenced block
3. the whole text
"""

from __future__ import annotations

import json
import logging
import math
import re
from dataclasses import dataclass
from typing import Any

from core.errors import ParseError
from core.models.meal import MealIdea, MealMacros
from core.units import parse_number

_LOG = logging.getLogger(__name__)

PARSE_FAILED = "Failed to parse AI response"

MEAL_TYPES = ("breakfast", "lunch", "dinner")
MACRO_FIELDS = ("calories", "protein", "carbs", "fat")

_JSON_FENCE = re.compile(r"```[ \t]*json[ \t]*\r?\n(.*?)```", re.IGNORECASE | re.DOTALL)
_ANY_FENCE = re.compile(r"```[^\n`]*\r?\n(.*?)```", re.DOTALL)


@dataclass(frozen=True)
class MealIdeaCheck:
    ideas: tuple[MealIdea, ...] = ()
    problems: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.problems


def extract_json_payload(text: str) -> str:
    for pattern in (_JSON_FENCE, _ANY_FENCE):
        match = pattern.search(text)
        if match:
            return match.group(1).strip()
    return text.strip()


def check_meal_ideas(text: str) -> MealIdeaCheck:
    payload = extract_json_payload(text or "")
    try:
        data = json.loads(payload)
    except ValueError as exc:
        return MealIdeaCheck(problems=(f"invalid JSON: {exc}",))

    if not isinstance(data, list):
        return MealIdeaCheck(problems=(f"expected a JSON array, got {type(data).__name__}",))

    problems: list[str] = []
    ideas: list[MealIdea] = []
    for idx, item in enumerate(data):
        idea = _normalise(item, f"item {idx}", problems)
        if idea is not None:
            ideas.append(idea)

    if problems:
        # all-or-nothing: a partly valid plan is still rejected
        return MealIdeaCheck(problems=tuple(problems))
    return MealIdeaCheck(ideas=tuple(ideas))


def parse_meal_ideas(text: str) -> list[MealIdea]:
    check = check_meal_ideas(text)
    if not check.ok:
        _LOG.warning("meal-idea response rejected: %s", "; ".join(check.problems))
        raise ParseError(PARSE_FAILED, list(check.problems))
    return list(check.ideas)


# ───────────────────────── per-item helpers ─────────────────────────
def _normalise(item: Any, where: str, problems: list[str]) -> MealIdea | None:
    if not isinstance(item, dict):
        problems.append(f"{where}: expected an object")
        return None

    before = len(problems)

    meal_type = item.get("mealType")
    if not meal_type:
        problems.append(f"{where}: missing mealType")
    elif not isinstance(meal_type, str) or meal_type.strip().lower() not in MEAL_TYPES:
        problems.append(f"{where}: unknown mealType {meal_type!r}")

    name = item.get("name")
    if not name:
        problems.append(f"{where}: missing name")
    elif not isinstance(name, str):
        problems.append(f"{where}: name must be a string")

    macros = item.get("macros")
    if macros is None:
        problems.append(f"{where}: missing macros")
    elif not isinstance(macros, dict):
        problems.append(f"{where}: macros must be an object")
    else:
        values = {k: _macro(macros.get(k), f"{where}.macros.{k}", problems) for k in MACRO_FIELDS}

    if len(problems) > before:
        return None

    description = item.get("description")
    return MealIdea(
        meal_type=meal_type.strip().lower(),
        name=name,
        description=str(description) if description else "",
        macros=MealMacros(**values),
        cooking_instructions=_instructions(item.get("cookingInstructions")),
    )


def _macro(value: Any, where: str, problems: list[str]) -> int | float:
    if not value:                                   # absent, null, 0, ""
        return 0
    if isinstance(value, bool):
        problems.append(f"{where}: expected a number")
        return 0
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            problems.append(f"{where}: expected a finite number")
            return 0
        return value
    num = parse_number(value) if isinstance(value, str) else None
    if num is None:
        problems.append(f"{where}: expected a number, got {value!r}")
        return 0
    return int(num) if num.is_integer() else num


def _instructions(value: Any) -> tuple[str, ...]:
    if isinstance(value, list):
        return tuple(str(step) for step in value if step is not None)
    if isinstance(value, (str, int, float)) and not isinstance(value, bool) and value:
        return (str(value),)
    return ()
