"""
core/units.py
────────────────────────────────────────────────────────────────────────
Height (cm ⇄ ft + in) and weight (kg ⇄ lb) conversion.

Profile answers are raw strings, so the `convert_*` helpers take and
return the answer models; a unit toggle always goes through them so a
stored number is never reinterpreted under the new unit.
"""

from __future__ import annotations

import math

from core.models.profile import HeightAnswer, HeightUnit, WeightAnswer, WeightUnit

CM_PER_INCH = 2.54
CM_PER_FOOT = 30.48
LB_PER_KG = 2.20462
KG_PER_LB = 0.453592


def parse_number(raw: str | float | None) -> float | None:
    """Lenient float parse; None for empty, junk, NaN or infinity."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        val = float(raw)
    else:
        text = str(raw).strip()
        if not text:
            return None
        try:
            val = float(text)
        except ValueError:
            return None
    return val if math.isfinite(val) else None


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Nearest-value rounding with ties going up (2.5 → 3, -2.5 → -2)."""
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale


def format_number(value: float) -> str:
    """Render a converted value the way a user would have typed it."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


# ───────────────────────── height ──────────────────────────
def ft_in_to_cm(feet: float, inches: float = 0.0) -> float:
    return feet * CM_PER_FOOT + inches * CM_PER_INCH


def cm_to_ft_in(cm: float) -> tuple[int, int]:
    total_in = cm / CM_PER_INCH
    feet = math.floor(total_in / 12)
    inches = int(round_half_up(total_in - feet * 12))
    if inches == 12:                     # 11.6 in rounds up to a full foot
        feet, inches = feet + 1, 0
    return feet, inches


def convert_height(answer: HeightAnswer, unit: HeightUnit) -> HeightAnswer:
    if answer.unit == unit:
        return answer

    current = parse_number(answer.value)
    if current is None or current <= 0:
        return HeightAnswer(
            value="",
            unit=unit,
            inches=(answer.inches or "") if unit == "ft" else None,
        )

    if unit == "ft":
        feet, inches = cm_to_ft_in(current)
        return HeightAnswer(value=str(feet), unit="ft", inches=str(inches))

    cm = ft_in_to_cm(current, parse_number(answer.inches) or 0.0)
    return HeightAnswer(value=format_number(round_half_up(cm)), unit="cm")


# ───────────────────────── weight ──────────────────────────
def kg_to_lb(kg: float) -> float:
    return kg * LB_PER_KG


def lb_to_kg(lb: float) -> float:
    return lb * KG_PER_LB


def convert_weight(answer: WeightAnswer, unit: WeightUnit) -> WeightAnswer:
    if answer.unit == unit:
        return answer

    current = parse_number(answer.value)
    if current is None or current <= 0:
        return WeightAnswer(value="", unit=unit)

    converted = kg_to_lb(current) if unit == "lb" else lb_to_kg(current)
    return WeightAnswer(value=format_number(round_half_up(converted, 1)), unit=unit)
