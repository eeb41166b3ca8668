"""
core/nutrition_calc.py
────────────────────────────────────────────────────────────────────────
Daily nutrition target from an onboarding profile:

1. BMI  (kg / m², 1 decimal)
2. BMR  (Mifflin–St Jeor)
3. TDEE (activity multiplier)
4. Goal-adjusted calories (bulk surplus / cut deficit, placed by priority)
5. Bodyweight-anchored macros, carbs take whatever calories remain

All tables live in `NutritionConfig`; the calculator holds no other state,
so the same profile always gives the same result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from core.models.meal import NutritionResult
from core.models.profile import UserProfile
from core.steps import ActivityLevel, Goal, GoalPriority
from core.units import KG_PER_LB, ft_in_to_cm, parse_number, round_half_up

Logger = logging.getLogger(__name__)

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


# ──────────────────────────────────────────────────────────────────────
#  Config
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class NutritionConfig:
    activity_multipliers: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType({
            ActivityLevel.sedentary.value: 1.2,
            ActivityLevel.light.value: 1.375,
            ActivityLevel.moderate.value: 1.55,
            ActivityLevel.active.value: 1.725,
            ActivityLevel.very_active.value: 1.9,
        })
    )
    fallback_activity: str = ActivityLevel.sedentary.value
    surplus_kcal: tuple[float, float] = (250, 400)    # bulk (min, max)
    deficit_kcal: tuple[float, float] = (300, 500)    # cut  (min, max)
    protein_g_per_kg: float = 2.0
    fat_g_per_kg: float = 0.8


DEFAULT_CONFIG = NutritionConfig()


# ──────────────────────────────────────────────────────────────────────
#  Normalised body metrics
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class BodyMetrics:
    weight_kg: float
    height_cm: float
    age: float
    gender: str = ""
    activity_level: str = ""
    goal: str = ""
    goal_priority: str = ""

    @classmethod
    def from_profile(cls, p: UserProfile) -> "BodyMetrics":
        if p.height.unit == "ft":
            height_cm = ft_in_to_cm(
                parse_number(p.height.value) or 0.0,
                parse_number(p.height.inches) or 0.0,
            )
        else:
            height_cm = parse_number(p.height.value) or 0.0

        weight = parse_number(p.weight.value) or 0.0
        weight_kg = weight * KG_PER_LB if p.weight.unit == "lb" else weight

        return cls(
            weight_kg=weight_kg,
            height_cm=height_cm,
            age=parse_number(p.age) or 0.0,
            gender=p.gender,
            activity_level=p.activity_level,
            goal=p.goal,
            goal_priority=p.goal_priority,
        )


# ──────────────────────────────────────────────────────────────────────
#  Calculator
# ──────────────────────────────────────────────────────────────────────
class NutritionalCalculator:
    """Source-of-truth for kcal + macros shown on the results screen."""

    def __init__(self, config: NutritionConfig = DEFAULT_CONFIG) -> None:
        self._cfg = config

    # --------------- public entrypoint --------------------------------
    def targets(self, profile: UserProfile) -> NutritionResult:
        m = BodyMetrics.from_profile(profile)
        kcal = self.daily_calories(m)
        macros = self.macros(m, kcal)
        return NutritionResult(
            calories=kcal,
            bmi=self.bmi(m),
            bmr=int(round_half_up(self.bmr(m))),
            **macros,
        )

    # --------------- BMI / BMR / TDEE -------------------------------
    def bmi(self, m: BodyMetrics) -> float:
        height_m = m.height_cm / 100
        if height_m <= 0:
            return 0.0
        return round_half_up(m.weight_kg / (height_m * height_m), 1)

    def bmr(self, m: BodyMetrics) -> float:
        base = 10 * m.weight_kg + 6.25 * m.height_cm - 5 * m.age
        return base - 161 if m.gender == "female" else base + 5

    def activity_multiplier(self, activity_level: str) -> float:
        table = self._cfg.activity_multipliers
        if activity_level not in table:
            Logger.debug("unknown activity level %r → %s", activity_level, self._cfg.fallback_activity)
            return table[self._cfg.fallback_activity]
        return table[activity_level]

    def tdee(self, m: BodyMetrics) -> float:
        return self.bmr(m) * self.activity_multiplier(m.activity_level)

    # --------------- Calories ---------------------------------------
    def goal_adjustment(self, goal: str, priority: str) -> float:
        """Signed kcal offset from maintenance for the chosen goal."""
        if goal == Goal.bulk.value:
            return _pick(self._cfg.surplus_kcal, priority)
        if goal == Goal.cut.value:
            return -_pick(self._cfg.deficit_kcal, priority)
        return 0.0  # maintain

    def daily_calories(self, m: BodyMetrics) -> int:
        kcal = self.tdee(m) + self.goal_adjustment(m.goal, m.goal_priority)
        return int(round_half_up(kcal))

    # --------------- Macros -----------------------------------------
    def macros(self, m: BodyMetrics, kcal: int) -> dict[str, int]:
        protein_g = int(round_half_up(m.weight_kg * self._cfg.protein_g_per_kg))
        fat_g = int(round_half_up(m.weight_kg * self._cfg.fat_g_per_kg))
        remaining = kcal - protein_g * KCAL_PER_G_PROTEIN - fat_g * KCAL_PER_G_FAT
        # not clamped: tiny calorie budgets with heavy bodyweight go negative
        carbs_g = int(round_half_up(remaining / KCAL_PER_G_CARBS))
        return {"protein": protein_g, "carbs": carbs_g, "fat": fat_g}


def _pick(bounds: tuple[float, float], priority: str) -> float:
    low, high = bounds
    if priority == GoalPriority.aggressive.value:
        return high
    if priority == GoalPriority.conservative.value:
        return low
    return (low + high) / 2  # balanced or unset


def calculate_nutrition(
    profile: UserProfile, config: NutritionConfig = DEFAULT_CONFIG
) -> NutritionResult:
    return NutritionalCalculator(config).targets(profile)
