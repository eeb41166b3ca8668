# tests/test_nutrition_calc.py
from __future__ import annotations

import math
from types import MappingProxyType

import pytest

from core.models.profile import UserProfile
from core.nutrition_calc import (
    BodyMetrics,
    NutritionConfig,
    NutritionalCalculator,
    calculate_nutrition,
)

calc = NutritionalCalculator()

MALE_80KG = UserProfile(
    height={"value": "180", "unit": "cm"},
    weight={"value": "80", "unit": "kg"},
    age="30",
    gender="male",
    activity_level="moderate",
    goal="cut",
    goal_priority="aggressive",
)


def _with(**changes) -> UserProfile:
    return UserProfile.model_validate({**MALE_80KG.model_dump(), **changes})


# ── BMI / BMR / TDEE ─────────────────────────────────────────────────
def test_bmi_one_decimal():
    assert calculate_nutrition(MALE_80KG).bmi == 24.7


def test_bmr_mifflin_male():
    expected = 10 * 80 + 6.25 * 180 - 5 * 30 + 5   # 1780
    m = BodyMetrics.from_profile(MALE_80KG)
    assert math.isclose(calc.bmr(m), expected)
    assert calculate_nutrition(MALE_80KG).bmr == 1780


def test_bmr_mifflin_female():
    res = calculate_nutrition(_with(gender="female"))
    assert res.bmr == 1780 - 5 - 161


def test_unset_gender_uses_male_offset():
    assert calculate_nutrition(_with(gender="")).bmr == 1780


def test_tdee_multiplier():
    m = BodyMetrics.from_profile(MALE_80KG)
    assert math.isclose(calc.tdee(m), 1780 * 1.55)


def test_unknown_activity_falls_back_to_sedentary():
    m = BodyMetrics.from_profile(_with(activity_level=""))
    assert math.isclose(calc.tdee(m), 1780 * 1.2)
    assert calc.activity_multiplier("couch") == 1.2


# ── goal adjustment ─────────────────────────────────────────────────
def test_cut_aggressive_calories():
    assert calculate_nutrition(MALE_80KG).calories == 2259


@pytest.mark.parametrize(
    "goal, priority, offset",
    [
        ("cut", "conservative", -300),
        ("cut", "balanced", -400),
        ("cut", "", -400),
        ("bulk", "aggressive", 400),
        ("bulk", "conservative", 250),
        ("bulk", "balanced", 325),
        ("", "aggressive", 0),
    ],
)
def test_goal_priority_offsets(goal, priority, offset):
    res = calculate_nutrition(_with(goal=goal, goal_priority=priority))
    assert res.calories == round(1780 * 1.55 + offset)


# ── macros ──────────────────────────────────────────────────────────
def test_macros_bodyweight_anchored():
    res = calculate_nutrition(MALE_80KG)
    assert res.protein == 160
    assert res.fat == 64
    assert res.carbs == 261      # (2259 - 640 - 576) / 4 = 260.75


def test_negative_carbs_pass_through():
    heavy_short = _with(
        height={"value": "100", "unit": "cm"},
        weight={"value": "200", "unit": "kg"},
        age="90",
        gender="female",
        activity_level="sedentary",
    )
    res = calculate_nutrition(heavy_short)
    assert res.carbs < 0
    assert res.carbs == round((res.calories - res.protein * 4 - res.fat * 9) / 4)


# ── units & junk input ──────────────────────────────────────────────
def test_imperial_profile_matches_metric():
    imperial = _with(
        height={"value": "5", "unit": "ft", "inches": "11"},
        weight={"value": "176.4", "unit": "lb"},
    )
    m = BodyMetrics.from_profile(imperial)
    assert math.isclose(m.height_cm, 5 * 30.48 + 11 * 2.54)
    assert math.isclose(m.weight_kg, 176.4 * 0.453592)


def test_unparsable_values_count_as_zero():
    res = calculate_nutrition(UserProfile())
    assert res.bmi == 0
    assert res.protein == 0 and res.fat == 0
    assert res.bmr == 5


def test_deterministic():
    assert calculate_nutrition(MALE_80KG) == calculate_nutrition(MALE_80KG.model_copy(deep=True))


def test_config_tables_are_injected():
    cfg = NutritionConfig(
        activity_multipliers=MappingProxyType({"sedentary": 1.0, "moderate": 2.0}),
        deficit_kcal=(100, 200),
    )
    res = calculate_nutrition(MALE_80KG, cfg)
    assert res.calories == 1780 * 2 - 200
