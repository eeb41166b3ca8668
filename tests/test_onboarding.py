"""
State machine for the onboarding questionnaire – transitions, per-step
validation boundaries and unit toggling.
"""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.onboarding import (
    Answering,
    OnboardingSession,
    Results,
    next_phase,
    previous_phase,
    validate_step,
)
from core.models.profile import UserProfile
from core.steps import STEPS, StepKind

N = len(STEPS)

ANSWERS = {
    "height": {"value": "180", "unit": "cm"},
    "weight": {"value": "80", "unit": "kg"},
    "age": "30",
    "gender": "male",
    "activity_level": "moderate",
    "goal": "cut",
    "goal_priority": "aggressive",
}


def _step(kind: StepKind):
    return next(s for s in STEPS if s.kind is kind)


def _complete_session() -> OnboardingSession:
    s = OnboardingSession()
    for step in STEPS:
        s.set_answer(step.key, ANSWERS[step.key])
        s.advance()
    return s


# ── pure transitions ────────────────────────────────────────────────
def test_next_phase_blocked_when_invalid():
    assert next_phase(Answering(2), N, valid=False) == Answering(2)


def test_next_phase_last_step_goes_to_results():
    assert next_phase(Answering(N - 1), N, valid=True) == Results()
    assert next_phase(Results(), N, valid=True) == Results()


def test_previous_phase():
    assert previous_phase(Results(), N) == Answering(N - 1)
    assert previous_phase(Answering(3), N) == Answering(2)
    assert previous_phase(Answering(0), N) == Answering(0)


# ── session flow ────────────────────────────────────────────────────
def test_initial_state():
    s = OnboardingSession()
    assert s.phase == Answering(0)
    assert s.current_step is STEPS[0]
    assert s.profile == UserProfile()
    assert s.results is None
    assert s.validate_current_step() is False


def test_advance_is_noop_without_answer():
    s = OnboardingSession()
    s.advance()
    assert s.phase == Answering(0)


def test_full_walk_reaches_results():
    s = _complete_session()
    assert s.showing_results
    assert s.progress == 100.0
    res = s.results
    assert (res.calories, res.protein, res.carbs, res.fat) == (2259, 160, 261, 64)
    assert (res.bmi, res.bmr) == (24.7, 1780)


def test_retreat_from_results_and_first_step():
    s = _complete_session()
    s.retreat()
    assert s.phase == Answering(N - 1)
    assert s.profile.goal_priority == "aggressive"   # answers survive
    for _ in range(N + 2):
        s.retreat()
    assert s.phase == Answering(0)


def test_progress_per_step():
    s = OnboardingSession()
    assert s.progress == pytest.approx(100 / N)
    s.set_answer("height", {"value": "170", "unit": "cm"})
    s.advance()
    assert s.progress == pytest.approx(200 / N)


def test_validate_is_pure():
    s = OnboardingSession()
    s.set_answer("height", {"value": "170", "unit": "cm"})
    before = s.profile.model_copy(deep=True)
    assert s.validate_current_step() and s.validate_current_step()
    assert s.profile == before
    assert s.phase == Answering(0)


def test_set_answer_unknown_key():
    with pytest.raises(KeyError):
        OnboardingSession().set_answer("shoe_size", "44")


def test_set_answer_rejects_uncoercible_value():
    s = OnboardingSession()
    with pytest.raises(ValidationError):
        s.set_answer("gender", None)
    assert s.profile.gender == ""


def test_set_answer_accepts_unknown_choice_but_blocks_advance():
    s = OnboardingSession()
    s.phase = Answering(3)
    s.set_answer("gender", "other")
    assert not s.validate_current_step()
    s.advance()
    assert s.phase == Answering(3)


def test_height_answer_unit_drives_validation():
    s = OnboardingSession()
    s.set_answer("height", {"value": "250", "unit": "ft", "inches": "0"})
    assert s.height_unit == "ft"
    assert s.validate_current_step() is False       # 7620 cm
    s.advance()
    assert s.phase == Answering(0)

    s.set_answer("height", {"value": "5", "unit": "ft", "inches": "11"})
    assert s.validate_current_step()
    s.advance()
    s.set_answer("weight", {"value": "1102.4", "unit": "lb"})
    assert s.weight_unit == "lb"
    assert s.validate_current_step() is False       # just over 500 kg


# ── validation boundaries ───────────────────────────────────────────
@pytest.mark.parametrize(
    "value, ok",
    [("300", True), ("300.1", False), ("0", False), ("-5", False), ("", False), ("abc", False), ("0.5", True)],
)
def test_height_cm_bounds(value, ok):
    p = UserProfile(height={"value": value, "unit": "cm"})
    assert validate_step(_step(StepKind.height), p, "cm", "kg") is ok


@pytest.mark.parametrize(
    "feet, inches, ok",
    [
        ("5", "11", True),
        ("5", "0", True),
        ("5", "", False),
        ("0", "11", False),
        ("5", "-1", False),
        ("9", "10", True),     # 299.72 cm
        ("9", "11", False),    # 302.26 cm
    ],
)
def test_height_ft_bounds(feet, inches, ok):
    p = UserProfile(height={"value": feet, "unit": "ft", "inches": inches})
    assert validate_step(_step(StepKind.height), p, "ft", "kg") is ok


@pytest.mark.parametrize(
    "value, unit, ok",
    [
        ("500", "kg", True),
        ("500.1", "kg", False),
        ("0", "kg", False),
        ("1102.3", "lb", True),
        ("1102.4", "lb", False),
        ("", "lb", False),
    ],
)
def test_weight_bounds(value, unit, ok):
    p = UserProfile(weight={"value": value, "unit": unit})
    assert validate_step(_step(StepKind.weight), p, "cm", unit) is ok


@pytest.mark.parametrize("age, ok", [("120", True), ("121", False), ("1", True), ("0", False), ("", False)])
def test_age_bounds(age, ok):
    p = UserProfile(age=age)
    assert validate_step(_step(StepKind.number), p, "cm", "kg") is ok


@pytest.mark.parametrize(
    "kind, key, good, bad",
    [
        (StepKind.gender, "gender", "female", "other"),
        (StepKind.select, "activity_level", "very_active", "extreme"),
        (StepKind.goal, "goal", "bulk", "maintain"),
        (StepKind.goal_priority, "goal_priority", "balanced", "fast"),
    ],
)
def test_categorical_steps(kind, key, good, bad):
    step = _step(kind)
    assert validate_step(step, UserProfile(**{key: good}), "cm", "kg")
    assert not validate_step(step, UserProfile(**{key: bad}), "cm", "kg")
    assert not validate_step(step, UserProfile(), "cm", "kg")


# ── unit toggles ────────────────────────────────────────────────────
def test_set_unit_converts_stored_height():
    s = OnboardingSession()
    s.set_answer("height", {"value": "180", "unit": "cm"})
    s.set_unit("height", "ft")
    assert s.height_unit == "ft"
    assert (s.profile.height.value, s.profile.height.inches) == ("5", "11")
    assert s.validate_current_step()


def test_set_unit_converts_stored_weight():
    s = OnboardingSession()
    s.set_answer("weight", {"value": "80", "unit": "kg"})
    s.set_unit("weight", "lb")
    assert s.weight_unit == "lb"
    assert s.profile.weight.value == "176.4"


def test_set_unit_rejects_unknown_dimension():
    with pytest.raises(ValueError):
        OnboardingSession().set_unit("volume", "l")
