"""
core/onboarding.py
────────────────────────────────────────────────────────────────────────
Onboarding questionnaire as an explicit state machine.

A session is either `Answering(index)` (one of the registered steps) or
`Results`.  `next_phase` / `previous_phase` are the only transitions;
`OnboardingSession` wraps them together with the profile being filled in
and the height/weight units the user is typing in.

Validation is a plain predicate.  It blocks `advance()` but never raises;
a front end uses it to enable or disable its "Next" control.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal, Sequence, Union

from core.models.meal import NutritionResult
from core.models.profile import HeightUnit, UserProfile, WeightUnit
from core.nutrition_calc import DEFAULT_CONFIG, NutritionConfig, calculate_nutrition
from core.steps import CHOICES, STEPS, StepDefinition, StepKind
from core.units import convert_height, convert_weight, ft_in_to_cm, lb_to_kg, parse_number

_LOG = logging.getLogger(__name__)

MAX_HEIGHT_CM = 300
MAX_WEIGHT_KG = 500
MAX_AGE = 120


# ──────────────────────────────── phases ──────────────────────────────── #
@dataclass(frozen=True)
class Answering:
    index: int


@dataclass(frozen=True)
class Results:
    pass


Phase = Union[Answering, Results]


def next_phase(phase: Phase, step_count: int, valid: bool) -> Phase:
    if isinstance(phase, Results) or not valid:
        return phase
    if phase.index >= step_count - 1:
        return Results()
    return Answering(phase.index + 1)


def previous_phase(phase: Phase, step_count: int) -> Phase:
    if isinstance(phase, Results):
        return Answering(step_count - 1)
    if phase.index > 0:
        return Answering(phase.index - 1)
    return phase


# ────────────────────────────── validation ────────────────────────────── #
def _in_range(raw: str | None, upper: float) -> bool:
    val = parse_number(raw)
    return val is not None and 0 < val <= upper


def validate_step(
    step: StepDefinition,
    profile: UserProfile,
    height_unit: HeightUnit,
    weight_unit: WeightUnit,
) -> bool:
    """True when `profile` holds an acceptable answer for `step`."""
    kind = step.kind

    if kind is StepKind.height:
        h = profile.height
        if height_unit == "cm":
            return _in_range(h.value, MAX_HEIGHT_CM)
        feet, inches = parse_number(h.value), parse_number(h.inches)
        if feet is None or inches is None or feet <= 0 or inches < 0:
            return False
        return ft_in_to_cm(feet, inches) <= MAX_HEIGHT_CM

    if kind is StepKind.weight:
        if weight_unit == "kg":
            return _in_range(profile.weight.value, MAX_WEIGHT_KG)
        lb = parse_number(profile.weight.value)
        return lb is not None and lb > 0 and lb_to_kg(lb) <= MAX_WEIGHT_KG

    if kind is StepKind.number:
        return _in_range(getattr(profile, step.key), MAX_AGE)

    # categorical answers
    return getattr(profile, step.key) in CHOICES[kind]


# ─────────────────────────────── session ──────────────────────────────── #
class OnboardingSession:
    """One user's pass through the questionnaire, held in memory only."""

    def __init__(
        self,
        steps: Sequence[StepDefinition] = STEPS,
        config: NutritionConfig = DEFAULT_CONFIG,
    ) -> None:
        if not steps:
            raise ValueError("onboarding needs at least one step")
        self._steps = tuple(steps)
        self._config = config
        self.phase: Phase = Answering(0)
        self.profile = UserProfile()
        self.height_unit: HeightUnit = "cm"
        self.weight_unit: WeightUnit = "kg"

    # ---------- read-only views ----------
    @property
    def steps(self) -> tuple[StepDefinition, ...]:
        return self._steps

    @property
    def showing_results(self) -> bool:
        return isinstance(self.phase, Results)

    @property
    def current_step_index(self) -> int:
        if isinstance(self.phase, Results):
            return len(self._steps) - 1
        return self.phase.index

    @property
    def current_step(self) -> StepDefinition | None:
        if isinstance(self.phase, Results):
            return None
        return self._steps[self.phase.index]

    @property
    def progress(self) -> float:
        """Percent complete for a progress bar."""
        if self.showing_results:
            return 100.0
        return (self.current_step_index + 1) / len(self._steps) * 100

    @property
    def results(self) -> NutritionResult | None:
        if not self.showing_results:
            return None
        return calculate_nutrition(self.profile, self._config)

    # ---------- answers ----------
    def set_answer(self, key: str, value: Any) -> None:
        """
        Store one answer; never moves between steps.

        Any string (or number) is accepted for a known field, invalid
        choices are left to `validate_current_step()`.  Unknown keys raise
        `KeyError` and values pydantic cannot coerce (None, lists …) raise
        `ValidationError`; both are caller bugs, not user input.

        The stored height/weight answer owns its unit, so the session's
        display unit follows it.
        """
        if key not in UserProfile.model_fields:
            raise KeyError(f"unknown profile field {key!r}")
        setattr(self.profile, key, value)
        if key == "height":
            self.height_unit = self.profile.height.unit
        elif key == "weight":
            self.weight_unit = self.profile.weight.unit

    def set_unit(self, dimension: Literal["height", "weight"], unit: str) -> None:
        """Switch the unit for one dimension, converting the stored answer with it."""
        if dimension == "height":
            self.profile.height = convert_height(self.profile.height, unit)  # type: ignore[arg-type]
            self.height_unit = self.profile.height.unit
        elif dimension == "weight":
            self.profile.weight = convert_weight(self.profile.weight, unit)  # type: ignore[arg-type]
            self.weight_unit = self.profile.weight.unit
        else:
            raise ValueError(f"unknown dimension {dimension!r}")
        _LOG.debug("%s unit → %s", dimension, unit)

    # ---------- navigation ----------
    def validate_current_step(self) -> bool:
        step = self.current_step
        if step is None:
            return True
        return validate_step(step, self.profile, self.height_unit, self.weight_unit)

    def advance(self) -> Phase:
        self.phase = next_phase(self.phase, len(self._steps), self.validate_current_step())
        return self.phase

    def retreat(self) -> Phase:
        self.phase = previous_phase(self.phase, len(self._steps))
        return self.phase
