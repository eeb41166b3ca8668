"""
core/steps.py
────────────────────────────────────────────────────────────────────────
The onboarding questionnaire: ordered step definitions plus the
enumerations behind every categorical answer.

Everything here is read-only; `STEPS` is a tuple of frozen dataclasses
and the lookup tables are read-only mappings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class StepKind(str, Enum):
    height = "height"
    weight = "weight"
    number = "number"
    gender = "gender"
    select = "select"
    goal = "goal"
    goal_priority = "goalPriority"


class Gender(str, Enum):
    male = "male"
    female = "female"


class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"
    active = "active"
    very_active = "very_active"


class Goal(str, Enum):
    bulk = "bulk"
    cut = "cut"


class GoalPriority(str, Enum):
    aggressive = "aggressive"
    balanced = "balanced"
    conservative = "conservative"


@dataclass(frozen=True)
class StepDefinition:
    id: int
    question: str
    key: str            # UserProfile field name
    kind: StepKind


@dataclass(frozen=True)
class Option:
    value: str
    label: str
    description: str = ""


STEPS: tuple[StepDefinition, ...] = (
    StepDefinition(0, "What's your height?", "height", StepKind.height),
    StepDefinition(1, "What's your weight?", "weight", StepKind.weight),
    StepDefinition(2, "How old are you?", "age", StepKind.number),
    StepDefinition(3, "What's your gender?", "gender", StepKind.gender),
    StepDefinition(4, "What's your activity level?", "activity_level", StepKind.select),
    StepDefinition(5, "What's your goal?", "goal", StepKind.goal),
    StepDefinition(6, "How fast do you want to get there?", "goal_priority", StepKind.goal_priority),
)

GENDER_OPTIONS: tuple[Option, ...] = (
    Option(Gender.male.value, "Male"),
    Option(Gender.female.value, "Female"),
)

ACTIVITY_LEVELS: tuple[Option, ...] = (
    Option(ActivityLevel.sedentary.value, "Sedentary", "Little or no exercise"),
    Option(ActivityLevel.light.value, "Lightly active", "Training 1–3 days/week"),
    Option(ActivityLevel.moderate.value, "Moderately active", "Training 3–5 days/week"),
    Option(ActivityLevel.active.value, "Active", "Training 6–7 days/week"),
    Option(ActivityLevel.very_active.value, "Very active", "Very physical job or athlete"),
)

GOAL_OPTIONS: tuple[Option, ...] = (
    Option(Goal.bulk.value, "Bulk", "Build muscle with a calorie surplus"),
    Option(Goal.cut.value, "Cut", "Lose fat with a calorie deficit"),
)

GOAL_PRIORITY_OPTIONS: tuple[Option, ...] = (
    Option(GoalPriority.aggressive.value, "Aggressive", "Faster progress, bigger adjustment"),
    Option(GoalPriority.balanced.value, "Balanced", "Middle of the recommended range"),
    Option(GoalPriority.conservative.value, "Conservative", "Slower, steadier progress"),
)

# categorical step kind → accepted values
CHOICES: MappingProxyType[StepKind, frozenset[str]] = MappingProxyType({
    StepKind.gender: frozenset(g.value for g in Gender),
    StepKind.select: frozenset(a.value for a in ActivityLevel),
    StepKind.goal: frozenset(g.value for g in Goal),
    StepKind.goal_priority: frozenset(p.value for p in GoalPriority),
})

OPTIONS: MappingProxyType[StepKind, tuple[Option, ...]] = MappingProxyType({
    StepKind.gender: GENDER_OPTIONS,
    StepKind.select: ACTIVITY_LEVELS,
    StepKind.goal: GOAL_OPTIONS,
    StepKind.goal_priority: GOAL_PRIORITY_OPTIONS,
})
