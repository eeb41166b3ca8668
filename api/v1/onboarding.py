# api/v1/onboarding.py
from __future__ import annotations

from fastapi import APIRouter
from pydantic.alias_generators import to_camel

from core.steps import OPTIONS, STEPS
from api.v1.schemas import OptionOut, StepOut

router = APIRouter()


@router.get("/steps", response_model=list[StepOut])
def list_steps() -> list[StepOut]:
    """Question order plus the choices for every categorical step."""
    return [
        StepOut(
            id=step.id,
            question=step.question,
            key=to_camel(step.key),
            kind=step.kind.value,
            options=[
                OptionOut(value=o.value, label=o.label, description=o.description)
                for o in OPTIONS.get(step.kind, ())
            ],
        )
        for step in STEPS
    ]
