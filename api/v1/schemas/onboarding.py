from __future__ import annotations

from pydantic import BaseModel


class OptionOut(BaseModel):
    value: str
    label: str
    description: str = ""


class StepOut(BaseModel):
    id: int
    question: str
    key: str                    # profile field, camelCase as in the JSON body
    kind: str
    options: list[OptionOut] = []
