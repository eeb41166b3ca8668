"""
core/errors.py
────────────────────────────────────────────────────────────────────────
Failures surfaced by the meal-idea round trip.

Every error carries a human-readable message and the HTTP status the API
answers with.  None of them is retried here; retry policy belongs to the
caller.
"""

from __future__ import annotations


class MealIdeaError(Exception):
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(MealIdeaError):
    """Credential or other required setting missing."""

    status_code = 500


class InputError(MealIdeaError):
    """Nutrition payload unusable; raised before any external call."""

    status_code = 400


class UpstreamError(MealIdeaError):
    """The completion service failed or returned no usable text."""

    status_code = 500


class ParseError(MealIdeaError):
    """Completion text did not match the meal-idea schema."""

    status_code = 500

    def __init__(self, message: str, problems: list[str] | None = None) -> None:
        super().__init__(message)
        self.problems = list(problems or [])
