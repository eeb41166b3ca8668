"""
Centralised settings loader.

Everything is read from the environment (or a local `.env` file) through
pydantic-settings; field names map to upper-case env vars.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ─────────────────────────────────────────────────────
    env_name: str = Field("local")
    log_level: str = Field("INFO")

    # ─── Gemini ──────────────────────────────────────────────────────
    gemini_api_key: str | None = Field(None)
    gemini_model: str = Field("models/gemini-2.0-flash")

    # meal-idea generation knobs
    meal_temperature: float = Field(0.7, ge=0.0, le=2.0)
    meal_max_output_tokens: int = Field(2500, gt=0)   # room for 5 meals + steps
    meal_request_timeout_s: float = Field(60.0, gt=0)

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore", env_file=".env", env_file_encoding="utf-8"
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def get_settings() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


Settings = _Settings
settings: _Settings = get_settings()
