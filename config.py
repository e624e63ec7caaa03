"""
Centralised settings loader.

Values come from the process environment (or a local `.env` file) and are
resolved once at import time.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ────────────────────────────────────────────────────
    env_name: str = "local"
    log_level: str = "INFO"

    # ─── Gemini ─────────────────────────────────────────────────────
    gemini_api_key: str | None = Field(
        None, validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY")
    )
    gemini_model: str = "gemini-2.5-flash"
    gemini_timeout_s: float = Field(30.0, gt=0)

    # ─── tracker ────────────────────────────────────────────────────
    daily_calorie_goal: int = Field(2000, gt=0)

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


settings: _Settings = get_settings()
