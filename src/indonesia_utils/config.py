"""Library configuration via environment variables with INDONESIA_UTILS_ prefix."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Indonesian locale utilities configuration.

    All settings are read from environment variables prefixed with
    ``INDONESIA_UTILS_``. None of them change formatting or parsing rules;
    they only tune the surrounding logging and result metadata.
    """

    model_config = SettingsConfigDict(env_prefix="INDONESIA_UTILS_")

    # ── Logging ─────────────────────────────────────────────────────────
    log_level: str = "INFO"

    # ── Parsing results ─────────────────────────────────────────────────
    currency_code: str = Field(default="IDR", min_length=3, max_length=3)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value}")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    return Settings()
