# app/config.py
"""
Centralized configuration with validation.

Uses pydantic-settings to load and validate environment variables. Values
that operators type by hand (like the collections string) are kept raw here
and parsed by the component that owns them.
"""

import logging
import os
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Collections
    REDLIB_COLLECTIONS: str | None = Field(
        default=None,
        description="Semicolon-separated alias=target pairs, e.g. 'ai=singularity+claude;news=worldnews'",
    )

    # JSON API
    JSON_BODY_TRUNCATE_CHARS: int | None = Field(
        default=None,
        description="Override for the default post body truncation limit (characters). Empty = built-in default.",
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    LOG_JSON: bool = Field(
        default=True,
        description="Emit single-line JSON logs (False = human-readable)",
    )

    # Application
    ENVIRONMENT: str = Field(
        default="development",
        description="Environment: development, staging, production",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{v}'")
        return level

    @field_validator("JSON_BODY_TRUNCATE_CHARS")
    @classmethod
    def positive_truncate_limit(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("JSON_BODY_TRUNCATE_CHARS must be positive")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings. Call at startup to validate config."""
    return Settings()


def get_setting(name: str) -> str | None:
    """
    Look up a single setting by name as a string.

    Declared settings are read through Settings (so .env files apply);
    anything else falls back to the process environment. Unset and blank
    values both come back as None.
    """
    settings = get_settings()
    if name in Settings.model_fields:
        value = getattr(settings, name)
    else:
        value = os.environ.get(name)

    if value is None:
        return None
    value = str(value)
    return value if value.strip() else None
