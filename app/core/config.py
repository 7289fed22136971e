"""Application configuration via Pydantic Settings.

Reads environment variables (and optional .env file) and validates them
at startup. Use ``get_settings()`` to obtain a cached singleton.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.i18n import parse_language, supported_languages


class Settings(BaseSettings):
    """Validated application settings sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # --- Site --------------------------------------------------------------
    SITE_NAME: str = "Vertex Solutions"
    CONTACT_EMAIL: str = "hello@vertex-solutions.example"
    CONTACT_PHONE: str = "+966 50 000 0000"

    # --- Language ----------------------------------------------------------
    DEFAULT_LANGUAGE: str = "en"
    LANGUAGE_COOKIE_MAX_AGE_DAYS: int = 365
    STRICT_TRANSLATIONS: bool = True

    # --- Runtime -----------------------------------------------------------
    LOG_LEVEL: str = "INFO"
    PORT: int = 8000

    # --- Validators ------------------------------------------------------
    @property
    def language_cookie_max_age(self) -> int:
        """Cookie lifetime in seconds."""
        return self.LANGUAGE_COOKIE_MAX_AGE_DAYS * 24 * 60 * 60

    @field_validator("DEFAULT_LANGUAGE")
    @classmethod
    def _validate_default_language(cls, v: str) -> str:
        code = parse_language(v)
        if code is None:
            raise ValueError(
                f"DEFAULT_LANGUAGE must be one of {', '.join(supported_languages())}"
            )
        return code

    @field_validator("LANGUAGE_COOKIE_MAX_AGE_DAYS", "PORT")
    @classmethod
    def _validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Value must be positive")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("LOG_LEVEL must be a standard logging level name")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings singleton."""
    return Settings()
