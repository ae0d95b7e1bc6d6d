"""
Application configuration models and helpers.

Centralizes settings management so the API process and the operator scripts
share one configuration surface.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1"
DEFAULT_GATEWAY_MODEL = "google/gemini-2.5-flash"
ENV_FILE = ".env"


class GatewaySettings(BaseSettings):
    """Configuration for the hosted chat-completion gateway."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix="AI_GATEWAY_",
        env_ignore_empty=True,
        populate_by_name=True,
        extra="ignore",
    )

    api_key: Optional[str] = Field(
        None,
        validation_alias="LOVABLE_API_KEY",
        description="Bearer credential for the gateway. Requests fail without it.",
    )
    base_url: str = Field(DEFAULT_GATEWAY_URL)
    model: str = Field(DEFAULT_GATEWAY_MODEL)
    timeout_seconds: float = Field(
        60.0,
        gt=0,
        description="Upper bound for a single generation call.",
    )
    rate_limit_retries: int = Field(
        0,
        ge=0,
        le=5,
        description="Extra attempts after a 429. Zero keeps every failure terminal.",
    )
    retry_backoff_seconds: float = Field(1.0, ge=0)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.api_key.strip())


class AppSettings(BaseSettings):
    """Root settings object for the API process."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    environment: str = Field("development", validation_alias="APP_ENV")
    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")
    narrative_sectioning: bool = Field(
        False,
        validation_alias="NARRATIVE_SECTIONING",
        description="Also return the narrative report split into its four sections.",
    )
    enforce_unique_idea_categories: bool = Field(
        True,
        validation_alias="ENFORCE_UNIQUE_IDEA_CATEGORIES",
        description="Reject idea sets that do not cover each category exactly once.",
    )
    gateway: GatewaySettings = Field(default_factory=GatewaySettings)

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        """Accept any case, reject names the logging module does not know."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env_file(cls, path: Union[str, Path]) -> "AppSettings":
        """Load root and nested gateway settings from one specific env file."""
        return cls(_env_file=path, gateway=GatewaySettings(_env_file=path))


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()


__all__ = [
    "AppSettings",
    "DEFAULT_GATEWAY_MODEL",
    "DEFAULT_GATEWAY_URL",
    "GatewaySettings",
    "get_settings",
]
