"""Environment-based configuration using pydantic-settings.

Example:
    >>> from variantcase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.match.strict
    True
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # VARIANTCASE_MATCH_STRICT=false
    # VARIANTCASE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MatchSettings(BaseSettings):
    """Dispatch behaviour."""

    model_config = SettingsConfigDict(
        env_prefix="VARIANTCASE_MATCH_",
        extra="ignore",
    )

    strict: bool = Field(
        default=True,
        description="Reject handler keys that name no declared case",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="VARIANTCASE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "text"] = "text"


class VariantcaseSettings(BaseSettings):
    """Root settings for variantcase.

    Example environment variables:
        VARIANTCASE_DEBUG=true
        VARIANTCASE_MATCH_STRICT=false
        VARIANTCASE_LOG_LEVEL=DEBUG
        VARIANTCASE_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="VARIANTCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    match: MatchSettings = Field(default_factory=MatchSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """Log level after applying debug mode."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> VariantcaseSettings:
    """Get the global settings instance (cached)."""
    return VariantcaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
