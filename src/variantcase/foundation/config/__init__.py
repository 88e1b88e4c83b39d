"""Configuration management using pydantic-settings."""

from .settings import (
    LoggingSettings,
    MatchSettings,
    VariantcaseSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "LoggingSettings",
    "MatchSettings",
    "VariantcaseSettings",
    "clear_settings_cache",
    "get_settings",
]
