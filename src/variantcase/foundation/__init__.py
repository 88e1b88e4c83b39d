"""Foundation: configuration and logging shared by every module."""

from .config import (
    LoggingSettings,
    MatchSettings,
    VariantcaseSettings,
    clear_settings_cache,
    get_settings,
)
from .logging import JsonFormatter, configure_logging, get_logger

__all__ = [
    # Config
    "LoggingSettings", "MatchSettings", "VariantcaseSettings", "clear_settings_cache", "get_settings",
    # Logging
    "JsonFormatter", "configure_logging", "get_logger",
]
