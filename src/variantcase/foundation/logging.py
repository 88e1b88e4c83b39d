"""Logging setup for variantcase.

Modules log through standard-library loggers under the `variantcase`
namespace. `configure_logging` attaches a single stderr handler driven by
LoggingSettings: human-readable text for development, JSON lines (via orjson)
for log shippers.

Example:
    >>> from variantcase.foundation.logging import configure_logging, get_logger
    >>> configure_logging()
    >>> log = get_logger("demo")
    >>> log.debug("starting")
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import orjson

if TYPE_CHECKING:
    from .config import VariantcaseSettings

ROOT_LOGGER = "variantcase"
_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_HANDLER_NAME = "variantcase-default"


def get_logger(name: str) -> logging.Logger:
    """Return the namespaced logger `variantcase.<name>`."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(entry, default=str).decode()


def configure_logging(settings: VariantcaseSettings | None = None) -> logging.Logger:
    """Attach the stderr handler to the `variantcase` logger.

    Idempotent: a handler installed by an earlier call is replaced, never
    duplicated.
    """
    if settings is None:
        from .config import get_settings
        settings = get_settings()

    logger = logging.getLogger(ROOT_LOGGER)
    for existing in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JsonFormatter() if settings.logging.format == "json" else logging.Formatter(_TEXT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(settings.effective_log_level)
    return logger
