"""Logging setup shared by the CLI and services."""
from __future__ import annotations

import logging
import os
from typing import Optional

DEFAULT_LOGGER_NAME = "trek"
LOG_LEVEL_ENV = "TREK_LOG_LEVEL"
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DEFAULT_LEVEL = logging.WARNING

_configured = False


def parse_level(value: str | None) -> Optional[int]:
    """
    Map a string log level (e.g. 'DEBUG', 'info') to a logging constant.

    Returns None if the value is empty or unrecognized.
    """
    if not value:
        return None
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else None


def configure_logging(level: str | int | None = None, *, force: bool = False) -> logging.Logger:
    """
    Attach a stderr handler to the package logger and return it.

    ``level`` may be a level name or constant; when omitted the
    TREK_LOG_LEVEL environment variable is consulted. Calling again is a
    no-op unless ``force`` is True.
    """
    global _configured

    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    if _configured and not force:
        return logger

    if isinstance(level, int):
        resolved = level
    else:
        resolved = parse_level(level) or parse_level(os.getenv(LOG_LEVEL_ENV)) or _DEFAULT_LEVEL

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolved)
    _configured = True
    return logger
