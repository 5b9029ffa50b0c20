"""CLI configuration read from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from trek.core.log import LOG_LEVEL_ENV, parse_level

DEBUG_ENV = "TREK_DEBUG"
NO_PAUSE_ENV = "TREK_NO_PAUSE"
_DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class CliConfig:
    """Options controlling a single CLI run."""

    debug: bool = False
    pause_on_exit: bool = True
    log_level: str = _DEFAULT_LOG_LEVEL


def _flag_enabled(value: object) -> bool:
    return value == "1"


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and parse_level(value) is not None:
        return value.strip().upper()
    return _DEFAULT_LOG_LEVEL


def load_config(environ: Mapping[str, str] | None = None) -> CliConfig:
    """Load config from the environment, falling back to defaults."""
    env = os.environ if environ is None else environ
    return CliConfig(
        debug=_flag_enabled(env.get(DEBUG_ENV)),
        pause_on_exit=not _flag_enabled(env.get(NO_PAUSE_ENV)),
        log_level=_normalize_log_level(env.get(LOG_LEVEL_ENV)),
    )
