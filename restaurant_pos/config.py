"""Runtime configuration defaults for logging and display."""

from __future__ import annotations

import logging
import os

_DEBUG_LOG_ENV = "RESTAURANT_POS_DEBUG_LOG"
_LOG_LEVEL_ENV = "RESTAURANT_POS_LOG_LEVEL"

DEBUG_LOG_PATH = os.environ.get(_DEBUG_LOG_ENV, "").strip() or "/tmp/restaurant-pos-debug.log"
LOG_LEVEL = os.environ.get(_LOG_LEVEL_ENV, "").strip().upper() or "DEBUG"

CURRENCY_SYMBOL = "$"
REPORT_DATE_FORMAT = "%Y-%m-%d"


def resolve_log_level(name: str = LOG_LEVEL) -> int:
    """Map a level name to a logging level, falling back to DEBUG for unknown names."""
    level = logging.getLevelName(name.upper())
    if isinstance(level, int):
        return level
    return logging.DEBUG
