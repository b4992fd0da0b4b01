"""Severity levels and the level gate shared by every sink."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from contextlog.errors import InvalidLogLevelError

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class LogLevel(str, Enum):
    """The six severities, declared from least to most severe."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"

    @classmethod
    def parse(cls, value: Any) -> "LogLevel":
        """Coerce a ``LogLevel`` or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise InvalidLogLevelError(value)

    @property
    def position(self) -> int:
        return _ORDER.index(self)

    @property
    def stdlib_level(self) -> int:
        return _STDLIB_LEVELS[self]


_ORDER: tuple[LogLevel, ...] = tuple(LogLevel)

_STDLIB_LEVELS: dict[LogLevel, int] = {
    LogLevel.TRACE: TRACE,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
}


def is_level_enabled(message_level: LogLevel | str, threshold_level: LogLevel | str) -> bool:
    """Return ``True`` when *message_level* is at or above *threshold_level*."""
    return LogLevel.parse(message_level).position >= LogLevel.parse(threshold_level).position


__all__ = ["TRACE", "LogLevel", "is_level_enabled"]
