"""Configuration errors, raised while a logger is being constructed."""

from __future__ import annotations

from typing import Any

from contextlog.errors.base import BaseError


class ConfigError(BaseError):
    """Raised when logging configuration is invalid or incomplete."""

    default_code = "config_error"


class UnknownStreamTypeError(ConfigError):
    """A stream descriptor names a type outside the supported set."""

    default_code = "unknown_stream_type"

    def __init__(self, stream_type: Any) -> None:
        super().__init__(
            f"Unknown stream type: {stream_type}",
            detail={"type": str(stream_type)},
        )
        self.stream_type = stream_type


class MissingStreamPathError(ConfigError):
    """A ``file`` stream descriptor has no ``path``."""

    default_code = "missing_stream_path"

    def __init__(self) -> None:
        super().__init__("File path is required for file streams")


class UnknownEnvironmentError(ConfigError):
    """Neither the user config nor the defaults describe the environment."""

    default_code = "unknown_environment"

    def __init__(self, environment: str) -> None:
        super().__init__(
            f"Invalid or missing configuration for environment: {environment}",
            detail={"environment": environment},
        )
        self.environment = environment


class InvalidLogLevelError(ConfigError):
    """A level name is not one of the six known severities."""

    default_code = "invalid_log_level"

    def __init__(self, level: Any) -> None:
        super().__init__(f"Invalid log level: {level!r}", detail={"level": repr(level)})
        self.level = level


__all__ = [
    "ConfigError",
    "InvalidLogLevelError",
    "MissingStreamPathError",
    "UnknownEnvironmentError",
    "UnknownStreamTypeError",
]
