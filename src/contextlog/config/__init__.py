"""Config – environment-keyed logger configuration and env-based settings."""

from contextlog.config.schema import (
    DEFAULT_ENV_CONFIGS,
    STREAM_TYPES,
    EnvironmentConfig,
    LogConfig,
    SlackConfig,
    StreamConfig,
)
from contextlog.config.settings import EnvSettingsLoader, LoggingSettings

__all__ = [
    "DEFAULT_ENV_CONFIGS",
    "STREAM_TYPES",
    "EnvSettingsLoader",
    "EnvironmentConfig",
    "LogConfig",
    "LoggingSettings",
    "SlackConfig",
    "StreamConfig",
]
