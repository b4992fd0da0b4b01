"""
contextlog – structured logging with per-request context and Slack alerts.

Import path convention::

    from contextlog.logger import Logger
    from contextlog.config import LogConfig, EnvironmentConfig, StreamConfig
    from contextlog.scope import logger_scope, LoggerContext
    from contextlog.adapters import with_logger_lambda

The most common names are re-exported here.
"""

from contextlog.adapters import LoggerScopeMiddleware, with_logger_lambda
from contextlog.config import EnvironmentConfig, LogConfig, SlackConfig, StreamConfig
from contextlog.errors import ConfigError, LoggerNotBoundError
from contextlog.factory import create_logger, get_logger
from contextlog.levels import LogLevel, is_level_enabled
from contextlog.logger import Logger
from contextlog.notifications import SlackNotifier
from contextlog.scope import ExecutionScope, LoggerContext, LoggerScope, logger_scope

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "EnvironmentConfig",
    "ExecutionScope",
    "LogConfig",
    "LogLevel",
    "Logger",
    "LoggerContext",
    "LoggerNotBoundError",
    "LoggerScope",
    "LoggerScopeMiddleware",
    "SlackConfig",
    "SlackNotifier",
    "StreamConfig",
    "__version__",
    "create_logger",
    "get_logger",
    "is_level_enabled",
    "logger_scope",
    "with_logger_lambda",
]
