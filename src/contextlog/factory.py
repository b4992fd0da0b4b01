"""Logger factories built on :mod:`contextlog.scope`."""
from __future__ import annotations

from typing import Any, Callable, NamedTuple

from contextlog.config.schema import LogConfig
from contextlog.config.settings import LoggingSettings
from contextlog.logger import Logger
from contextlog.scope import LoggerScope, logger_scope


class LoggerHandle(NamedTuple):
    """A freshly built logger plus a lookup for the scope's current logger."""

    logger: Logger
    get_logger: Callable[[], Logger]


def create_logger(config: LogConfig, scope: LoggerScope = logger_scope, **kwargs: Any) -> LoggerHandle:
    """Build a :class:`Logger` for *config*.

    The returned ``get_logger`` reads *scope* and raises
    :class:`~contextlog.errors.LoggerNotBoundError` outside a scope; binding
    the logger is left to the caller (or to :func:`with_logger_lambda`).
    """
    return LoggerHandle(logger=Logger(config, **kwargs), get_logger=scope.get_logger)


def get_logger(
    scope: LoggerScope = logger_scope,
    config: LogConfig | None = None,
    *,
    environment: str | None = None,
    **kwargs: Any,
) -> Logger:
    """Return the scope's logger, creating and binding one when none is bound.

    A created logger uses *config*, or ``LogConfig`` built from
    ``LOG_NAME`` / ``LOG_SLACK_API_TOKEN`` when *config* is omitted. It is
    bound with :meth:`~contextlog.scope.ExecutionScope.enter_with`, so later
    lookups in the same context return it.
    """
    current = scope.get_current()
    if current is not None and current.logger is not None:
        return current.logger

    settings = LoggingSettings.from_env()
    if config is None:
        config = LogConfig(name=settings.name, slack_api_token=settings.slack_api_token)
    logger = Logger(config, environment=environment or settings.env, **kwargs)
    scope.bind(logger)
    return logger


__all__ = ["LoggerHandle", "create_logger", "get_logger"]
