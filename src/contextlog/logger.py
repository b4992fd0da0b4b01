"""Logger – context-carrying logger with a primary writer and a chat side channel.

Every log call:

1. merges the stored context with the call's ``extra`` (``extra`` wins);
2. hands the merged record, minus the ``slack`` routing key, to the writer
   synchronously;
3. when the level passes the notifier's gate, submits the notifier's ``send``
   to the background dispatcher with the full merged context, without
   waiting for it.

Primary writes from one logger keep call order. Notifications are unordered.
"""
from __future__ import annotations

import copy
from typing import Any, Mapping

from contextlog.background import BackgroundDispatcher
from contextlog.config.schema import EnvironmentConfig, LogConfig
from contextlog.config.settings import LoggingSettings
from contextlog.levels import LogLevel
from contextlog.notifications.client import ChatClient
from contextlog.notifications.notifier import SLACK_CONTEXT_KEY, SlackNotifier
from contextlog.notifications.slack import SlackWebClient
from contextlog.writer.protocol import LogWriter
from contextlog.writer.structlog_writer import StructlogWriter

Context = Mapping[str, Any]


class Logger:
    """Structured logger bound to one environment's streams.

    Parameters
    ----------
    config:
        Environment-keyed :class:`~contextlog.config.LogConfig`.
    environment:
        Environment to resolve. Defaults to ``LOG_ENV`` (``"local"``).
    writer:
        Primary writer. Defaults to a :class:`StructlogWriter` for the
        environment's streams.
    chat_client:
        Client used by the notifier. Defaults to a :class:`SlackWebClient`
        for ``config.slack_api_token``.

    Raises
    ------
    UnknownEnvironmentError
        Neither *config* nor the defaults describe *environment*.
    UnknownStreamTypeError, MissingStreamPathError
        A stream descriptor is invalid.
    """

    def __init__(
        self,
        config: LogConfig,
        *,
        environment: str | None = None,
        writer: LogWriter | None = None,
        chat_client: ChatClient | None = None,
    ) -> None:
        self.environment = environment or LoggingSettings.from_env().env
        env_config: EnvironmentConfig = config.resolve(self.environment)
        env_config.validate()

        self.name = config.name
        self._context: dict[str, Any] = {}
        self._writer: LogWriter = writer if writer is not None else StructlogWriter.create(config.name, env_config.streams)
        self._dispatcher = BackgroundDispatcher()
        self._notifier: SlackNotifier | None = None
        if config.slack_api_token and env_config.slack is not None:
            client = chat_client if chat_client is not None else SlackWebClient(config.slack_api_token)
            self._notifier = SlackNotifier(env_config.slack, client)

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    @property
    def writer(self) -> LogWriter:
        return self._writer

    @property
    def notifier(self) -> SlackNotifier | None:
        return self._notifier

    @property
    def dispatcher(self) -> BackgroundDispatcher:
        return self._dispatcher

    def set_context(self, key: str, value: Any) -> "Logger":
        self._context[key] = value
        return self

    def child(self, bound_fields: Context) -> "Logger":
        """Derive a logger that starts from this one's context plus *bound_fields*.

        The child shares the notifier and background dispatcher; its writer is
        derived through the parent writer's ``child``. Later ``set_context``
        calls on either logger do not affect the other.
        """
        derived = copy.copy(self)
        derived._context = {**self._context, **bound_fields}
        derived._writer = self._writer.child(bound_fields)
        return derived

    def trace(self, message: str, extra: Context | None = None) -> None:
        self._log(LogLevel.TRACE, message, extra)

    def debug(self, message: str, extra: Context | None = None) -> None:
        self._log(LogLevel.DEBUG, message, extra)

    def info(self, message: str, extra: Context | None = None) -> None:
        self._log(LogLevel.INFO, message, extra)

    def warn(self, message: str, extra: Context | None = None) -> None:
        self._log(LogLevel.WARN, message, extra)

    warning = warn

    def error(self, message: str, extra: Context | None = None) -> None:
        self._log(LogLevel.ERROR, message, extra)

    def fatal(self, message: str, extra: Context | None = None) -> None:
        self._log(LogLevel.FATAL, message, extra)

    critical = fatal

    async def flush(self, timeout: float | None = None) -> None:
        """Wait for background notifications submitted so far."""
        await self._dispatcher.drain(timeout)

    def wait(self, timeout: float | None = None) -> None:
        """Block until notifications submitted from synchronous code finish."""
        self._dispatcher.wait(timeout)

    def close(self, timeout: float | None = 5.0) -> None:
        """Finish loop-thread notifications, stop the loop thread and close the writer.

        Children share the dispatcher and the writer's outputs, so closing any
        of them closes them all.
        """
        self._dispatcher.wait(timeout)
        self._dispatcher.close(timeout)
        self._writer.close()

    def _log(self, level: LogLevel, message: str, extra: Context | None) -> None:
        full_context = {**self._context, **(extra or {})}
        record = {k: v for k, v in full_context.items() if k != SLACK_CONTEXT_KEY}
        self._writer.write(level, record, message)
        if self._notifier is not None and self._notifier.is_enabled_for(level):
            self._dispatcher.submit(self._notifier.send(level, message, full_context))

    def __repr__(self) -> str:
        return f"Logger(name={self.name!r}, environment={self.environment!r})"


__all__ = ["Context", "Logger"]
