"""StructlogWriter – JSON lines to stdout and files through structlog.

Each writer owns a private stdlib :class:`logging.Logger` (never registered
with :func:`logging.getLogger`, never propagating to the root logger) with
one handler per stream. Records are rendered by
:class:`structlog.stdlib.ProcessorFormatter`, so nothing here touches the
global ``structlog.configure()`` state of the host application.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Iterable, Mapping

import structlog

from contextlog.config.schema import StreamConfig
from contextlog.levels import TRACE, LogLevel
from contextlog.writer.processors import add_level, serialize_errors

_METHOD_NAMES: dict[LogLevel, str] = {
    LogLevel.TRACE: "trace",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "critical",
}


class _StreamLogger(logging.Logger):
    """stdlib logger that also understands ``trace``."""

    def trace(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)


class _BoundLogger(structlog.stdlib.BoundLogger):
    def trace(self, event: str | None = None, *args: Any, **kw: Any) -> Any:
        return self._proxy_to_logger("trace", event, *args, **kw)


def _build_handler(stream: StreamConfig, formatter: logging.Formatter) -> logging.Handler:
    stream.validate()
    handler: logging.Handler
    if stream.type == "file":
        handler = logging.FileHandler(stream.path, encoding="utf-8")  # type: ignore[arg-type]
    else:
        handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(LogLevel.parse(stream.level).stdlib_level)
    handler.setFormatter(formatter)
    return handler


class StructlogWriter:
    """:class:`~contextlog.writer.protocol.LogWriter` backed by structlog."""

    def __init__(self, bound: structlog.stdlib.BoundLogger, stdlib_logger: logging.Logger) -> None:
        self._log = bound
        self._stdlib_logger = stdlib_logger

    @classmethod
    def create(cls, name: str, streams: Iterable[StreamConfig]) -> "StructlogWriter":
        """Build a writer for *streams*.

        Raises
        ------
        UnknownStreamTypeError
            A stream has a type other than ``stdout`` or ``file``.
        MissingStreamPathError
            A ``file`` stream has no path.
        """
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                serialize_errors,
                structlog.processors.JSONRenderer(),
            ],
        )
        handlers = [_build_handler(stream, formatter) for stream in streams]

        stdlib_logger = _StreamLogger(name)
        stdlib_logger.propagate = False
        for handler in handlers:
            stdlib_logger.addHandler(handler)
        stdlib_logger.setLevel(min((h.level for h in handlers), default=logging.CRITICAL))

        bound = _BoundLogger(
            stdlib_logger,
            processors=[
                structlog.stdlib.add_logger_name,
                add_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.EventRenamer("msg"),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            context={},
        )
        return cls(bound, stdlib_logger)

    @property
    def handlers(self) -> list[logging.Handler]:
        return list(self._stdlib_logger.handlers)

    def write(self, level: LogLevel, record: Mapping[str, Any], message: str) -> None:
        # bind() instead of keyword arguments so record keys never collide
        # with the positional ``event`` parameter.
        log = self._log.bind(**record) if record else self._log
        getattr(log, _METHOD_NAMES[LogLevel(level)])(message)

    def child(self, bound_fields: Mapping[str, Any]) -> "StructlogWriter":
        return StructlogWriter(self._log.bind(**bound_fields), self._stdlib_logger)

    def close(self) -> None:
        """Close every handler (file streams release their descriptors)."""
        for handler in self.handlers:
            handler.close()
            self._stdlib_logger.removeHandler(handler)


__all__ = ["StructlogWriter"]
