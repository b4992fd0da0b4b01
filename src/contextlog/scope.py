"""Execution scope – the "current logger" of an asyncio call chain.

The binding lives in a :class:`contextvars.ContextVar`. Tasks created inside a
scope start from a copy of the creating context, so they see the binding
while independent tasks and threads never see each other's.

Example::

    async def handle(event):
        await logger_scope.run_async(LoggerContext(logger), process, event)

    async def process(event):
        logger_scope.get_logger().info("processing", {"id": event["id"]})
"""
from __future__ import annotations

import contextlib
import dataclasses
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Generic, Iterator, TypeVar

from contextlog.errors import LoggerNotBoundError

if TYPE_CHECKING:
    from contextlog.logger import Logger

T = TypeVar("T")
R = TypeVar("R")


class ExecutionScope(Generic[T]):
    """Binds one value to the current call chain."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._var: ContextVar[T | None] = ContextVar(name, default=None)

    def get_current(self) -> T | None:
        return self._var.get()

    def run(self, value: T, callback: Callable[..., R], *args: Any, **kwargs: Any) -> R:
        """Call *callback* with *value* bound; the previous binding is restored after."""
        token = self._var.set(value)
        try:
            return callback(*args, **kwargs)
        finally:
            self._var.reset(token)

    async def run_async(
        self,
        value: T,
        callback: Callable[..., Awaitable[R]],
        *args: Any,
        **kwargs: Any,
    ) -> R:
        """Await *callback* with *value* bound for its whole asynchronous extent."""
        token = self._var.set(value)
        try:
            return await callback(*args, **kwargs)
        finally:
            self._var.reset(token)

    @contextlib.contextmanager
    def scoped(self, value: T) -> Iterator[T]:
        """Context manager form of :meth:`run`, usable in sync and async code."""
        token = self._var.set(value)
        try:
            yield value
        finally:
            self._var.reset(token)

    def enter_with(self, value: T) -> Token[T | None]:
        """Bind *value* for the rest of the current context.

        Pass the returned token to :meth:`exit` to restore the previous
        binding.
        """
        return self._var.set(value)

    def exit(self, token: Token[T | None] | None = None) -> None:
        """Undo :meth:`enter_with`, or clear the binding when no token is given."""
        if token is None:
            self._var.set(None)
        else:
            self._var.reset(token)


@dataclasses.dataclass(frozen=True)
class LoggerContext:
    """Value bound by :class:`LoggerScope`."""

    logger: Logger | None = None


class LoggerScope(ExecutionScope[LoggerContext]):
    """ExecutionScope whose bound value carries a :class:`~contextlog.logger.Logger`."""

    def get_logger(self) -> Logger:
        """Return the bound logger.

        Raises
        ------
        LoggerNotBoundError
            Outside any scope, or when the bound context has no logger.
        """
        current = self.get_current()
        if current is None or current.logger is None:
            raise LoggerNotBoundError(self.name)
        return current.logger

    def bind(self, logger: Logger) -> Token[LoggerContext | None]:
        """Shorthand for ``enter_with(LoggerContext(logger))``."""
        return self.enter_with(LoggerContext(logger))


logger_scope = LoggerScope("contextlog.logger")


__all__ = ["ExecutionScope", "LoggerContext", "LoggerScope", "logger_scope"]
