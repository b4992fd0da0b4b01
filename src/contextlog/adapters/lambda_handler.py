"""AWS Lambda adapter – bind invocation metadata and the logger scope per call.

Usage::

    log = Logger(LogConfig(name="orders-worker"))

    @with_logger_lambda(logger_scope, log)
    async def handler(event, context):
        logger_scope.get_logger().info("received batch")
        ...
"""
from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Mapping

from contextlog.config.schema import LogConfig
from contextlog.logger import Logger
from contextlog.scope import LoggerContext, LoggerScope

QUEUE_EVENT_SOURCE = "aws:sqs"

Handler = Callable[[Any, Any], Any]


def _context_value(context: Any, *names: str) -> Any:
    for name in names:
        if isinstance(context, Mapping):
            if name in context:
                return context[name]
        elif hasattr(context, name):
            return getattr(context, name)
    return None


def queue_message_ids(event: Any) -> list[str]:
    """Return the ``messageId`` of every SQS record in *event*, in order."""
    if not isinstance(event, Mapping):
        return []
    records = event.get("Records")
    if not isinstance(records, list):
        return []
    return [
        record.get("messageId")
        for record in records
        if isinstance(record, Mapping) and record.get("eventSource") == QUEUE_EVENT_SOURCE
    ]


def _resolve_logger(scope: LoggerScope, logger_or_config: Logger | LogConfig | None) -> Logger:
    if isinstance(logger_or_config, Logger):
        return logger_or_config
    if isinstance(logger_or_config, LogConfig):
        return Logger(logger_or_config)
    return scope.get_logger()


def _prepare(scope: LoggerScope, logger_or_config: Logger | LogConfig | None, event: Any, context: Any) -> Logger:
    logger = _resolve_logger(scope, logger_or_config)
    logger.set_context("invocationId", _context_value(context, "aws_request_id", "awsRequestId"))
    logger.set_context("functionName", _context_value(context, "function_name", "functionName"))
    message_ids = queue_message_ids(event)
    if message_ids:
        logger.set_context("queueMessageIds", message_ids)
    return logger


def with_logger_lambda(
    scope: LoggerScope,
    logger_or_config: Logger | LogConfig | None = None,
    handler: Handler | None = None,
    *,
    flush: bool = False,
) -> Any:
    """Wrap a Lambda *handler* so it runs inside *scope*.

    ``logger_or_config`` may be a :class:`Logger` (used as-is), a
    :class:`LogConfig` (a new logger per invocation) or ``None`` (the logger
    already bound in *scope*). Called without *handler* it returns a
    decorator.

    The handler's return value or exception propagates unchanged; the scope
    binding is removed either way. With ``flush=True`` pending notifications
    are awaited before the invocation returns, so a frozen container does
    not drop them. A logger built from a :class:`LogConfig` is closed at the
    end of its invocation.
    """
    if handler is None:
        return functools.partial(with_logger_lambda, scope, logger_or_config, flush=flush)

    owns_logger = isinstance(logger_or_config, LogConfig)

    if inspect.iscoroutinefunction(handler):

        @functools.wraps(handler)
        async def async_wrapper(event: Any, context: Any) -> Any:
            logger = _prepare(scope, logger_or_config, event, context)
            try:
                return await scope.run_async(LoggerContext(logger), handler, event, context)
            finally:
                if flush:
                    await logger.flush()
                if owns_logger:
                    logger.close()

        return async_wrapper

    @functools.wraps(handler)
    def wrapper(event: Any, context: Any) -> Any:
        logger = _prepare(scope, logger_or_config, event, context)
        try:
            return scope.run(LoggerContext(logger), handler, event, context)
        finally:
            if flush:
                logger.wait()
            if owns_logger:
                logger.close()

    return wrapper


__all__ = ["QUEUE_EVENT_SOURCE", "queue_message_ids", "with_logger_lambda"]
