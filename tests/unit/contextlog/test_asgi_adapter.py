"""Unit tests for LoggerScopeMiddleware (plain ASGI callables, no framework)."""
from __future__ import annotations

import asyncio
import uuid
from typing import Any

import pytest

from contextlog import LogConfig, Logger, LoggerScopeMiddleware
from contextlog.scope import LoggerScope
from contextlog.testing import CapturingWriter


@pytest.fixture
def scope() -> LoggerScope:
    return LoggerScope(f"test-{uuid.uuid4().hex}")


@pytest.fixture
def writer() -> CapturingWriter:
    return CapturingWriter()


@pytest.fixture
def logger(writer: CapturingWriter) -> Logger:
    return Logger(LogConfig(name="api"), environment="test", writer=writer)


def _http_scope(headers: list[tuple[bytes, bytes]] | None = None) -> dict[str, Any]:
    return {"type": "http", "method": "GET", "path": "/orders", "headers": headers or []}


def _call(app: Any, asgi_scope: dict[str, Any]) -> list[dict[str, Any]]:
    sent: list[dict[str, Any]] = []

    async def receive() -> dict[str, Any]:
        return {"type": "http.request", "body": b""}

    async def send(message: Any) -> None:
        sent.append(message)

    asyncio.run(app(asgi_scope, receive, send))
    return sent


class TestLoggerScopeMiddleware:
    def test_request_logger_bound_in_scope(self, scope: LoggerScope, logger: Logger, writer: CapturingWriter) -> None:
        async def app(asgi_scope: Any, receive: Any, send: Any) -> None:
            scope.get_logger().info("handled")
            await send({"type": "http.response.start", "status": 200, "headers": []})
            await send({"type": "http.response.body", "body": b"ok"})

        middleware = LoggerScopeMiddleware(app, logger, execution_scope=scope)
        sent = _call(middleware, _http_scope([(b"x-request-id", b"req-42")]))

        record = writer.last()
        assert record is not None
        assert record.record == {"requestId": "req-42", "method": "GET", "path": "/orders"}
        assert (b"x-request-id", b"req-42") in sent[0]["headers"]
        assert logger.context == {}

    def test_generates_request_id(self, scope: LoggerScope, logger: Logger, writer: CapturingWriter) -> None:
        async def app(asgi_scope: Any, receive: Any, send: Any) -> None:
            scope.get_logger().info("handled")

        _call(LoggerScopeMiddleware(app, logger, execution_scope=scope), _http_scope())
        request_id = writer.last().record["requestId"]
        assert uuid.UUID(request_id).version == 4

    def test_custom_header_name(self, scope: LoggerScope, logger: Logger) -> None:
        async def app(asgi_scope: Any, receive: Any, send: Any) -> None:
            await send({"type": "http.response.start", "status": 204})

        middleware = LoggerScopeMiddleware(app, logger, execution_scope=scope, header_name="X-Correlation-ID")
        sent = _call(middleware, _http_scope([(b"x-correlation-id", b"c-1")]))
        assert sent[0]["headers"] == [(b"x-correlation-id", b"c-1")]

    def test_lifespan_passes_through(self, scope: LoggerScope, logger: Logger) -> None:
        seen: list[Any] = []

        async def app(asgi_scope: Any, receive: Any, send: Any) -> None:
            seen.append(scope.get_current())

        _call(LoggerScopeMiddleware(app, logger, execution_scope=scope), {"type": "lifespan"})
        assert seen == [None]
