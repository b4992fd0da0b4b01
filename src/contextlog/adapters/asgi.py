"""ASGI adapter – one child logger per request, bound in the execution scope."""
from __future__ import annotations

from typing import Any, Awaitable, Callable, MutableMapping
from uuid import uuid4

from contextlog.logger import Logger
from contextlog.scope import LoggerContext, LoggerScope, logger_scope

Scope = MutableMapping[str, Any]
Message = MutableMapping[str, Any]
Receive = Callable[[], Awaitable[Message]]
Send = Callable[[Message], Awaitable[None]]
ASGIApp = Callable[[Scope, Receive, Send], Awaitable[None]]


class LoggerScopeMiddleware:
    """Derive a request logger and make it the scope's current logger.

    The child logger is bound to ``requestId`` (from *header_name*, else a
    generated UUID4), ``method`` and ``path``. The request id is echoed in
    the response headers. Non-HTTP/WebSocket scopes pass straight through.
    """

    def __init__(
        self,
        app: ASGIApp,
        logger: Logger,
        *,
        execution_scope: LoggerScope = logger_scope,
        header_name: str = "X-Request-ID",
    ) -> None:
        self.app = app
        self._logger = logger
        self._execution_scope = execution_scope
        self._header = header_name.lower().encode()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers", []))
        request_id = headers.get(self._header, b"").decode().strip() or str(uuid4())

        bound: dict[str, Any] = {"requestId": request_id}
        if scope.get("method"):
            bound["method"] = scope["method"]
        if scope.get("path"):
            bound["path"] = scope["path"]
        request_logger = self._logger.child(bound)

        response_header = self._header
        encoded_id = request_id.encode()

        async def send_with_header(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers_list: list[tuple[bytes, bytes]] = list(message.get("headers", []))
                headers_list.append((response_header, encoded_id))
                message = {**message, "headers": headers_list}
            await send(message)

        await self._execution_scope.run_async(
            LoggerContext(request_logger), self.app, scope, receive, send_with_header
        )


__all__ = ["LoggerScopeMiddleware"]
