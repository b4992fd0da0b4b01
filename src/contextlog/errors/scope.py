"""Execution-scope errors."""

from __future__ import annotations

from contextlog.errors.base import BaseError


class ScopeError(BaseError):
    """Raised when the current execution scope cannot satisfy a lookup."""

    default_code = "scope_error"


class LoggerNotBoundError(ScopeError):
    """No logger is bound in the current execution scope."""

    default_code = "logger_not_bound"

    def __init__(self, scope_name: str | None = None) -> None:
        message = "Logger not found in context. Make sure you are running within a context scope."
        super().__init__(message, detail={"scope": scope_name} if scope_name else None)
        self.scope_name = scope_name


__all__ = ["LoggerNotBoundError", "ScopeError"]
