"""Root error class for the contextlog error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of every error contextlog raises.

    ``code`` is a stable slug that log pipelines and handlers can match on
    without parsing the message; ``detail`` holds the offending values.
    Passing ``cause`` chains the underlying exception as ``__cause__``.
    """

    default_code: str = "contextlog_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for structured log records."""
        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
        }
        if self.detail:
            payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return payload


__all__ = ["BaseError"]
