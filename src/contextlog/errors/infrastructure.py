"""Infrastructure errors raised by notification clients."""

from __future__ import annotations

from typing import Any

from contextlog.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure talking to an external collaborator."""

    default_code = "infrastructure_error"


class ExternalServiceError(InfrastructureError):
    """An external service returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["service"] = self.service
        if self.status_code is not None:
            payload["status_code"] = self.status_code
        return payload


class NotificationTimeoutError(InfrastructureError):
    """Posting a notification exceeded the client timeout."""

    default_code = "notification_timeout"


__all__ = ["ExternalServiceError", "InfrastructureError", "NotificationTimeoutError"]
