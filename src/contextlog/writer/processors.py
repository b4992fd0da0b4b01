"""structlog processors used by :class:`StructlogWriter`."""
from __future__ import annotations

import traceback
from typing import Any

_METHOD_LEVELS: dict[str, str] = {
    "trace": "trace",
    "debug": "debug",
    "info": "info",
    "warning": "warn",
    "error": "error",
    "critical": "fatal",
}


def add_level(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    """Record the level under its contextlog name (``warn``, ``fatal``)."""
    event_dict["level"] = _METHOD_LEVELS.get(method_name, method_name)
    return event_dict


def serialize_errors(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    """Render exception values as ``{type, message, stack}`` objects."""
    for key, value in event_dict.items():
        if isinstance(value, BaseException):
            event_dict[key] = {
                "type": type(value).__name__,
                "message": str(value),
                "stack": "".join(traceback.format_exception(type(value), value, value.__traceback__)),
            }
    return event_dict


__all__ = ["add_level", "serialize_errors"]
