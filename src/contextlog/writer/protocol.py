"""Writer protocol – the primary, synchronous sink of every log call."""
from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from contextlog.levels import LogLevel


@runtime_checkable
class LogWriter(Protocol):
    """Port: write one structured record at a severity.

    ``child`` returns a derived writer that attaches *bound_fields* to every
    subsequent record and shares the parent's outputs. ``close`` releases
    those outputs.
    """

    def write(self, level: LogLevel, record: Mapping[str, Any], message: str) -> None: ...

    def child(self, bound_fields: Mapping[str, Any]) -> "LogWriter": ...

    def close(self) -> None: ...


__all__ = ["LogWriter"]
