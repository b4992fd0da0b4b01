"""Chat notification payload models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AttachmentField:
    title: str
    value: str
    short: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "value": self.value, "short": self.short}


@dataclass(frozen=True)
class Attachment:
    fields: tuple[AttachmentField, ...] = ()
    color: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"fields": [f.to_dict() for f in self.fields]}
        if self.color is not None:
            payload["color"] = self.color
        return payload


@dataclass(frozen=True)
class ChatMessage:
    """A message bound for one chat channel."""

    text: str
    channel: str
    username: str | None = None
    icon_emoji: str | None = None
    attachments: tuple[Attachment, ...] = field(default_factory=tuple)

    def to_payload(self) -> dict[str, Any]:
        """Render the ``chat.postMessage`` request body."""
        payload: dict[str, Any] = {"text": self.text, "channel": self.channel}
        if self.username is not None:
            payload["username"] = self.username
        if self.icon_emoji is not None:
            payload["icon_emoji"] = self.icon_emoji
        if self.attachments:
            payload["attachments"] = [a.to_dict() for a in self.attachments]
        return payload


@dataclass(frozen=True)
class PostResult:
    """Outcome of a successful post."""

    ok: bool
    channel: str | None = None
    ts: str | None = None


__all__ = ["Attachment", "AttachmentField", "ChatMessage", "PostResult"]
