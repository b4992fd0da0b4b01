"""Chat client port and its in-memory fake."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from contextlog.notifications.message import ChatMessage, PostResult


@runtime_checkable
class ChatClient(Protocol):
    """Port: post one message to a chat channel.

    Implementations raise on API or network failure.
    """

    async def post_message(self, message: ChatMessage) -> PostResult: ...


class InMemoryChatClient:
    """Fake ChatClient that captures posted messages in memory.

    Set :attr:`fail_with` to make every post raise that exception.
    """

    def __init__(self, fail_with: BaseException | None = None) -> None:
        self.sent: list[ChatMessage] = []
        self.fail_with = fail_with

    async def post_message(self, message: ChatMessage) -> PostResult:
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append(message)
        return PostResult(ok=True, channel=message.channel, ts=f"mem-{len(self.sent)}")

    def reset(self) -> None:
        self.sent.clear()

    @property
    def count(self) -> int:
        return len(self.sent)

    def last(self) -> ChatMessage | None:
        return self.sent[-1] if self.sent else None


__all__ = ["ChatClient", "InMemoryChatClient"]
