"""Notifications – SlackNotifier, the level-gated chat sink.

:meth:`SlackNotifier.send` never raises: delivery failures are written to
this module's diagnostic logger and dropped. Nothing is retried.
"""
from __future__ import annotations

import datetime
import json
import logging
from typing import Any, Mapping

from contextlog.config.schema import SlackConfig
from contextlog.levels import LogLevel, is_level_enabled
from contextlog.notifications.client import ChatClient
from contextlog.notifications.message import Attachment, AttachmentField, ChatMessage

logger = logging.getLogger(__name__)

SLACK_CONTEXT_KEY = "slack"
DEFAULT_USERNAME = "AtlasLogger"
DEFAULT_ICON_EMOJI = ":warning:"
DIRECT_ICON_EMOJI = ":bell:"

COLOR_FROM_LEVEL: dict[LogLevel, str] = {
    LogLevel.TRACE: "#c4c4c4",
    LogLevel.DEBUG: "#00ab00",
    LogLevel.INFO: "#0066E7",
    LogLevel.WARN: "#F18009",
    LogLevel.ERROR: "#D4070F",
    LogLevel.FATAL: "#D4070F",
}


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


def _stringify(value: Any) -> str:
    """Render one attachment field: scalars as text, everything else as JSON."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, default=_json_default)


class SlackNotifier:
    """Posts log records at or above ``config.level`` to Slack.

    The destination is ``context["slack"]["channel"]`` when the record
    carries a routing override, else ``config.default_channel``. Records with
    neither are dropped.
    """

    def __init__(self, config: SlackConfig, client: ChatClient) -> None:
        self._config = config
        self._client = client

    @property
    def config(self) -> SlackConfig:
        return self._config

    @property
    def client(self) -> ChatClient:
        return self._client

    def is_enabled_for(self, level: LogLevel | str) -> bool:
        return is_level_enabled(level, self._config.level)

    def build_message(
        self,
        level: LogLevel | str,
        message: str,
        context: Mapping[str, Any] | None = None,
    ) -> ChatMessage | None:
        """Return the message to post, or ``None`` when it should be dropped."""
        level = LogLevel.parse(level)
        if not self.is_enabled_for(level):
            return None
        routing = (context or {}).get(SLACK_CONTEXT_KEY)
        if not isinstance(routing, Mapping):
            routing = {}
        channel = routing.get("channel") or self._config.default_channel
        if not channel:
            return None

        attachments: tuple[Attachment, ...] = ()
        if context is not None:
            fields = tuple(
                AttachmentField(title=key, value=_stringify(value))
                for key, value in context.items()
                if key != SLACK_CONTEXT_KEY
            )
            attachments = (Attachment(fields=fields, color=COLOR_FROM_LEVEL[level]),)

        return ChatMessage(
            text=f"*{level.value.upper()}:* {message}",
            channel=channel,
            username=routing.get("username") or DEFAULT_USERNAME,
            icon_emoji=routing.get("icon_emoji") or DEFAULT_ICON_EMOJI,
            attachments=attachments,
        )

    async def send(
        self,
        level: LogLevel | str,
        message: str,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        try:
            chat_message = self.build_message(level, message, context)
        except Exception:  # noqa: BLE001
            logger.exception("Error building slack message")
            return
        if chat_message is None:
            return
        await self._post(chat_message)

    async def send_direct(self, channel: str, message: str) -> None:
        """Post *message* to *channel* without level gating or attachments."""
        await self._post(
            ChatMessage(
                text=message,
                channel=channel,
                username=DEFAULT_USERNAME,
                icon_emoji=DIRECT_ICON_EMOJI,
            )
        )

    async def _post(self, chat_message: ChatMessage) -> None:
        try:
            await self._client.post_message(chat_message)
        except Exception:  # noqa: BLE001
            logger.exception("Error sending slack message channel=%s", chat_message.channel)


__all__ = [
    "COLOR_FROM_LEVEL",
    "DEFAULT_ICON_EMOJI",
    "DEFAULT_USERNAME",
    "SLACK_CONTEXT_KEY",
    "SlackNotifier",
]
