"""Notifications – the level-gated Slack sink, its client port and payloads."""
from contextlog.notifications.client import ChatClient, InMemoryChatClient
from contextlog.notifications.message import Attachment, AttachmentField, ChatMessage, PostResult
from contextlog.notifications.notifier import (
    COLOR_FROM_LEVEL,
    DEFAULT_ICON_EMOJI,
    DEFAULT_USERNAME,
    SLACK_CONTEXT_KEY,
    SlackNotifier,
)
from contextlog.notifications.slack import SLACK_API_URL, SlackWebClient

__all__ = [
    "COLOR_FROM_LEVEL",
    "DEFAULT_ICON_EMOJI",
    "DEFAULT_USERNAME",
    "SLACK_API_URL",
    "SLACK_CONTEXT_KEY",
    "Attachment",
    "AttachmentField",
    "ChatClient",
    "ChatMessage",
    "InMemoryChatClient",
    "PostResult",
    "SlackNotifier",
    "SlackWebClient",
]
