"""Unit tests for the Slack notification sink."""
from __future__ import annotations

import asyncio
import datetime
import json
import logging
from typing import Any

import pytest

from contextlog.config import SlackConfig
from contextlog.levels import LogLevel, is_level_enabled
from contextlog.notifications import (
    COLOR_FROM_LEVEL,
    AttachmentField,
    ChatClient,
    ChatMessage,
    InMemoryChatClient,
    SlackNotifier,
)

CONFIG = SlackConfig(level="info", default_channel="#default-channel")
ALL_LEVELS = list(LogLevel)


@pytest.fixture
def client() -> InMemoryChatClient:
    return InMemoryChatClient()


@pytest.fixture
def notifier(client: InMemoryChatClient) -> SlackNotifier:
    return SlackNotifier(CONFIG, client)


def _fields(message: ChatMessage) -> dict[str, str]:
    [attachment] = message.attachments
    return {f.title: f.value for f in attachment.fields}


# ---------------------------------------------------------------------------
# Level gating and routing
# ---------------------------------------------------------------------------


class TestSend:
    @pytest.mark.parametrize("level", ALL_LEVELS)
    def test_only_enabled_levels_are_posted(
        self, level: LogLevel, notifier: SlackNotifier, client: InMemoryChatClient
    ) -> None:
        asyncio.run(notifier.send(level, "Test message", {"slack": {"channel": "#c"}}))
        assert client.count == (1 if is_level_enabled(level, "info") else 0)

    def test_debug_below_info_threshold_is_not_posted(
        self, notifier: SlackNotifier, client: InMemoryChatClient
    ) -> None:
        asyncio.run(notifier.send("debug", "quiet", {"slack": {"channel": "#c"}}))
        assert client.sent == []

    def test_formatted_message(self, notifier: SlackNotifier, client: InMemoryChatClient) -> None:
        context: dict[str, Any] = {
            "userId": "123",
            "requestId": "456",
            "slack": {"channel": "#test-channel", "username": "CustomLogger"},
            "extra": {"details": "Some details"},
        }
        asyncio.run(notifier.send(LogLevel.ERROR, "Test message", context))

        message = client.last()
        assert message is not None
        assert message.text == "*ERROR:* Test message"
        assert message.channel == "#test-channel"
        assert message.username == "CustomLogger"
        assert message.icon_emoji == ":warning:"
        assert message.attachments[0].color == COLOR_FROM_LEVEL[LogLevel.ERROR]
        assert _fields(message) == {
            "userId": "123",
            "requestId": "456",
            "extra": json.dumps({"details": "Some details"}),
        }
        assert all(f.short is False for f in message.attachments[0].fields)

    def test_routing_key_not_rendered(self, notifier: SlackNotifier, client: InMemoryChatClient) -> None:
        asyncio.run(notifier.send("warn", "m", {"slack": {"channel": "#c"}, "a": 1}))
        assert _fields(client.sent[0]) == {"a": "1"}

    def test_default_channel_used_without_override(
        self, notifier: SlackNotifier, client: InMemoryChatClient
    ) -> None:
        asyncio.run(notifier.send("info", "m", {"userId": "123"}))
        assert client.sent[0].channel == "#default-channel"
        assert client.sent[0].username == "AtlasLogger"

    def test_icon_override(self, notifier: SlackNotifier, client: InMemoryChatClient) -> None:
        asyncio.run(notifier.send("fatal", "m", {"slack": {"icon_emoji": ":fire:"}}))
        assert client.sent[0].icon_emoji == ":fire:"

    def test_no_channel_anywhere_drops_message(self, client: InMemoryChatClient) -> None:
        notifier = SlackNotifier(SlackConfig(level="info"), client)
        asyncio.run(notifier.send("error", "m", {"userId": "123"}))
        assert client.count == 0

    def test_no_context_means_no_attachment(self, notifier: SlackNotifier, client: InMemoryChatClient) -> None:
        asyncio.run(notifier.send("info", "bare"))
        assert client.sent[0].attachments == ()
        assert "attachments" not in client.sent[0].to_payload()

    def test_non_mapping_routing_value_is_ignored(
        self, notifier: SlackNotifier, client: InMemoryChatClient
    ) -> None:
        asyncio.run(notifier.send("info", "m", {"slack": "#not-a-mapping"}))
        assert client.sent[0].channel == "#default-channel"


# ---------------------------------------------------------------------------
# Failure isolation
# ---------------------------------------------------------------------------


class TestFailureIsolation:
    def test_client_error_is_logged_not_raised(self, caplog: pytest.LogCaptureFixture) -> None:
        notifier = SlackNotifier(CONFIG, InMemoryChatClient(fail_with=RuntimeError("Slack API Error")))
        with caplog.at_level(logging.ERROR, logger="contextlog.notifications.notifier"):
            assert asyncio.run(notifier.send("error", "m", {"slack": {"channel": "#c"}})) is None

        errors = [r for r in caplog.records if r.name == "contextlog.notifications.notifier"]
        assert len(errors) == 1
        assert "Error sending slack message" in errors[0].getMessage()
        assert errors[0].exc_info is not None

    def test_send_direct_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        notifier = SlackNotifier(CONFIG, InMemoryChatClient(fail_with=OSError("down")))
        with caplog.at_level(logging.ERROR):
            asyncio.run(notifier.send_direct("#ops", "hello"))
        assert any("Error sending slack message" in r.getMessage() for r in caplog.records)


# ---------------------------------------------------------------------------
# send_direct / payload
# ---------------------------------------------------------------------------


class TestSendDirect:
    def test_posts_without_level_gate(self, client: InMemoryChatClient) -> None:
        notifier = SlackNotifier(SlackConfig(level="fatal"), client)
        asyncio.run(notifier.send_direct("#ops", "deploy finished"))
        assert client.last() == ChatMessage(
            text="deploy finished",
            channel="#ops",
            username="AtlasLogger",
            icon_emoji=":bell:",
        )


class TestPayload:
    def test_to_payload(self) -> None:
        notifier = SlackNotifier(CONFIG, InMemoryChatClient())
        message = notifier.build_message("warn", "disk", {"free": 3, "mounts": ["/", "/data"]})
        assert message is not None
        assert message.to_payload() == {
            "text": "*WARN:* disk",
            "channel": "#default-channel",
            "username": "AtlasLogger",
            "icon_emoji": ":warning:",
            "attachments": [
                {
                    "fields": [
                        {"title": "free", "value": "3", "short": False},
                        {"title": "mounts", "value": '["/", "/data"]', "short": False},
                    ],
                    "color": "#F18009",
                }
            ],
        }

    @pytest.mark.parametrize(
        ("value", "rendered"),
        [
            ("plain", "plain"),
            (42, "42"),
            (1.5, "1.5"),
            (True, "true"),
            (False, "false"),
            (None, "null"),
            ({"a": None}, '{"a": null}'),
            ((1, 2), "[1, 2]"),
            (datetime.datetime(2024, 1, 2, 3, 4, 5), '"2024-01-02T03:04:05"'),
        ],
    )
    def test_field_values_render_like_json(self, value: Any, rendered: str) -> None:
        notifier = SlackNotifier(CONFIG, InMemoryChatClient())
        message = notifier.build_message("error", "m", {"field": value})
        assert message is not None
        assert _fields(message) == {"field": rendered}

    def test_build_message_below_threshold(self) -> None:
        notifier = SlackNotifier(CONFIG, InMemoryChatClient())
        assert notifier.build_message("trace", "m", {"slack": {"channel": "#c"}}) is None

    def test_attachment_field_defaults(self) -> None:
        assert AttachmentField("k", "v").to_dict() == {"title": "k", "value": "v", "short": False}

    def test_in_memory_client_satisfies_protocol(self) -> None:
        assert isinstance(InMemoryChatClient(), ChatClient)
