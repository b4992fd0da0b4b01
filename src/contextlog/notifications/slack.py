"""Notifications – SlackWebClient (Slack Web API over httpx)."""
from __future__ import annotations

from typing import Any

import httpx

from contextlog.errors import ExternalServiceError, NotificationTimeoutError
from contextlog.notifications.message import ChatMessage, PostResult

SLACK_API_URL = "https://slack.com/api"


class SlackWebClient:
    """ChatClient that calls ``chat.postMessage`` with a bot token.

    A new :class:`httpx.AsyncClient` is opened per post so the client can be
    shared across event loops (the background dispatcher may run on its own
    loop thread).
    """

    def __init__(
        self,
        api_token: str,
        *,
        base_url: str = SLACK_API_URL,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_token = api_token
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def api_token(self) -> str:
        return self._api_token

    async def post_message(self, message: ChatMessage) -> PostResult:
        url = f"{self._base_url}/chat.postMessage"
        headers = {
            "Authorization": f"Bearer {self._api_token}",
            "Content-Type": "application/json; charset=utf-8",
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(url, json=message.to_payload(), headers=headers)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise NotificationTimeoutError(f"Slack request timed out: POST {url}", cause=exc) from exc
        except httpx.HTTPStatusError as exc:
            raise ExternalServiceError(
                service="slack",
                message=f"HTTP {exc.response.status_code} from POST {url}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(service="slack", message=str(exc)) from exc

        body: dict[str, Any] = response.json()
        if not body.get("ok"):
            raise ExternalServiceError(
                service="slack",
                message=f"Slack API error: {body.get('error', 'unknown_error')}",
                status_code=response.status_code,
                detail={"error": body.get("error")},
            )
        return PostResult(ok=True, channel=body.get("channel"), ts=body.get("ts"))


__all__ = ["SLACK_API_URL", "SlackWebClient"]
