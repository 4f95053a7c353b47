"""Messenger Send API client."""

from __future__ import annotations

import logging
from typing import Any, Literal

import httpx

from featherbot.config import Settings

logger = logging.getLogger(__name__)

SenderAction = Literal["typing_on", "typing_off", "mark_seen"]

MESSAGE_METADATA = "DEVELOPER_DEFINED_METADATA"


class MessengerClient:
    """Sends replies through ``POST /{version}/me/messages``.

    Delivery is best effort: failures are logged and reported as ``False``
    so a failed reply never breaks webhook handling.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        access_token: str,
        base_url: str = "https://graph.facebook.com",
        api_version: str = "v19.0",
    ) -> None:
        self._client = client
        self._access_token = access_token
        self._url = f"{base_url.rstrip('/')}/{api_version}/me/messages"

    @classmethod
    def from_settings(cls, settings: Settings, client: httpx.AsyncClient) -> MessengerClient:
        return cls(
            client,
            access_token=settings.page_access_token,
            base_url=settings.graph_api_url,
            api_version=settings.graph_api_version,
        )

    async def send_text(self, recipient: str, text: str) -> bool:
        """Send a plain text message. Empty texts are skipped."""
        if not text.strip():
            logger.debug("empty reply not sent", extra={"recipient": recipient})
            return False
        return await self._call_send_api(
            {
                "recipient": {"id": recipient},
                "message": {"text": text, "metadata": MESSAGE_METADATA},
            }
        )

    async def send_action(self, recipient: str, action: SenderAction) -> bool:
        """Send a sender action such as the typing indicator."""
        logger.debug("sending sender action", extra={"recipient": recipient, "action": action})
        return await self._call_send_api(
            {"recipient": {"id": recipient}, "sender_action": action}
        )

    async def _call_send_api(self, payload: dict[str, Any]) -> bool:
        recipient = payload["recipient"]["id"]
        try:
            resp = await self._client.post(
                self._url,
                params={"access_token": self._access_token},
                json=payload,
            )
        except httpx.HTTPError:
            logger.warning("send api call failed", extra={"recipient": recipient}, exc_info=True)
            return False

        try:
            body = resp.json()
        except ValueError:
            body = {}

        if resp.status_code != 200:
            error = body.get("error", {}) if isinstance(body, dict) else {}
            logger.error(
                "send api returned an error",
                extra={
                    "recipient": recipient,
                    "status_code": resp.status_code,
                    "graph_error": error.get("message", "") if isinstance(error, dict) else "",
                },
            )
            return False

        message_id = body.get("message_id") if isinstance(body, dict) else None
        logger.info(
            "send api call succeeded",
            extra={"recipient": recipient, "message_id": message_id},
        )
        return True
