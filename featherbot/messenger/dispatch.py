"""Routes Messenger webhook events to static replies or the page pipeline."""

from __future__ import annotations

import logging
import re

from featherbot.api.schemas import Message, MessagingEvent, Postback
from featherbot.graph.pipeline import PagePipeline

from . import replies
from .client import MessengerClient

logger = logging.getLogger(__name__)

_NON_WORD_RE = re.compile(r"[^\w\s]")


def normalize_keyword(text: str) -> str:
    """Reduce message text to a comparable keyword (``"Help!"`` -> ``"help"``)."""
    return _NON_WORD_RE.sub("", text).strip().lower()


class EventDispatcher:
    """Handles one messaging event at a time."""

    def __init__(
        self,
        messenger: MessengerClient,
        pipeline: PagePipeline,
        *,
        privacy_policy_url: str,
    ) -> None:
        self._messenger = messenger
        self._pipeline = pipeline
        self._privacy_text = replies.privacy_policy_text(privacy_policy_url)

    async def dispatch(self, event: MessagingEvent) -> None:
        sender_id = event.sender.id
        if event.optin is not None:
            logger.info(
                "authentication received",
                extra={"sender_id": sender_id, "ref": event.optin.ref},
            )
            await self._messenger.send_text(sender_id, replies.AUTHENTICATION_TEXT)
        elif event.message is not None:
            await self._on_message(sender_id, event.message)
        elif event.delivery is not None:
            logger.info(
                "delivery confirmed",
                extra={"mids": event.delivery.mids, "watermark": event.delivery.watermark},
            )
        elif event.postback is not None:
            await self._on_postback(sender_id, event.postback)
        elif event.read is not None:
            logger.info(
                "message read",
                extra={"watermark": event.read.watermark, "seq": event.read.seq},
            )
        elif event.account_linking is not None:
            logger.info(
                "account link event",
                extra={"sender_id": sender_id, "status": event.account_linking.status},
            )
        else:
            logger.warning("unknown messaging event", extra={"sender_id": sender_id})

    async def _on_message(self, sender_id: str, message: Message) -> None:
        if message.is_echo:
            logger.debug(
                "echo received",
                extra={"mid": message.mid, "app_id": message.app_id},
            )
            return
        if message.quick_reply is not None:
            logger.info(
                "quick reply tapped",
                extra={"mid": message.mid, "payload": message.quick_reply.payload},
            )
            await self._messenger.send_text(sender_id, replies.QUICK_REPLY_TEXT)
            return

        if message.text:
            keyword = normalize_keyword(message.text)
            logger.info("text message received", extra={"sender_id": sender_id, "mid": message.mid})
            if keyword in replies.HELP_KEYWORDS:
                await self._messenger.send_text(sender_id, replies.HELP_TEXT)
            elif keyword in replies.PRIVACY_KEYWORDS:
                await self._messenger.send_text(sender_id, self._privacy_text)
            else:
                await self._messenger.send_action(sender_id, "typing_on")
                await self._pipeline.run(message.text, sender_id)
        elif message.attachments:
            await self._messenger.send_text(sender_id, replies.ATTACHMENT_TEXT)

    async def _on_postback(self, sender_id: str, postback: Postback) -> None:
        logger.info(
            "postback received",
            extra={"sender_id": sender_id, "payload": postback.payload},
        )
        text = replies.POSTBACK_REPLIES.get(postback.payload)
        if text is None:
            logger.debug("postback payload has no reply", extra={"payload": postback.payload})
            return
        await self._messenger.send_text(sender_id, text)
