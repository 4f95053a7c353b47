"""GET /webhook (subscription handshake) and POST /webhook (event delivery) handlers."""

from __future__ import annotations

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse

from featherbot.api.schemas import WebhookPayload
from featherbot.auth.signature import verify_signature
from featherbot.config import Settings, get_settings
from featherbot.messenger.dispatch import EventDispatcher

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_dispatcher(request: Request) -> EventDispatcher:
    return request.app.state.dispatcher


@router.get("/webhook", response_class=PlainTextResponse)
async def verify_subscription(
    mode: str | None = Query(None, alias="hub.mode"),
    verify_token: str | None = Query(None, alias="hub.verify_token"),
    challenge: str = Query("", alias="hub.challenge"),
    settings: Settings = Depends(get_settings),
):
    if mode == "subscribe" and verify_token == settings.validation_token:
        logger.info("validating webhook")
        return challenge
    logger.error("failed validation, make sure the validation tokens match")
    raise HTTPException(status_code=403, detail="Failed validation")


@router.post(
    "/webhook",
    response_class=PlainTextResponse,
    dependencies=[Depends(verify_signature)],
)
async def receive_events(
    payload: WebhookPayload,
    background_tasks: BackgroundTasks,
    dispatcher: EventDispatcher = Depends(_get_dispatcher),
):
    if payload.object != "page":
        logger.warning("webhook object is not a page", extra={"object": payload.object})
        raise HTTPException(status_code=404, detail="Unsupported webhook object")

    # Meta expects a 200 quickly; events are handled after the response is sent
    event_count = 0
    for entry in payload.entry:
        for event in entry.messaging:
            background_tasks.add_task(dispatcher.dispatch, event)
            event_count += 1

    logger.debug(
        "webhook events scheduled",
        extra={"entry_count": len(payload.entry), "event_count": event_count},
    )
    return "EVENT_RECEIVED"
