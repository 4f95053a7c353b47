"""Messenger webhook payload models."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class Participant(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str


class QuickReply(BaseModel):
    payload: str = ""


class Message(BaseModel):
    mid: str = ""
    text: str | None = None
    is_echo: bool = False
    app_id: int | None = None
    metadata: str | None = None
    quick_reply: QuickReply | None = None
    attachments: list[dict[str, Any]] | None = None


class Postback(BaseModel):
    payload: str = ""
    title: str = ""


class Delivery(BaseModel):
    mids: list[str] = []
    watermark: int = 0
    seq: int | None = None


class Read(BaseModel):
    watermark: int = 0
    seq: int | None = None


class Optin(BaseModel):
    ref: str = ""


class AccountLinking(BaseModel):
    status: str = ""
    authorization_code: str | None = None


class MessagingEvent(BaseModel):
    sender: Participant
    recipient: Participant
    timestamp: int | None = None
    optin: Optin | None = None
    message: Message | None = None
    delivery: Delivery | None = None
    postback: Postback | None = None
    read: Read | None = None
    account_linking: AccountLinking | None = None


class WebhookEntry(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    time: int | None = None
    messaging: list[MessagingEvent] = []


class WebhookPayload(BaseModel):
    object: str
    entry: list[WebhookEntry] = []
