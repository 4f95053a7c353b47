"""Send API client tests (mocked httpx)."""

from unittest.mock import MagicMock

import httpx
import pytest

from featherbot.messenger.client import MESSAGE_METADATA, MessengerClient

pytestmark = pytest.mark.asyncio


def _response(body, status_code: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = body
    return resp


def _client(http_client) -> MessengerClient:
    return MessengerClient(
        http_client,
        access_token="page-token",
        base_url="https://graph.example.com",
        api_version="v19.0",
    )


async def test_send_text_posts_message(http_client):
    http_client.post.return_value = _response({"recipient_id": "u1", "message_id": "m1"})

    assert await _client(http_client).send_text("u1", "hello") is True

    args, kwargs = http_client.post.call_args
    assert args[0] == "https://graph.example.com/v19.0/me/messages"
    assert kwargs["params"] == {"access_token": "page-token"}
    assert kwargs["json"] == {
        "recipient": {"id": "u1"},
        "message": {"text": "hello", "metadata": MESSAGE_METADATA},
    }


async def test_send_text_skips_empty_text(http_client):
    assert await _client(http_client).send_text("u1", "  ") is False
    http_client.post.assert_not_awaited()


async def test_send_action(http_client):
    http_client.post.return_value = _response({"recipient_id": "u1"})

    assert await _client(http_client).send_action("u1", "typing_on") is True

    assert http_client.post.call_args.kwargs["json"] == {
        "recipient": {"id": "u1"},
        "sender_action": "typing_on",
    }


async def test_send_api_error_returns_false(http_client):
    http_client.post.return_value = _response(
        {"error": {"message": "(#100) No matching user found", "code": 100}},
        status_code=400,
    )
    assert await _client(http_client).send_text("u1", "hello") is False


async def test_send_api_non_json_error_returns_false(http_client):
    resp = _response(None, status_code=500)
    resp.json.side_effect = ValueError("no json")
    http_client.post.return_value = resp
    assert await _client(http_client).send_text("u1", "hello") is False


async def test_transport_error_returns_false(http_client):
    http_client.post.side_effect = httpx.ConnectError("connection refused")
    assert await _client(http_client).send_text("u1", "hello") is False


async def test_from_settings_uses_page_token(settings, http_client):
    http_client.post.return_value = _response({"recipient_id": "u1"})
    client = MessengerClient.from_settings(settings, http_client)

    await client.send_text("u1", "hi")

    args, kwargs = http_client.post.call_args
    assert args[0] == f"https://graph.facebook.com/{settings.graph_api_version}/me/messages"
    assert kwargs["params"] == {"access_token": "test-page-token"}
