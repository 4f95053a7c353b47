"""Fixtures — settings, mocked HTTP client, recording reply sender."""

from unittest.mock import AsyncMock

import pytest

from featherbot.config import Settings

APP_SECRET = "test-app-secret"
VALIDATION_TOKEN = "test-validation-token"
PAGE_ACCESS_TOKEN = "test-page-token"


@pytest.fixture
def settings() -> Settings:
    return Settings(  # type: ignore[call-arg]
        app_secret=APP_SECRET,
        validation_token=VALIDATION_TOKEN,
        page_access_token=PAGE_ACCESS_TOKEN,
        worker_page_access_token="test-worker-token",
    )


@pytest.fixture
def http_client() -> AsyncMock:
    """Stand-in for the shared ``httpx.AsyncClient``."""
    return AsyncMock()


class RecordingSender:
    """Collects replies instead of calling the Send API."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []
        self.actions: list[tuple[str, str]] = []

    async def send_text(self, recipient: str, text: str) -> bool:
        self.sent.append((recipient, text))
        return True

    async def send_action(self, recipient: str, action: str) -> bool:
        self.actions.append((recipient, action))
        return True


@pytest.fixture
def sender() -> RecordingSender:
    return RecordingSender()
