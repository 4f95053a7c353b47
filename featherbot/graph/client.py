"""Graph API page lookups — page metadata and the page's liked pages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from featherbot.config import Settings

from .models import GraphErrorKind, LikedPage, PageMetadata, RemoteCallOutcome

logger = logging.getLogger(__name__)

PAGE_FIELDS = "name,category"

# Graph API error codes we tell apart
_ERROR_CODES: dict[int, GraphErrorKind] = {
    10: GraphErrorKind.PERMISSION_PENDING,
    803: GraphErrorKind.NOT_FOUND,
    190: GraphErrorKind.AUTH_INVALID,
}


@dataclass(frozen=True)
class GraphConfig:
    """Read-only connection settings for the Graph API."""

    access_token: str
    base_url: str = "https://graph.facebook.com"
    api_version: str = "v19.0"
    timeout: float = 3.0

    @classmethod
    def from_settings(cls, settings: Settings) -> GraphConfig:
        return cls(
            access_token=settings.graph_access_token,
            base_url=settings.graph_api_url,
            api_version=settings.graph_api_version,
            timeout=settings.graph_timeout_seconds,
        )


def classify_error(body: dict[str, Any]) -> GraphErrorKind:
    """Map a Graph ``{"error": {...}}`` payload to a :class:`GraphErrorKind`."""
    error = body.get("error")
    if not isinstance(error, dict):
        return GraphErrorKind.UNKNOWN
    code = error.get("code")
    if not isinstance(code, int):
        return GraphErrorKind.UNKNOWN
    return _ERROR_CODES.get(code, GraphErrorKind.UNKNOWN)


class GraphClient:
    """Single-attempt reads against the Graph API.

    Every call returns a :class:`RemoteCallOutcome`; transport errors,
    Graph error payloads and responses without the expected field all
    become failures instead of exceptions.
    """

    def __init__(self, config: GraphConfig, client: httpx.AsyncClient) -> None:
        self._config = config
        self._client = client

    def _url(self, path: str) -> str:
        base = self._config.base_url.rstrip("/")
        return f"{base}/{self._config.api_version}/{path}"

    async def _get(self, path: str) -> dict[str, Any] | None:
        """GET a Graph path, returning the decoded JSON object or ``None``."""
        try:
            resp = await self._client.get(
                self._url(path),
                params={
                    "fields": PAGE_FIELDS,
                    "access_token": self._config.access_token,
                },
                timeout=self._config.timeout,
            )
            body = resp.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError):
            logger.warning("graph request failed", extra={"path": path}, exc_info=True)
            return None

        if not isinstance(body, dict):
            logger.warning(
                "graph response is not an object",
                extra={"path": path, "status_code": resp.status_code},
            )
            return None

        logger.debug(
            "graph response received",
            extra={"path": path, "status_code": resp.status_code, "body": body},
        )
        return body

    def _failure_from(
        self, body: dict[str, Any] | None, recipient: str, path: str
    ) -> RemoteCallOutcome[Any]:
        kind = GraphErrorKind.UNKNOWN if body is None else classify_error(body)
        error = (body or {}).get("error")
        logger.info(
            "graph lookup failed",
            extra={
                "path": path,
                "error_kind": kind.value,
                "graph_error": error.get("message", "") if isinstance(error, dict) else "",
                "graph_code": error.get("code") if isinstance(error, dict) else None,
            },
        )
        return RemoteCallOutcome.failure(recipient, kind)

    async def fetch_metadata(
        self, identifier: str, recipient: str = ""
    ) -> RemoteCallOutcome[PageMetadata]:
        """Fetch the name and category of a page."""
        body = await self._get(identifier)
        if body is None or body.get("error") or not body.get("category"):
            return self._failure_from(body, recipient, identifier)

        metadata = PageMetadata(
            name=str(body.get("name") or ""),
            category=str(body["category"]),
        )
        logger.info(
            "page metadata fetched",
            extra={"identifier": identifier, "category": metadata.category},
        )
        return RemoteCallOutcome.success(recipient, metadata)

    async def fetch_liked_pages(
        self, identifier: str, recipient: str = ""
    ) -> RemoteCallOutcome[list[LikedPage]]:
        """Fetch the first batch of pages liked by a page."""
        path = f"{identifier}/likes"
        body = await self._get(path)
        if body is None or body.get("error") or not isinstance(body.get("data"), list):
            return self._failure_from(body, recipient, path)

        likes = [
            LikedPage(
                name=str(item.get("name") or ""),
                category=str(item.get("category") or ""),
            )
            for item in body["data"]
            if isinstance(item, dict)
        ]
        logger.info(
            "liked pages fetched",
            extra={"identifier": identifier, "liked_count": len(likes)},
        )
        return RemoteCallOutcome.success(recipient, likes)
