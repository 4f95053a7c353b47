"""Webhook signature validation (FastAPI dependency)."""

import hashlib
import hmac
import logging

from fastapi import Depends, HTTPException, Request, status

from featherbot.config import Settings, get_settings

logger = logging.getLogger(__name__)

_DIGESTS = {"sha256": hashlib.sha256, "sha1": hashlib.sha1}

# Checked in order; Meta sends both, the sha256 one is preferred
_SIGNATURE_HEADERS = (
    ("X-Hub-Signature-256", "sha256"),
    ("X-Hub-Signature", "sha1"),
)


def compute_signature(secret: str, body: bytes, algorithm: str = "sha256") -> str:
    """Return the ``<algorithm>=<hexdigest>`` header value Meta would send for *body*."""
    digest = hmac.new(secret.encode(), body, _DIGESTS[algorithm]).hexdigest()
    return f"{algorithm}={digest}"


async def verify_signature(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> None:
    """Check the ``X-Hub-Signature-256`` / ``X-Hub-Signature`` header against the raw body."""
    for header, algorithm in _SIGNATURE_HEADERS:
        provided = request.headers.get(header)
        if provided is not None:
            break
    else:
        if settings.require_signature:
            logger.warning("webhook signature missing")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Missing request signature",
            )
        logger.error("couldn't validate the webhook signature, header missing")
        return

    expected = compute_signature(settings.app_secret, await request.body(), algorithm)
    if not hmac.compare_digest(expected, provided):
        logger.warning("webhook signature mismatch", extra={"header": header})
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid request signature",
        )
