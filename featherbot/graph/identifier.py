"""Reduce free-form user text to a Graph page identifier."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

from .models import InvalidPageIdentifier

logger = logging.getLogger(__name__)

_SEPARATOR = "/"


def normalize(raw_text: str) -> str:
    """Extract a page slug or numeric ID from a URL or a bare page name.

    ``https://www.facebook.com/facebook`` gives ``facebook`` and
    ``https://facebook.com/Birds-of-a-Feather-2179257909023050`` gives
    ``2179257909023050`` (only the segment after the last hyphen is kept).
    Raises :class:`InvalidPageIdentifier` when the result is empty or still
    contains a path separator.
    """
    text = raw_text.strip()
    try:
        path = urlparse(text).path
    except ValueError:
        path = text

    if path.endswith(_SEPARATOR):
        path = path[:-1]
    if path.startswith(_SEPARATOR):
        path = path[1:]

    path = path.rsplit("-", 1)[-1]

    slash_count = path.count(_SEPARATOR)
    logger.debug(
        "identifier normalized",
        extra={"raw_text": raw_text[:100], "path": path, "slash_count": slash_count},
    )
    if slash_count or not path:
        raise InvalidPageIdentifier(f"not a single page identifier: {raw_text!r}")
    return path
