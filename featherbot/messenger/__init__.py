"""Messenger Send API and webhook event handling."""

from __future__ import annotations

from .client import MessengerClient
from .dispatch import EventDispatcher, normalize_keyword

__all__ = ["EventDispatcher", "MessengerClient", "normalize_keyword"]
