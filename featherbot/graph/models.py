"""Data models for Graph page lookups."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class InvalidPageIdentifier(ValueError):
    """Raised when user text cannot be reduced to a single page identifier."""


class GraphErrorKind(str, Enum):
    """Failure categories of a Graph API call."""

    PERMISSION_PENDING = "permission_pending"
    NOT_FOUND = "not_found"
    AUTH_INVALID = "auth_invalid"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PageMetadata:
    name: str
    category: str


@dataclass(frozen=True)
class LikedPage:
    name: str
    category: str


@dataclass(frozen=True)
class AggregationSummary:
    """Category overlap between a page and the pages it likes."""

    same_category_count: int = 0
    total_liked_count: int = 0
    unique_categories: tuple[str, ...] = field(default_factory=tuple)

    @property
    def unique_category_count(self) -> int:
        return len(self.unique_categories)


@dataclass(frozen=True)
class RemoteCallOutcome(Generic[T]):
    """Result of one Graph call: a payload on success, an error kind otherwise.

    ``recipient`` is the Messenger user the lookup was made for, so a failure
    can be answered without any other context.
    """

    recipient: str
    payload: T | None = None
    error: GraphErrorKind | None = None

    @classmethod
    def success(cls, recipient: str, payload: T) -> RemoteCallOutcome[T]:
        return cls(recipient=recipient, payload=payload)

    @classmethod
    def failure(cls, recipient: str, error: GraphErrorKind) -> RemoteCallOutcome[T]:
        return cls(recipient=recipient, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None
