"""Page comparison pipeline — normalize, fetch metadata, fetch likes, aggregate, reply."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from .aggregate import aggregate, format_replies
from .client import GraphClient
from .identifier import normalize
from .models import (
    AggregationSummary,
    GraphErrorKind,
    InvalidPageIdentifier,
    LikedPage,
    PageMetadata,
)

logger = logging.getLogger(__name__)

PAGE_NOT_FOUND_MESSAGE = (
    "I could not find this page on Facebook. Your fault, not mine. "
    "Chirp in with a page that exists!"
)

ERROR_MESSAGES: dict[GraphErrorKind, str] = {
    GraphErrorKind.PERMISSION_PENDING: (
        "I am totally ruffled right now. Please excuse my confusion. I am still "
        "waiting to pass the review by Facebook to be able to serve you."
    ),
    GraphErrorKind.NOT_FOUND: PAGE_NOT_FOUND_MESSAGE,
    GraphErrorKind.AUTH_INVALID: (
        "Oh my! I am too blushed for a bird right now. There is a problem with "
        "my Fb authentication. Please excuse me, but I cannot respond to your "
        "queries right now."
    ),
    GraphErrorKind.UNKNOWN: (
        "Oops. Something went awry. I have no clue what went wrong. "
        "How about trying another page?"
    ),
}


class ReplySender(Protocol):
    """Anything that can deliver a text message to a Messenger user."""

    async def send_text(self, recipient: str, text: str) -> bool: ...


class PipelineState(str, Enum):
    START = "start"
    NORMALIZING = "normalizing"
    FETCHING_METADATA = "fetching_metadata"
    FETCHING_LIKES = "fetching_likes"
    AGGREGATING = "aggregating"
    DONE_SUCCESS = "done_success"
    DONE_FAILURE = "done_failure"


TERMINAL_STATES = frozenset({PipelineState.DONE_SUCCESS, PipelineState.DONE_FAILURE})


@dataclass
class PipelineRun:
    """State of a single pipeline invocation."""

    raw_text: str
    recipient: str
    state: PipelineState = PipelineState.START
    identifier: str | None = None
    metadata: PageMetadata | None = None
    likes: list[LikedPage] | None = None
    summary: AggregationSummary | None = None
    error: GraphErrorKind | None = None
    replies: list[str] = field(default_factory=list)
    trace: list[PipelineState] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.state is PipelineState.DONE_SUCCESS

    def fail(self, message: str, error: GraphErrorKind | None = None) -> PipelineState:
        self.error = error
        self.replies = [message]
        return PipelineState.DONE_FAILURE


class PagePipeline:
    """Runs the page comparison for one user message and sends the replies.

    The two Graph calls are sequenced: the likes lookup is only issued once
    the metadata lookup has succeeded. Every failure ends the run with a
    single user-facing reply; nothing is raised to the caller.
    """

    def __init__(self, graph: GraphClient, sender: ReplySender) -> None:
        self._graph = graph
        self._sender = sender
        self._handlers = {
            PipelineState.START: self._start,
            PipelineState.NORMALIZING: self._normalize,
            PipelineState.FETCHING_METADATA: self._fetch_metadata,
            PipelineState.FETCHING_LIKES: self._fetch_likes,
            PipelineState.AGGREGATING: self._aggregate,
        }

    async def run(self, raw_text: str, recipient: str) -> PipelineRun:
        run = PipelineRun(raw_text=raw_text, recipient=recipient)
        logger.info(
            "page comparison started",
            extra={"recipient": recipient, "raw_text": raw_text[:100]},
        )

        while run.state not in TERMINAL_STATES:
            run.trace.append(run.state)
            run.state = await self._handlers[run.state](run)
        run.trace.append(run.state)

        logger.info(
            "page comparison finished",
            extra={
                "recipient": recipient,
                "identifier": run.identifier,
                "state": run.state.value,
                "error_kind": run.error.value if run.error else None,
            },
        )

        for reply in run.replies:
            await self._sender.send_text(recipient, reply)
        return run

    async def _start(self, run: PipelineRun) -> PipelineState:
        return PipelineState.NORMALIZING

    async def _normalize(self, run: PipelineRun) -> PipelineState:
        try:
            run.identifier = normalize(run.raw_text)
        except InvalidPageIdentifier:
            logger.info("input is not a page identifier", extra={"raw_text": run.raw_text[:100]})
            return run.fail(PAGE_NOT_FOUND_MESSAGE)
        return PipelineState.FETCHING_METADATA

    async def _fetch_metadata(self, run: PipelineRun) -> PipelineState:
        if run.identifier is None:
            return run.fail(PAGE_NOT_FOUND_MESSAGE)
        outcome = await self._graph.fetch_metadata(run.identifier, run.recipient)
        if outcome.error is not None:
            return run.fail(ERROR_MESSAGES[outcome.error], outcome.error)
        if outcome.payload is None:
            return run.fail(ERROR_MESSAGES[GraphErrorKind.UNKNOWN], GraphErrorKind.UNKNOWN)
        run.metadata = outcome.payload
        return PipelineState.FETCHING_LIKES

    async def _fetch_likes(self, run: PipelineRun) -> PipelineState:
        if run.identifier is None:
            return run.fail(PAGE_NOT_FOUND_MESSAGE)
        outcome = await self._graph.fetch_liked_pages(run.identifier, run.recipient)
        if outcome.error is not None:
            return run.fail(ERROR_MESSAGES[outcome.error], outcome.error)
        if outcome.payload is None:
            return run.fail(ERROR_MESSAGES[GraphErrorKind.UNKNOWN], GraphErrorKind.UNKNOWN)
        run.likes = outcome.payload
        return PipelineState.AGGREGATING

    async def _aggregate(self, run: PipelineRun) -> PipelineState:
        if run.metadata is None or run.likes is None:
            return run.fail(ERROR_MESSAGES[GraphErrorKind.UNKNOWN], GraphErrorKind.UNKNOWN)
        run.summary = aggregate(run.metadata, run.likes)
        run.replies = format_replies(run.metadata, run.summary)
        logger.info(
            "page comparison aggregated",
            extra={
                "identifier": run.identifier,
                "same_category_count": run.summary.same_category_count,
                "total_liked_count": run.summary.total_liked_count,
                "unique_category_count": run.summary.unique_category_count,
            },
        )
        return PipelineState.DONE_SUCCESS
