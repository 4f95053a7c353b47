"""Graph page lookups and the page comparison pipeline."""

from __future__ import annotations

from .aggregate import aggregate, format_replies
from .client import GraphClient, GraphConfig
from .identifier import normalize
from .models import (
    AggregationSummary,
    GraphErrorKind,
    InvalidPageIdentifier,
    LikedPage,
    PageMetadata,
    RemoteCallOutcome,
)
from .pipeline import ERROR_MESSAGES, PagePipeline, PipelineRun, PipelineState

__all__ = [
    "ERROR_MESSAGES",
    "AggregationSummary",
    "GraphClient",
    "GraphConfig",
    "GraphErrorKind",
    "InvalidPageIdentifier",
    "LikedPage",
    "PageMetadata",
    "PagePipeline",
    "PipelineRun",
    "PipelineState",
    "RemoteCallOutcome",
    "aggregate",
    "format_replies",
    "normalize",
]
