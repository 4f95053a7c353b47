"""Category overlap between a page and the pages it likes."""

from __future__ import annotations

from collections.abc import Iterable

from .models import AggregationSummary, LikedPage, PageMetadata


def aggregate(metadata: PageMetadata, likes: Iterable[LikedPage]) -> AggregationSummary:
    """Count liked pages sharing the page's category and collect the categories seen.

    Category matching is exact and case-sensitive. ``unique_categories``
    keeps first-seen order.
    """
    total = 0
    same = 0
    seen: set[str] = set()
    categories: list[str] = []

    for like in likes:
        total += 1
        if like.category == metadata.category:
            same += 1
        if like.category not in seen:
            seen.add(like.category)
            categories.append(like.category)

    return AggregationSummary(
        same_category_count=same,
        total_liked_count=total,
        unique_categories=tuple(categories),
    )


def format_replies(metadata: PageMetadata, summary: AggregationSummary) -> list[str]:
    """Render the summary as one or two chat messages."""
    noun = "page" if summary.same_category_count == 1 else "pages"
    replies = [
        f"The page {metadata.name} belongs to the Category {metadata.category}. "
        f"This page 💚 likes {summary.same_category_count} {noun} in the same "
        f"Category, out of a total of {summary.total_liked_count} pages liked."
    ]
    if summary.unique_categories:
        replies.append(
            "The kinds of pages liked by this page: "
            + ", ".join(summary.unique_categories)
            + "."
        )
    return replies
