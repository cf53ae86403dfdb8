"""Offset/limit windowing of a filtered dataset."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .core.constants import DEFAULT_LIMIT
from .core.exceptions import ValidationError
from .models import FilteredResponsesPage, Submission


def page_count(total: int, limit: int) -> int:
    """Number of `limit`-sized pages needed for `total` records; 0 when limit is 0."""
    if limit == 0:
        return 0
    return math.ceil(total / limit)


def window(
    submissions: Sequence[Submission],
    offset: int = 0,
    limit: int = DEFAULT_LIMIT,
) -> FilteredResponsesPage:
    """Slice `submissions` into the window starting at `offset`.

    The window holds at most `limit` records. Offsets past the end give an
    empty window; totals always describe the whole filtered dataset.

    Raises:
        ValidationError: If offset or limit is negative
    """
    if offset < 0 or limit < 0:
        raise ValidationError("offset and limit must be non-negative")
    return FilteredResponsesPage(
        responses=list(submissions[offset : offset + limit]),
        total_responses=len(submissions),
        page_count=page_count(len(submissions), limit),
    )
