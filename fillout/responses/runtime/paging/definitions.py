"""Paging plan and result structures."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...core.constants import PAGE_SIZE
from ...models import Submission


@dataclass(frozen=True)
class PagePlan:
    """Plan for a single page request.

    Attributes:
        offset: Record offset sent to the remote API
        limit: Records requested for this page
        page_index: Zero-based index of this page in the walk
        endpoint_id: Endpoint label used in telemetry
    """

    offset: int
    limit: int = PAGE_SIZE
    page_index: int = 0
    endpoint_id: str = "submissions"


@dataclass
class PagingResult:
    """Result of walking every page of a dataset.

    Attributes:
        data: All records in remote order
        pages_used: Number of pages fetched
        page_count: Page count reported by the last response
    """

    data: list[Submission] = field(default_factory=list)
    pages_used: int = 0
    page_count: int = 0

    @property
    def total_records(self) -> int:
        return len(self.data)
