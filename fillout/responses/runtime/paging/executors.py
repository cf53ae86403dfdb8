"""Sequential page walking.

This module provides the PageExecutor class that requests pages one at a
time from an offset-paged endpoint and aggregates every record until the
reported page count is reached.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from time import perf_counter

from ...core.constants import PAGE_SIZE
from ...core.exceptions import FetchFailed
from ...models import SubmissionsPage
from .definitions import PagePlan, PagingResult
from .telemetry import log_page_completed, log_page_error, log_paging_complete


class PageExecutor:
    """Walks an offset-paged endpoint from offset 0 until exhaustion.

    Pages are requested strictly in order; page N+1 is not requested before
    page N has completed. The page count is re-read from every response.
    """

    def __init__(self, page_size: int = PAGE_SIZE, endpoint_id: str = "submissions") -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self._page_size = page_size
        self._endpoint_id = endpoint_id

    async def execute(
        self,
        fetch_page: Callable[[PagePlan], Awaitable[SubmissionsPage]],
    ) -> PagingResult:
        """Fetch every page and aggregate the records.

        Args:
            fetch_page: Async function that fetches the page described by a plan

        Returns:
            PagingResult with all records in remote order

        Raises:
            FetchFailed: If any page fails; records gathered so far are dropped
        """
        result = PagingResult()
        page_count: int | None = None
        offset = 0
        started = perf_counter()

        while page_count is None or result.pages_used < page_count:
            plan = PagePlan(
                offset=offset,
                limit=self._page_size,
                page_index=result.pages_used,
                endpoint_id=self._endpoint_id,
            )
            page_start = perf_counter()
            try:
                page = await fetch_page(plan)
            except FetchFailed as e:
                log_page_error(plan=plan, error_type=type(e).__name__, error_message=str(e))
                raise

            result.pages_used += 1
            page_count = page.page_count
            result.page_count = page_count
            log_page_completed(
                plan=plan,
                records=len(page.responses),
                page_count=page_count,
                latency_ms=(perf_counter() - page_start) * 1000.0,
            )

            if not page.responses:
                # Exhausted even if the reported page count says otherwise
                break

            result.data.extend(page.responses)
            offset += self._page_size

        log_paging_complete(
            endpoint_id=self._endpoint_id,
            result=result,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )
        return result
