"""Structured logging for page walks.

Each helper emits one event name with its fields in `extra`, so handlers
that understand structured records can pick them up directly.
"""

from __future__ import annotations

import logging

from .definitions import PagePlan, PagingResult

logger = logging.getLogger(__name__)


def log_page_completed(
    *,
    plan: PagePlan,
    records: int,
    page_count: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single page.

    Args:
        plan: The page that was fetched
        records: Number of records the page returned
        page_count: Total page count the remote API reported
        latency_ms: Request latency in milliseconds (optional)
    """
    logger.info(
        "page_completed",
        extra={
            "endpoint_id": plan.endpoint_id,
            "page_index": plan.page_index,
            "offset": plan.offset,
            "records": records,
            "page_count": page_count,
            "latency_ms": latency_ms,
        },
    )


def log_paging_complete(
    *,
    endpoint_id: str,
    result: PagingResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a full page walk."""
    logger.info(
        "paging_complete",
        extra={
            "endpoint_id": endpoint_id,
            "pages_used": result.pages_used,
            "page_count": result.page_count,
            "total_records": result.total_records,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_page_error(
    *,
    plan: PagePlan,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page; the walk is aborted afterwards.

    Args:
        plan: The page that failed
        error_type: Exception class name of the underlying failure
        error_message: Error message
    """
    logger.error(
        "page_error",
        extra={
            "endpoint_id": plan.endpoint_id,
            "page_index": plan.page_index,
            "offset": plan.offset,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
