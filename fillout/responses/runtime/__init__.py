"""Runtime layer: HTTP transport and pagination."""

from .paging import PageExecutor, PagePlan, PagingResult
from .rest import HTTPClient

__all__ = [
    "HTTPClient",
    "PageExecutor",
    "PagePlan",
    "PagingResult",
]
