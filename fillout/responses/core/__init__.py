"""Core components."""

from .constants import DEFAULT_LIMIT, MAX_LIMIT, PAGE_SIZE
from .enums import FilterCondition, SortOrder, SubmissionStatus
from .exceptions import ConfigurationError, FetchFailed, ResponsesError, ValidationError

__all__ = [
    "PAGE_SIZE",
    "MAX_LIMIT",
    "DEFAULT_LIMIT",
    "FilterCondition",
    "SortOrder",
    "SubmissionStatus",
    "ResponsesError",
    "FetchFailed",
    "ValidationError",
    "ConfigurationError",
]
