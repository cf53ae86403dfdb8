"""Fillout Responses - filtered, re-paginated form submissions."""

from .api import FilteredResponsesAPI
from .cache import ResultCache
from .config import Settings
from .connectors import FilloutRESTConnector
from .core import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    PAGE_SIZE,
    ConfigurationError,
    FetchFailed,
    FilterCondition,
    ResponsesError,
    SortOrder,
    SubmissionStatus,
    ValidationError,
)
from .filtering import apply_filters, parse_filters
from .models import (
    FilterClause,
    FilteredResponsesPage,
    QueryIdentity,
    Question,
    ResponsesQuery,
    Submission,
    SubmissionsPage,
)
from .windowing import window

__version__ = "0.1.0"

__all__ = [
    "FilteredResponsesAPI",
    "ResultCache",
    "Settings",
    "FilloutRESTConnector",
    # Constants
    "PAGE_SIZE",
    "MAX_LIMIT",
    "DEFAULT_LIMIT",
    # Enums
    "FilterCondition",
    "SortOrder",
    "SubmissionStatus",
    # Exceptions
    "ResponsesError",
    "FetchFailed",
    "ValidationError",
    "ConfigurationError",
    # Filtering and windowing
    "apply_filters",
    "parse_filters",
    "window",
    # Models
    "FilterClause",
    "FilteredResponsesPage",
    "QueryIdentity",
    "Question",
    "ResponsesQuery",
    "Submission",
    "SubmissionsPage",
]
