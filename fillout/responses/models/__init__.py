"""Data models."""

from .filters import FilterClause, parse_filters
from .page import FilteredResponsesPage, SubmissionsPage
from .query import QueryIdentity, ResponsesQuery
from .submission import Question, Submission

__all__ = [
    "FilterClause",
    "parse_filters",
    "FilteredResponsesPage",
    "SubmissionsPage",
    "QueryIdentity",
    "ResponsesQuery",
    "Question",
    "Submission",
]
