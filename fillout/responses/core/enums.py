"""Core enumerations shared by the query, filter and connector layers.

String enums so values serialise straight into query strings and JSON
payloads without conversion.
"""

from enum import Enum


class SubmissionStatus(str, Enum):
    """Submission completion state accepted by the remote API."""

    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class SortOrder(str, Enum):
    """Sort order of submissions by submission time."""

    ASC = "asc"
    DESC = "desc"


class FilterCondition(str, Enum):
    """Comparison applied by a single filter clause."""

    EQUALS = "equals"
    DOES_NOT_EQUAL = "does_not_equal"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
