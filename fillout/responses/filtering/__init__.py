"""Filter engine."""

from ..models.filters import FilterClause, parse_filters
from .engine import apply_filters, evaluate, matches

__all__ = [
    "FilterClause",
    "apply_filters",
    "evaluate",
    "matches",
    "parse_filters",
]
