"""Public API facade."""

from .responses_api import FilteredResponsesAPI

__all__ = ["FilteredResponsesAPI"]
