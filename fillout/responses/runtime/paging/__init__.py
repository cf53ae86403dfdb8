"""Offset pagination for the remote submissions API.

Architecture:
    - definitions.py: PagePlan and PagingResult structures
    - executors.py: PageExecutor, the sequential page walk
    - telemetry.py: Structured logging for page walks
"""

from __future__ import annotations

from .definitions import PagePlan, PagingResult
from .executors import PageExecutor

__all__ = [
    "PagePlan",
    "PagingResult",
    "PageExecutor",
]
