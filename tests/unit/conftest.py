"""Shared fixtures for unit tests."""

from __future__ import annotations

import math
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from fillout.responses.models import Submission


def _submission_payload(submission_id: str, answers: dict[str, Any]) -> dict[str, Any]:
    return {
        "submissionId": submission_id,
        "submissionTime": "2024-05-16T23:20:05.324Z",
        "lastUpdatedAt": "2024-05-16T23:20:05.324Z",
        "questions": [
            {"id": qid, "name": qid.upper(), "type": "ShortAnswer", "value": value}
            for qid, value in answers.items()
        ],
        "calculations": [],
        "urlParameters": [],
    }


@pytest.fixture
def submission_payload():
    """Factory for raw submission dicts as the remote API sends them."""
    return _submission_payload


@pytest.fixture
def make_submission():
    """Factory for Submission models: make_submission("s1", q1=5, q2="a")."""

    def factory(submission_id: str, **answers: Any) -> Submission:
        return Submission.model_validate(_submission_payload(submission_id, answers))

    return factory


@pytest.fixture
def paged_payloads():
    """Split raw submissions into remote page payloads."""

    def factory(records: list[dict[str, Any]], page_size: int = 150) -> list[dict[str, Any]]:
        page_count = math.ceil(len(records) / page_size)
        pages = [
            {
                "responses": records[start : start + page_size],
                "totalResponses": len(records),
                "pageCount": page_count,
            }
            for start in range(0, len(records), page_size)
        ]
        return pages or [{"responses": [], "totalResponses": 0, "pageCount": 0}]

    return factory


@pytest.fixture
def mock_http():
    """Factory for a mocked HTTPClient whose get_json() yields the given results in order."""

    def factory(results: list[Any]) -> MagicMock:
        http = MagicMock()
        http.get_json = AsyncMock(side_effect=results)
        http.close = AsyncMock()
        return http

    return factory
