"""Unit tests for the filtered responses facade."""

from __future__ import annotations

import json

import pytest

from fillout.responses.api import FilteredResponsesAPI
from fillout.responses.cache import ResultCache
from fillout.responses.connectors import FilloutRESTConnector
from fillout.responses.core import FetchFailed, ValidationError
from fillout.responses.models import ResponsesQuery


@pytest.fixture
def ten_submissions(submission_payload):
    return [submission_payload(f"s{i}", {"q1": i, "q2": f"name-{i}"}) for i in range(10)]


def build_api(http, capacity=10, page_size=150):
    connector = FilloutRESTConnector("sk_test", http_client=http, page_size=page_size)
    return FilteredResponsesAPI(connector, ResultCache(capacity=capacity))


class TestFilteredResponses:
    """End-to-end behaviour over a mocked remote API."""

    @pytest.mark.asyncio
    async def test_filter_then_window(self, mock_http, paged_payloads, ten_submissions):
        api = build_api(mock_http(paged_payloads(ten_submissions)))
        query = ResponsesQuery.from_query(
            {
                "filters": json.dumps([{"id": "q1", "condition": "greater_than", "value": 5}]),
                "limit": "2",
                "offset": "0",
            }
        )

        page = await api.filtered_responses("f1", query)

        assert len(page.responses) == 2
        assert page.total_responses == 4
        assert page.page_count == 2
        assert [s.submission_id for s in page.responses] == ["s6", "s7"]

    @pytest.mark.asyncio
    async def test_second_window(self, mock_http, paged_payloads, ten_submissions):
        api = build_api(mock_http(paged_payloads(ten_submissions)))

        page = await api.query(
            "f1",
            filters='[{"id": "q1", "condition": "greater_than", "value": 5}]',
            limit=2,
            offset=2,
        )
        assert [s.submission_id for s in page.responses] == ["s8", "s9"]

    @pytest.mark.asyncio
    async def test_no_filters(self, mock_http, paged_payloads, ten_submissions):
        api = build_api(mock_http(paged_payloads(ten_submissions)))
        page = await api.query("f1")
        assert page.total_responses == 10
        assert page.page_count == 1

    @pytest.mark.asyncio
    async def test_repeated_query_hits_cache(self, mock_http, paged_payloads, ten_submissions):
        http = mock_http(paged_payloads(ten_submissions))
        api = build_api(http)

        first = await api.query("f1", status="finished")
        second = await api.query(
            "f1",
            status="finished",
            filters='[{"id": "q2", "condition": "equals", "value": "name-3"}]',
            offset=0,
            limit=1,
        )

        assert http.get_json.await_count == 1
        assert first.total_responses == 10
        assert [s.submission_id for s in second.responses] == ["s3"]

    @pytest.mark.asyncio
    async def test_cached_dataset_is_identical(self, mock_http, paged_payloads, ten_submissions):
        api = build_api(mock_http(paged_payloads(ten_submissions)))
        query = ResponsesQuery.from_query({})

        first = await api.dataset(query.identity("f1"))
        second = await api.dataset(query.identity("f1"))
        assert first is second

    @pytest.mark.asyncio
    async def test_different_identity_fetches_again(
        self, mock_http, paged_payloads, ten_submissions
    ):
        pages = paged_payloads(ten_submissions)
        http = mock_http(pages + pages)
        api = build_api(http)

        await api.query("f1", sort="asc")
        await api.query("f1", sort="desc")

        assert http.get_json.await_count == 2
        assert len(api.cache) == 2

    @pytest.mark.asyncio
    async def test_fetch_failure_is_not_cached(
        self, mock_http, paged_payloads, submission_payload
    ):
        records = [submission_payload(f"s{i}", {}) for i in range(5)]
        pages = paged_payloads(records, page_size=2)
        http = mock_http([pages[0], FetchFailed("Request failed!"), *pages])
        api = build_api(http, page_size=2)

        with pytest.raises(FetchFailed):
            await api.query("f1")
        assert len(api.cache) == 0

        page = await api.query("f1")
        assert page.total_responses == 5

    @pytest.mark.asyncio
    async def test_invalid_filter_json(self, mock_http):
        api = build_api(mock_http([]))
        with pytest.raises(ValidationError):
            await api.query("f1", filters="[{")
