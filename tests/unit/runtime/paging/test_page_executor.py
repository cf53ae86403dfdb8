"""Unit tests for the sequential page walk."""

from __future__ import annotations

import logging

import pytest

from fillout.responses.core import FetchFailed
from fillout.responses.models import SubmissionsPage
from fillout.responses.runtime.paging import PageExecutor, PagePlan


def _page(records, page_count):
    return SubmissionsPage(responses=records, page_count=page_count)


class TestPageExecutor:
    """Test PageExecutor functionality."""

    def test_rejects_non_positive_page_size(self):
        with pytest.raises(ValueError):
            PageExecutor(page_size=0)

    @pytest.mark.asyncio
    async def test_walks_every_page_in_order(self, make_submission):
        executor = PageExecutor(page_size=2)
        records = [make_submission(f"s{i}") for i in range(5)]
        plans: list[PagePlan] = []

        async def fetch_page(plan: PagePlan) -> SubmissionsPage:
            plans.append(plan)
            return _page(records[plan.offset : plan.offset + plan.limit], page_count=3)

        result = await executor.execute(fetch_page)

        assert [p.offset for p in plans] == [0, 2, 4]
        assert [p.page_index for p in plans] == [0, 1, 2]
        assert all(p.limit == 2 for p in plans)
        assert result.pages_used == 3
        assert result.page_count == 3
        assert result.total_records == 5
        assert [s.submission_id for s in result.data] == ["s0", "s1", "s2", "s3", "s4"]

    @pytest.mark.asyncio
    async def test_default_page_size_is_150(self, make_submission):
        executor = PageExecutor()
        offsets = []

        async def fetch_page(plan: PagePlan) -> SubmissionsPage:
            offsets.append(plan.offset)
            return _page([make_submission(f"s{plan.offset}")], page_count=2)

        await executor.execute(fetch_page)
        assert offsets == [0, 150]

    @pytest.mark.asyncio
    async def test_single_page(self, make_submission):
        executor = PageExecutor()
        calls = 0

        async def fetch_page(plan: PagePlan) -> SubmissionsPage:
            nonlocal calls
            calls += 1
            return _page([make_submission("s0")], page_count=1)

        result = await executor.execute(fetch_page)
        assert calls == 1
        assert result.total_records == 1

    @pytest.mark.asyncio
    async def test_page_count_is_reread_each_page(self, make_submission):
        executor = PageExecutor(page_size=1)
        reported = [2, 3, 3]

        async def fetch_page(plan: PagePlan) -> SubmissionsPage:
            return _page([make_submission(f"s{plan.page_index}")], reported[plan.page_index])

        result = await executor.execute(fetch_page)
        assert result.pages_used == 3

    @pytest.mark.asyncio
    async def test_empty_form(self):
        executor = PageExecutor()

        async def fetch_page(plan: PagePlan) -> SubmissionsPage:
            return _page([], page_count=0)

        result = await executor.execute(fetch_page)
        assert result.pages_used == 1
        assert result.data == []

    @pytest.mark.asyncio
    async def test_stops_on_empty_page(self, make_submission):
        executor = PageExecutor(page_size=1)
        calls = 0

        async def fetch_page(plan: PagePlan) -> SubmissionsPage:
            nonlocal calls
            calls += 1
            records = [make_submission("s0")] if plan.page_index == 0 else []
            return _page(records, page_count=10)

        result = await executor.execute(fetch_page)
        assert calls == 2
        assert result.total_records == 1

    @pytest.mark.asyncio
    async def test_failure_aborts_walk(self, make_submission, caplog):
        executor = PageExecutor(page_size=1)
        calls = 0

        async def fetch_page(plan: PagePlan) -> SubmissionsPage:
            nonlocal calls
            calls += 1
            if plan.page_index == 1:
                raise FetchFailed("Request failed!", status_code=500, offset=plan.offset)
            return _page([make_submission(f"s{plan.page_index}")], page_count=3)

        with caplog.at_level(logging.ERROR), pytest.raises(FetchFailed) as exc_info:
            await executor.execute(fetch_page)

        assert calls == 2
        assert exc_info.value.offset == 1
        assert any(record.getMessage() == "page_error" for record in caplog.records)
        error_record = next(r for r in caplog.records if r.getMessage() == "page_error")
        assert error_record.page_index == 1
        assert error_record.error_type == "FetchFailed"

    @pytest.mark.asyncio
    async def test_logs_page_telemetry(self, make_submission, caplog):
        executor = PageExecutor(page_size=1, endpoint_id="forms/f1/submissions")

        async def fetch_page(plan: PagePlan) -> SubmissionsPage:
            return _page([make_submission(f"s{plan.page_index}")], page_count=2)

        with caplog.at_level(logging.INFO):
            await executor.execute(fetch_page)

        completed = [r for r in caplog.records if r.getMessage() == "page_completed"]
        assert [r.offset for r in completed] == [0, 1]
        assert all(r.endpoint_id == "forms/f1/submissions" for r in completed)
        summary = next(r for r in caplog.records if r.getMessage() == "paging_complete")
        assert summary.total_records == 2
        assert summary.pages_used == 2
