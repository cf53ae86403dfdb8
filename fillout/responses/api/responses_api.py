"""High-level facade for filtered form responses.

Request Flow:
    1. Derive the query identity (cache key) from the request
    2. Cache hit → stored dataset; miss → fetch every page once and store it
    3. Apply the filter set to the unfiltered dataset
    4. Window the filtered records by offset/limit
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import partial

from ..cache import ResultCache
from ..connectors import FilloutRESTConnector
from ..core.constants import DEFAULT_LIMIT
from ..core.enums import SortOrder, SubmissionStatus
from ..filtering import apply_filters, parse_filters
from ..models import FilterClause, FilteredResponsesPage, QueryIdentity, ResponsesQuery, Submission
from ..windowing import window

logger = logging.getLogger(__name__)


class FilteredResponsesAPI:
    """Serves filtered, re-paginated submissions of a form.

    The connector and the cache are injected; the API owns neither and
    closing them is left to whoever built them.
    """

    def __init__(self, connector: FilloutRESTConnector, cache: ResultCache[Submission]) -> None:
        self._connector = connector
        self._cache = cache

    @property
    def cache(self) -> ResultCache[Submission]:
        return self._cache

    async def dataset(self, identity: QueryIdentity) -> tuple[Submission, ...]:
        """Unfiltered dataset for the identity, fetched at most once while cached.

        Raises:
            FetchFailed: If the remote fetch fails; nothing is cached
        """
        return await self._cache.get_or_load(
            identity.cache_key(), partial(self._connector.fetch_all, identity)
        )

    async def filtered_responses(
        self, form_id: str, query: ResponsesQuery
    ) -> FilteredResponsesPage:
        """Run a validated query against a form.

        Raises:
            FetchFailed: If the remote fetch fails
        """
        submissions = await self.dataset(query.identity(form_id))
        filtered = apply_filters(submissions, query.filters)
        logger.debug(
            "responses_filtered",
            extra={
                "form_id": form_id,
                "total": len(submissions),
                "matched": len(filtered),
                "clauses": len(query.filters),
            },
        )
        return window(filtered, offset=query.offset, limit=query.limit)

    async def query(
        self,
        form_id: str,
        *,
        filters: str | Sequence[FilterClause] | None = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
        after_date: str | None = None,
        before_date: str | None = None,
        status: SubmissionStatus | str | None = None,
        include_edit_link: bool | None = None,
        sort: SortOrder | str | None = None,
    ) -> FilteredResponsesPage:
        """Keyword form of `filtered_responses`.

        `filters` may be the JSON text used on the query string.

        Raises:
            ValidationError: If the filter JSON is invalid
            pydantic.ValidationError: If another argument is out of range
            FetchFailed: If the remote fetch fails
        """
        clauses = parse_filters(filters) if isinstance(filters, str) else list(filters or [])
        request = ResponsesQuery(
            filters=clauses,
            limit=limit,
            offset=offset,
            after_date=after_date,
            before_date=before_date,
            status=status,
            include_edit_link=include_edit_link,
            sort=sort,
        )
        return await self.filtered_responses(form_id, request)
