"""Fillout submissions connector.

Fetches every submission of a form for a given query identity by walking
the API's offset pagination one page at a time.
"""

from __future__ import annotations

import logging
from functools import partial

import pydantic

from ...core.constants import DEFAULT_TIMEOUT, FETCH_FAILED_MESSAGE, PAGE_SIZE
from ...core.exceptions import FetchFailed
from ...models import QueryIdentity, Submission, SubmissionsPage
from ...runtime.paging import PageExecutor, PagePlan
from ...runtime.rest import HTTPClient
from .config import BASE_URL, auth_headers, submissions_path

logger = logging.getLogger(__name__)


class FilloutRESTConnector:
    """Read-only client for `GET /forms/{formId}/submissions`."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        page_size: int = PAGE_SIZE,
        http_client: HTTPClient | None = None,
    ) -> None:
        """Initialize the connector.

        Args:
            api_key: Fillout API key, forwarded as a bearer token
            base_url: API root, e.g. ``https://api.fillout.com/v1/api``
            timeout: Total timeout per page request in seconds
            page_size: Records requested per page
            http_client: Optional pre-built client (tests inject a mock)
        """
        self._http = http_client or HTTPClient(
            base_url, headers=auth_headers(api_key), timeout=timeout
        )
        self._executor = PageExecutor(page_size=page_size)

    async def fetch_page(self, identity: QueryIdentity, plan: PagePlan) -> SubmissionsPage:
        """Fetch and parse a single page.

        Raises:
            FetchFailed: On transport errors, timeouts, non-2xx statuses or
                a payload that is not a submissions page
        """
        params = {
            **identity.to_remote_params(),
            "offset": str(plan.offset),
            "limit": str(plan.limit),
        }
        data = await self._http.get_json(
            submissions_path(identity.form_id), params=params, page_offset=plan.offset
        )
        try:
            return SubmissionsPage.model_validate(data)
        except pydantic.ValidationError as e:
            raise FetchFailed(FETCH_FAILED_MESSAGE, offset=plan.offset) from e

    async def fetch_all(self, identity: QueryIdentity) -> list[Submission]:
        """Fetch every submission for the identity, in remote order.

        Raises:
            FetchFailed: If any page fails; nothing is returned in that case
        """
        logger.debug("fetch_all_started", extra={"form_id": identity.form_id})
        result = await self._executor.execute(partial(self.fetch_page, identity))
        return result.data

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> FilloutRESTConnector:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
