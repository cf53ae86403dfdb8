"""JSON transport for the submissions API.

Every request goes through one `aiohttp.ClientSession` that carries the
API credential and rejects non-success statuses. Transport failures of any
kind (connection errors, timeouts, error statuses, bodies that are not JSON)
leave this module as `FetchFailed`, so callers deal with a single error type.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from ...core.constants import DEFAULT_TIMEOUT, FETCH_FAILED_MESSAGE
from ...core.exceptions import FetchFailed

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async JSON client bound to one API root and credential."""

    def __init__(
        self,
        base_url: str,
        *,
        headers: dict[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root that relative paths are appended to
            headers: Default headers for every request (e.g. Authorization)
            timeout: Total timeout per request in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.headers = dict(headers or {})
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Session with the default headers, opened on first use."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers=self.headers,
                timeout=self.timeout,
                raise_for_status=True,
            )
        return self._session

    def url_for(self, path: str) -> str:
        """Absolute URL for an API path."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get_json(
        self,
        path: str,
        params: dict[str, str] | None = None,
        *,
        page_offset: int | None = None,
    ) -> Any:
        """GET a path and decode its JSON body.

        Args:
            path: API path relative to `base_url`, or an absolute URL
            params: Query parameters
            page_offset: Offset of the page being fetched, attached to errors

        Raises:
            FetchFailed: On any transport, status or decoding failure
        """
        url = self.url_for(path)
        try:
            async with self.session.get(url, params=params) as response:
                return await response.json(content_type=None)
        except aiohttp.ClientResponseError as e:
            logger.warning(
                "http_error_status",
                extra={"url": url, "status_code": e.status, "page_offset": page_offset},
            )
            raise FetchFailed(
                FETCH_FAILED_MESSAGE, status_code=e.status, offset=page_offset
            ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning(
                "http_transport_error",
                extra={"url": url, "error_type": type(e).__name__, "page_offset": page_offset},
            )
            raise FetchFailed(FETCH_FAILED_MESSAGE, offset=page_offset) from e

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> HTTPClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
