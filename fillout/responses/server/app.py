"""aiohttp application exposing the filtered responses endpoint.

Routes:
    GET /                               service banner
    GET /{formId}/filteredResponses     filtered, windowed submissions

Lifecycle:
    The result cache and the connector are built once in `create_app` and
    stored on the application. Cleanup closes the connector's HTTP session
    and clears the cache.
"""

from __future__ import annotations

import logging

from aiohttp import web

from ..api import FilteredResponsesAPI
from ..cache import ResultCache
from ..config import Settings
from ..connectors import FilloutRESTConnector
from ..core.constants import FETCH_FAILED_MESSAGE
from ..core.exceptions import FetchFailed, ValidationError
from ..models import ResponsesQuery

logger = logging.getLogger(__name__)

API_KEY = web.AppKey("api", FilteredResponsesAPI)
CONNECTOR_KEY = web.AppKey("connector", FilloutRESTConnector)
CACHE_KEY = web.AppKey("cache", ResultCache)


async def index(request: web.Request) -> web.Response:
    return web.Response(text="Fillout assignment")


async def filtered_responses(request: web.Request) -> web.Response:
    """Handle `GET /{formId}/filteredResponses`."""
    form_id = request.match_info["formId"]
    try:
        query = ResponsesQuery.from_query(request.query)
    except ValidationError as e:
        return web.json_response({"errors": e.errors}, status=400)

    try:
        page = await request.app[API_KEY].filtered_responses(form_id, query)
    except FetchFailed as e:
        logger.warning(
            "filtered_responses_failed",
            extra={"form_id": form_id, "status_code": e.status_code, "offset": e.offset},
        )
        return web.json_response({"error": FETCH_FAILED_MESSAGE}, status=502)

    return web.json_response(page.to_payload())


async def _close_resources(app: web.Application) -> None:
    await app[CONNECTOR_KEY].close()
    app[CACHE_KEY].clear()


def create_app(
    settings: Settings,
    *,
    connector: FilloutRESTConnector | None = None,
    cache: ResultCache | None = None,
) -> web.Application:
    """Build the application.

    Args:
        settings: Service settings
        connector: Optional connector (defaults to one built from settings)
        cache: Optional cache (defaults to one sized by settings)
    """
    connector = connector or FilloutRESTConnector(
        settings.api_key, base_url=settings.base_url, timeout=settings.timeout
    )
    cache = cache if cache is not None else ResultCache(capacity=settings.cache_size)

    app = web.Application()
    app[CONNECTOR_KEY] = connector
    app[CACHE_KEY] = cache
    app[API_KEY] = FilteredResponsesAPI(connector, cache)
    app.router.add_get("/", index)
    app.router.add_get("/{formId}/filteredResponses", filtered_responses)
    app.on_cleanup.append(_close_resources)
    return app
