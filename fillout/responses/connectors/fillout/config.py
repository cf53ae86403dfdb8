"""Fillout REST API endpoint helpers."""

from __future__ import annotations

from urllib.parse import quote

from ...core.constants import DEFAULT_BASE_URL

BASE_URL = DEFAULT_BASE_URL


def submissions_path(form_id: str) -> str:
    """Path of the submissions listing for a form.

    Examples:
        >>> submissions_path("cLZojxk94ous")
        '/forms/cLZojxk94ous/submissions'
    """
    return f"/forms/{quote(form_id, safe='')}/submissions"


def auth_headers(api_key: str) -> dict[str, str]:
    """Bearer authorization header for the API key."""
    return {"Authorization": f"Bearer {api_key}"}
