"""Fillout REST connector."""

from .config import BASE_URL, auth_headers, submissions_path
from .provider import FilloutRESTConnector

__all__ = [
    "BASE_URL",
    "FilloutRESTConnector",
    "auth_headers",
    "submissions_path",
]
