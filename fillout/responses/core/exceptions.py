"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class ResponsesError(Exception):
    """Base exception for all library errors."""

    pass


class FetchFailed(ResponsesError):
    """A page request to the remote submissions API failed.

    Raised for transport errors, timeouts, non-success statuses and payloads
    that cannot be parsed. The whole dataset assembly is aborted.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        offset: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.offset = offset


class ValidationError(ResponsesError):
    """Inbound request validation failure.

    `errors` holds one entry per offending query parameter, shaped for the
    400 response body.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ConfigurationError(ResponsesError):
    """Missing or invalid runtime settings."""

    pass
