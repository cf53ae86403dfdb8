"""Query models for the filtered responses endpoint.

Architecture:
    A request splits into two parts:
    - QueryIdentity: everything that shapes the unfiltered dataset fetched
      from the remote API (form, date bounds, status, sort, edit links).
      It is the cache key.
    - ResponsesQuery: the full inbound query, adding filters, offset and
      limit, which are applied after the fetch and never reach the cache key.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import datetime
from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.constants import DEFAULT_LIMIT, MAX_LIMIT
from ..core.enums import SortOrder, SubmissionStatus
from ..core.exceptions import ValidationError
from .filters import FilterClause

# snake_case field -> remote API query parameter
_REMOTE_PARAM_NAMES = {
    "after_date": "afterDate",
    "before_date": "beforeDate",
    "status": "status",
    "include_edit_link": "includeEditLink",
    "sort": "sort",
}

# accepted query-string spellings of includeEditLink
_BOOLEAN_STRINGS = {"true": True, "false": False, "1": True, "0": False}


def _check_iso8601(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        datetime.fromisoformat(value)
    except ValueError as e:
        raise ValueError("must be an ISO-8601 date") from e
    return value


class QueryIdentity(BaseModel):
    """Parameters that determine the unfiltered dataset for a form."""

    form_id: str = Field(..., min_length=1)
    after_date: str | None = None
    before_date: str | None = None
    status: SubmissionStatus | None = None
    include_edit_link: bool | None = None
    sort: SortOrder | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("after_date", "before_date")
    @classmethod
    def validate_dates(cls, v: str | None) -> str | None:
        return _check_iso8601(v)

    def cache_key(self) -> str:
        """Deterministic key: compact JSON of the set fields, keys sorted."""
        return json.dumps(
            self.model_dump(mode="json", exclude_none=True),
            sort_keys=True,
            separators=(",", ":"),
        )

    def to_remote_params(self) -> dict[str, str]:
        """Query parameters forwarded to the submissions API (unset ones omitted)."""
        params: dict[str, str] = {}
        for field, value in self.model_dump(mode="json", exclude={"form_id"}).items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            params[_REMOTE_PARAM_NAMES[field]] = str(value)
        return params


class ResponsesQuery(BaseModel):
    """Validated query string of `GET /{formId}/filteredResponses`."""

    filters: list[FilterClause] = Field(default_factory=list)
    limit: int = Field(default=DEFAULT_LIMIT, ge=0, le=MAX_LIMIT)
    offset: int = Field(default=0, ge=0)
    after_date: str | None = Field(default=None, alias="afterDate")
    before_date: str | None = Field(default=None, alias="beforeDate")
    status: SubmissionStatus | None = None
    include_edit_link: bool | None = Field(default=None, alias="includeEditLink")
    sort: SortOrder | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("after_date", "before_date")
    @classmethod
    def validate_dates(cls, v: str | None) -> str | None:
        return _check_iso8601(v)

    @field_validator("include_edit_link", mode="before")
    @classmethod
    def validate_include_edit_link(cls, v: Any) -> Any:
        """Only true/false/1/0 are booleans on the query string."""
        if v is None or isinstance(v, bool):
            return v
        if isinstance(v, str) and v in _BOOLEAN_STRINGS:
            return _BOOLEAN_STRINGS[v]
        raise ValueError("must be one of true, false, 1, 0")

    @field_validator("filters", mode="before")
    @classmethod
    def decode_filters(cls, v: Any) -> Any:
        """Accept the JSON-encoded form used on the query string."""
        if isinstance(v, str):
            return json.loads(v)
        return v

    @classmethod
    def from_query(cls, query: Mapping[str, str]) -> ResponsesQuery:
        """Validate raw query-string values.

        Raises:
            ValidationError: With one error entry per invalid parameter
        """
        raw = dict(query)
        try:
            return cls.model_validate(raw)
        except pydantic.ValidationError as e:
            errors = []
            for error in e.errors():
                path = str(error["loc"][0]) if error["loc"] else ""
                errors.append(
                    {
                        "type": "field",
                        "value": raw.get(path),
                        "msg": error["msg"],
                        "path": path,
                        "location": "query",
                    }
                )
            raise ValidationError("Invalid query parameters", errors) from e

    def identity(self, form_id: str) -> QueryIdentity:
        """Cache identity of this query for `form_id`."""
        return QueryIdentity(
            form_id=form_id,
            after_date=self.after_date,
            before_date=self.before_date,
            status=self.status,
            include_edit_link=self.include_edit_link,
            sort=self.sort,
        )
