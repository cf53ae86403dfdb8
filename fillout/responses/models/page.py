"""Paged payloads: the remote API's pages and the endpoint's own output."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .submission import Submission


class SubmissionsPage(BaseModel):
    """One page from `GET /forms/{formId}/submissions`."""

    responses: list[Submission] = Field(default_factory=list)
    total_responses: int | None = Field(default=None, alias="totalResponses")
    page_count: int = Field(..., alias="pageCount", ge=0)

    model_config = ConfigDict(populate_by_name=True)


class FilteredResponsesPage(BaseModel):
    """Windowed, filtered result returned to the caller."""

    responses: list[Submission]
    total_responses: int = Field(..., alias="totalResponses", ge=0)
    page_count: int = Field(..., alias="pageCount", ge=0)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialise with the wire field names, extra submission fields included."""
        return self.model_dump(mode="json", by_alias=True)
