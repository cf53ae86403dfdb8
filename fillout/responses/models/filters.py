"""Filter clause model and filter-set decoding."""

from __future__ import annotations

import json
from typing import Any, Union

import pydantic
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, TypeAdapter

from ..core.enums import FilterCondition
from ..core.exceptions import ValidationError

FilterValue = Union[StrictInt, StrictFloat, StrictStr]


class FilterClause(BaseModel):
    """Condition on a single question id.

    A list of clauses is a filter set; every clause must hold for a
    submission to be kept.
    """

    id: str = Field(..., min_length=1)
    condition: FilterCondition
    value: FilterValue

    model_config = ConfigDict(frozen=True)


_FILTER_SET = TypeAdapter(list[FilterClause])


def parse_filters(raw: str | list[Any] | None) -> list[FilterClause]:
    """Decode a JSON-encoded filter set.

    Args:
        raw: JSON text, an already decoded list, or None

    Returns:
        Filter clauses in the order given

    Raises:
        ValidationError: If the JSON is malformed or any clause is invalid
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            error = {
                "type": "field",
                "value": raw,
                "msg": f"Invalid JSON: {e.msg}",
                "path": "filters",
            }
            raise ValidationError("filters is invalid", [error]) from e
    try:
        return _FILTER_SET.validate_python(raw)
    except pydantic.ValidationError as e:
        errors = [
            {
                "type": "field",
                "value": raw,
                "msg": error["msg"],
                "path": ".".join(["filters", *(str(part) for part in error["loc"])]),
            }
            for error in e.errors()
        ]
        raise ValidationError("filters is invalid", errors) from e
