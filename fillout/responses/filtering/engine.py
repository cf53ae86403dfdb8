"""Per-question filter evaluation.

A submission is kept when none of the clauses fails for it. A clause only
fails when the submission has an answer to the clause's question and that
answer does not satisfy the comparison; an unanswered question never
excludes a submission.

Comparisons are type-strict. Numbers (int or float, never bool) compare
with numbers and strings with strings; any other pairing is unequal and
neither greater nor less.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from ..core.enums import FilterCondition
from ..models import FilterClause, Submission


def _type_family(value: Any) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return None


def _comparable(left: Any, right: Any) -> bool:
    family = _type_family(left)
    return family is not None and family == _type_family(right)


def evaluate(condition: FilterCondition, answer: Any, expected: Any) -> bool:
    """Evaluate one comparison of an answer against a clause value."""
    if condition is FilterCondition.EQUALS:
        return _comparable(answer, expected) and answer == expected
    if condition is FilterCondition.DOES_NOT_EQUAL:
        return not (_comparable(answer, expected) and answer == expected)
    if not _comparable(answer, expected):
        return False
    if condition is FilterCondition.GREATER_THAN:
        return answer > expected
    if condition is FilterCondition.LESS_THAN:
        return answer < expected
    raise ValueError(f"Unsupported filter condition: {condition!r}")


def matches(submission: Submission, clauses: Iterable[FilterClause]) -> bool:
    """True if no clause fails for the submission."""
    for clause in clauses:
        for question in submission.answers_for(clause.id):
            if not evaluate(clause.condition, question.value, clause.value):
                return False
    return True


def apply_filters(
    submissions: Iterable[Submission],
    clauses: Sequence[FilterClause],
) -> list[Submission]:
    """Keep the submissions satisfying every clause, preserving order."""
    if not clauses:
        return list(submissions)
    return [submission for submission in submissions if matches(submission, clauses)]
