"""Submission data models.

Submissions are treated as opaque records: only the identifier and the
question answers are typed, every other field the remote API sends is kept
as-is and re-emitted unchanged.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Question(BaseModel):
    """A single answered question inside a submission."""

    id: str
    value: Any = None

    model_config = ConfigDict(frozen=True, extra="allow")


class Submission(BaseModel):
    """One form submission as returned by the submissions API."""

    submission_id: str = Field(..., alias="submissionId")
    questions: list[Question] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    def answers_for(self, question_id: str) -> list[Question]:
        """Return every answer whose question id matches."""
        return [question for question in self.questions if question.id == question_id]
