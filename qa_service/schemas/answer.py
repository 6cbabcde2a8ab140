"""Answer Schemas — creation input and stored entity.

Invariants:
    - AnswerFields.question_uuid references the owning question
    - Answer.answer_uuid and created_at are assigned by the store

Design Decisions:
    - question_uuid also accepted as "question_id" on input; always serialized
      as question_uuid
"""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, Field


class AnswerFields(BaseModel):
    """Answer creation input."""
    question_uuid: UUID = Field(
        validation_alias=AliasChoices("question_uuid", "question_id"),
    )
    content: str


class Answer(BaseModel):
    """Stored answer."""
    answer_uuid: UUID
    detail: AnswerFields
    created_at: datetime
