"""Question Schemas — creation input and stored entity.

Invariants:
    - QuestionFields carries title + description only
    - Question.question_uuid and created_at are assigned by the store
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class QuestionFields(BaseModel):
    """Question creation input."""
    title: str
    description: str


class Question(BaseModel):
    """Stored question."""
    question_uuid: UUID
    detail: QuestionFields
    created_at: datetime
