"""Boundary Protocols — persistence contracts for questions and answers.

Invariants:
    - Every method either returns domain entities or raises a DBError subclass
    - Implementations provided by persistence/ via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, so test doubles need no inheritance
    - Async in Protocol: implementations do IO on the shared connection pool
"""

from typing import Protocol
from uuid import UUID

from qa_service.schemas.answer import Answer, AnswerFields
from qa_service.schemas.question import Question, QuestionFields


class QuestionDAO(Protocol):
    """Contract for question persistence."""
    async def create_question(self, question: QuestionFields) -> Question: ...
    async def delete_question(self, question_uuid: UUID) -> None: ...
    async def get_questions(self) -> list[Question]: ...


class AnswerDAO(Protocol):
    """Contract for answer persistence."""
    async def create_answer(self, answer: AnswerFields) -> Answer: ...
    async def delete_answer(self, answer_uuid: UUID) -> None: ...
    async def get_answers(self, question_uuid: UUID) -> list[Answer]: ...
