"""Questions DAO — create, delete, and list questions.

Invariants:
    - delete_question rejects the nil id before touching the store
    - Deleting an absent id is not an error (idempotent)
    - get_questions returns oldest first
"""

import logging
from uuid import UUID

from sqlalchemy import delete, select

from qa_service.core.domain_types import is_nil
from qa_service.core.errors import InvalidIdentifierError
from qa_service.infrastructure.database import DatabaseSessionManager
from qa_service.models.question import Question as QuestionModel
from qa_service.persistence._convert import to_question
from qa_service.schemas.question import Question, QuestionFields

logger = logging.getLogger(__name__)


class QuestionsDAO:
    """QuestionDAO backed by the relational store."""

    def __init__(self, database: DatabaseSessionManager):
        self.database = database

    async def create_question(self, question: QuestionFields) -> Question:
        record = QuestionModel(
            title=question.title, description=question.description,
        )
        async with self.database.session("insert") as db:
            db.add(record)
            await db.commit()
        logger.info(
            f"Question {record.id} created",
            extra={"entity": "question", "entity_id": record.id},
        )
        return to_question(record)

    async def delete_question(self, question_uuid: UUID) -> None:
        if is_nil(question_uuid):
            raise InvalidIdentifierError(
                f"Invalid question id: {question_uuid}",
            )

        async with self.database.session("delete") as db:
            await db.execute(
                delete(QuestionModel).where(QuestionModel.id == question_uuid),
            )
            await db.commit()
        logger.info(
            f"Question {question_uuid} deleted",
            extra={"entity": "question", "entity_id": question_uuid},
        )

    async def get_questions(self) -> list[Question]:
        async with self.database.session("select") as db:
            result = await db.execute(
                select(QuestionModel).order_by(
                    QuestionModel.created_at, QuestionModel.id,
                ),
            )
            records = result.scalars().all()
        return [to_question(r) for r in records]
