"""Answers DAO — create, delete, and list answers scoped by question.

Invariants:
    - create_answer, delete_answer, get_answers reject the nil id before any IO
    - Deleting an absent id is not an error (idempotent)
    - get_answers returns only the given question's answers, oldest first
"""

import logging
from uuid import UUID

from sqlalchemy import delete, select

from qa_service.core.domain_types import is_nil
from qa_service.core.errors import InvalidIdentifierError
from qa_service.infrastructure.database import DatabaseSessionManager
from qa_service.models.answer import Answer as AnswerModel
from qa_service.persistence._convert import to_answer
from qa_service.schemas.answer import Answer, AnswerFields

logger = logging.getLogger(__name__)


class AnswersDAO:
    """AnswerDAO backed by the relational store."""

    def __init__(self, database: DatabaseSessionManager):
        self.database = database

    async def create_answer(self, answer: AnswerFields) -> Answer:
        if is_nil(answer.question_uuid):
            raise InvalidIdentifierError(
                f"Invalid question_id: {answer.question_uuid}",
            )

        record = AnswerModel(
            question_id=answer.question_uuid, content=answer.content,
        )
        async with self.database.session("insert") as db:
            db.add(record)
            await db.commit()
        logger.info(
            f"Answer {record.id} created for question {record.question_id}",
            extra={"entity": "answer", "entity_id": record.id},
        )
        return to_answer(record)

    async def delete_answer(self, answer_uuid: UUID) -> None:
        if is_nil(answer_uuid):
            raise InvalidIdentifierError(
                f"Invalid answer id provided: {answer_uuid}",
            )

        async with self.database.session("delete") as db:
            await db.execute(
                delete(AnswerModel).where(AnswerModel.id == answer_uuid),
            )
            await db.commit()
        logger.info(
            f"Answer {answer_uuid} deleted",
            extra={"entity": "answer", "entity_id": answer_uuid},
        )

    async def get_answers(self, question_uuid: UUID) -> list[Answer]:
        if is_nil(question_uuid):
            raise InvalidIdentifierError(
                f"Invalid question_id: {question_uuid}",
            )

        async with self.database.session("select") as db:
            result = await db.execute(
                select(AnswerModel)
                .where(AnswerModel.question_id == question_uuid)
                .order_by(AnswerModel.created_at, AnswerModel.id)
            )
            records = result.scalars().all()
        return [to_answer(r) for r in records]
