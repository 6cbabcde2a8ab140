"""Answer Handlers — call the AnswerDAO and translate its failures.

Invariants:
    - Same mapping as question handlers: invalid id → 400, store failure → 500
"""

from uuid import UUID

from qa_service.core.errors import DBError, to_handler_error
from qa_service.core.repository_protocols import AnswerDAO
from qa_service.schemas.answer import Answer, AnswerFields


async def create_answer(answer: AnswerFields, dao: AnswerDAO) -> Answer:
    try:
        return await dao.create_answer(answer)
    except DBError as e:
        raise to_handler_error(e) from e


async def read_answers(question_uuid: UUID, dao: AnswerDAO) -> list[Answer]:
    try:
        return await dao.get_answers(question_uuid)
    except DBError as e:
        raise to_handler_error(e) from e


async def delete_answer(answer_uuid: UUID, dao: AnswerDAO) -> None:
    try:
        await dao.delete_answer(answer_uuid)
    except DBError as e:
        raise to_handler_error(e) from e
