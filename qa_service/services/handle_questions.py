"""Question Handlers — call the QuestionDAO and translate its failures.

Invariants:
    - InvalidIdentifierError → BadRequestError with the DAO message verbatim
    - StoreFailureError → InternalError with the generic message
    - No transport types here: routes adapt HTTP input before calling in
"""

from uuid import UUID

from qa_service.core.errors import DBError, to_handler_error
from qa_service.core.repository_protocols import QuestionDAO
from qa_service.schemas.question import Question, QuestionFields


async def create_question(
    question: QuestionFields, dao: QuestionDAO,
) -> Question:
    try:
        return await dao.create_question(question)
    except DBError as e:
        raise to_handler_error(e) from e


async def read_questions(dao: QuestionDAO) -> list[Question]:
    try:
        return await dao.get_questions()
    except DBError as e:
        raise to_handler_error(e) from e


async def delete_question(question_uuid: UUID, dao: QuestionDAO) -> None:
    try:
        await dao.delete_question(question_uuid)
    except DBError as e:
        raise to_handler_error(e) from e
