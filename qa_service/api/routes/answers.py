"""Answer Routes — POST /answer, GET /answers/{question_id}, DELETE /answer/{id}.

Invariants:
    - Path ids go through parse_identifier: malformed → nil → 400 from the DAO
    - Success is always 200 (create included)
"""

from fastapi import APIRouter, Depends

from qa_service.api.dependencies import get_answers_dao
from qa_service.core.domain_types import parse_identifier
from qa_service.core.repository_protocols import AnswerDAO
from qa_service.schemas.answer import Answer, AnswerFields
from qa_service.services import handle_answers

router = APIRouter(tags=["answers"])


@router.post("/answer", response_model=Answer)
async def create_answer(
    body: AnswerFields, dao: AnswerDAO = Depends(get_answers_dao),
):
    """Create an answer under an existing question."""
    return await handle_answers.create_answer(body, dao)


@router.get("/answers/{question_id}", response_model=list[Answer])
async def read_answers(
    question_id: str, dao: AnswerDAO = Depends(get_answers_dao),
):
    """List the answers of one question."""
    return await handle_answers.read_answers(parse_identifier(question_id), dao)


@router.delete("/answer/{answer_id}")
async def delete_answer(
    answer_id: str, dao: AnswerDAO = Depends(get_answers_dao),
):
    """Delete an answer. Deleting an absent answer still succeeds."""
    await handle_answers.delete_answer(parse_identifier(answer_id), dao)
