"""Question Routes — POST /question, GET /questions, DELETE /question/{id}.

Invariants:
    - Path ids go through parse_identifier: malformed → nil → 400 from the DAO
    - Success is always 200 (create included)
"""

from fastapi import APIRouter, Depends

from qa_service.api.dependencies import get_questions_dao
from qa_service.core.domain_types import parse_identifier
from qa_service.core.repository_protocols import QuestionDAO
from qa_service.schemas.question import Question, QuestionFields
from qa_service.services import handle_questions

router = APIRouter(tags=["questions"])


@router.post("/question", response_model=Question)
async def create_question(
    body: QuestionFields, dao: QuestionDAO = Depends(get_questions_dao),
):
    """Create a question."""
    return await handle_questions.create_question(body, dao)


@router.get("/questions", response_model=list[Question])
async def read_questions(dao: QuestionDAO = Depends(get_questions_dao)):
    """List all questions."""
    return await handle_questions.read_questions(dao)


@router.delete("/question/{question_id}")
async def delete_question(
    question_id: str, dao: QuestionDAO = Depends(get_questions_dao),
):
    """Delete a question. Deleting an absent question still succeeds."""
    await handle_questions.delete_question(parse_identifier(question_id), dao)
