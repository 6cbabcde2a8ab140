"""Route Dependencies — build DAOs from the pool stored on app.state.

Invariants:
    - The pool is created once in the lifespan; dependencies only read it
    - A new DAO per request is cheap: it holds a reference, not a connection
"""

from fastapi import Depends, Request

from qa_service.core.repository_protocols import AnswerDAO, QuestionDAO
from qa_service.infrastructure.database import DatabaseSessionManager
from qa_service.persistence.answers_dao import AnswersDAO
from qa_service.persistence.questions_dao import QuestionsDAO


def get_db_manager(request: Request) -> DatabaseSessionManager:
    db_manager = getattr(request.app.state, "db_manager", None)
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    return db_manager


def get_questions_dao(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> QuestionDAO:
    return QuestionsDAO(db_manager)


def get_answers_dao(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> AnswerDAO:
    return AnswersDAO(db_manager)
