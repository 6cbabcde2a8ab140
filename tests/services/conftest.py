"""Handler test fixtures — DAO doubles and sample entities.

Design Decisions:
    - AsyncMock DAOs: handlers depend on the DAO protocols only, so a mock
      with the same coroutine methods is a complete stand-in
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from qa_service.schemas.answer import Answer, AnswerFields
from qa_service.schemas.question import Question, QuestionFields


@pytest.fixture
def questions_dao():
    dao = AsyncMock()
    dao.create_question = AsyncMock()
    dao.delete_question = AsyncMock(return_value=None)
    dao.get_questions = AsyncMock()
    return dao


@pytest.fixture
def answers_dao():
    dao = AsyncMock()
    dao.create_answer = AsyncMock()
    dao.delete_answer = AsyncMock(return_value=None)
    dao.get_answers = AsyncMock()
    return dao


@pytest.fixture
def sample_question():
    return Question(
        question_uuid=uuid4(),
        detail=QuestionFields(
            title="test title", description="test description",
        ),
        created_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def sample_answer():
    return Answer(
        answer_uuid=uuid4(),
        detail=AnswerFields(question_uuid=uuid4(), content="test content"),
        created_at=datetime.now(timezone.utc),
    )
