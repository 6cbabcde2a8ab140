"""Entity Schemas — structural equality and wire shape.

Invariants:
    - Entities with equal fields compare equal
    - AnswerFields accepts question_uuid or question_id on input
    - Stored entities serialize with a nested "detail" object
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from qa_service.schemas.answer import Answer, AnswerFields
from qa_service.schemas.question import Question, QuestionFields


def test_question_fields_structural_equality():
    assert QuestionFields(title="t", description="d") == QuestionFields(
        title="t", description="d",
    )
    assert QuestionFields(title="t", description="d") != QuestionFields(
        title="t", description="other",
    )


def test_question_serializes_nested_detail():
    qid = uuid4()
    question = Question(
        question_uuid=qid,
        detail=QuestionFields(title="t", description="d"),
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    data = question.model_dump(mode="json")
    assert data["question_uuid"] == str(qid)
    assert data["detail"] == {"title": "t", "description": "d"}
    assert data["created_at"].startswith("2024-01-01T00:00:00")


def test_answer_fields_accepts_question_uuid_key():
    qid = uuid4()
    fields = AnswerFields.model_validate(
        {"question_uuid": str(qid), "content": "c"},
    )
    assert fields.question_uuid == qid


def test_answer_fields_accepts_question_id_key():
    qid = uuid4()
    fields = AnswerFields.model_validate(
        {"question_id": str(qid), "content": "c"},
    )
    assert fields.question_uuid == qid


def test_answer_fields_serializes_as_question_uuid():
    qid = uuid4()
    data = AnswerFields(question_uuid=qid, content="c").model_dump(mode="json")
    assert data == {"question_uuid": str(qid), "content": "c"}


def test_answer_fields_rejects_malformed_uuid_in_body():
    with pytest.raises(ValidationError):
        AnswerFields.model_validate({"question_uuid": "nope", "content": "c"})


def test_answer_requires_content():
    with pytest.raises(ValidationError):
        AnswerFields.model_validate({"question_uuid": str(uuid4())})


def test_answer_structural_equality():
    aid, qid = uuid4(), uuid4()
    ts = datetime.now(timezone.utc)
    a = Answer(
        answer_uuid=aid, detail=AnswerFields(question_uuid=qid, content="c"),
        created_at=ts,
    )
    b = Answer(
        answer_uuid=aid, detail=AnswerFields(question_uuid=qid, content="c"),
        created_at=ts,
    )
    assert a == b
