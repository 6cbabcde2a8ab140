"""Row → schema conversion shared by both DAOs."""

from datetime import datetime, timezone

from qa_service.models.answer import Answer as AnswerModel
from qa_service.models.question import Question as QuestionModel
from qa_service.schemas.answer import Answer, AnswerFields
from qa_service.schemas.question import Question, QuestionFields


def as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back; stored timestamps are always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_question(record: QuestionModel) -> Question:
    return Question(
        question_uuid=record.id,
        detail=QuestionFields(
            title=record.title, description=record.description,
        ),
        created_at=as_utc(record.created_at),
    )


def to_answer(record: AnswerModel) -> Answer:
    return Answer(
        answer_uuid=record.id,
        detail=AnswerFields(
            question_uuid=record.question_id, content=record.content,
        ),
        created_at=as_utc(record.created_at),
    )
