"""ORM Models — SQLAlchemy declarative models for questions and answers.

Invariants:
    - All models inherit from Base (db/base.py)
    - ORM rows never cross the DAO boundary; DAOs convert them to schemas

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete for create_all and Alembic
"""

from qa_service.models.question import Question  # noqa: F401
from qa_service.models.answer import Answer  # noqa: F401
