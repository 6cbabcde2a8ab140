"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the full schema
    - broken_db_manager points at a path SQLite cannot open, so every query
      fails inside the driver
    - Foreign keys are enforced, so SQLite rejects orphans and cascades like PostgreSQL

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for DAO and route tests
      (PostgreSQL-specific features are only used by the Alembic migration)
"""

import os

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

# Module-level app in qa_service.main resolves settings lazily, but keep the
# env complete so nothing reaches for a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")

from qa_service.db.base import Base  # noqa: E402
from qa_service.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, enforce_foreign_keys,
)
import qa_service.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    # the in-memory pool holds one connection, opened by create_all below
    enforce_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
async def broken_db_manager(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path}/missing/dir/qa.db", echo=False,
    )
    yield DatabaseSessionManager.from_engine(engine)
    await engine.dispose()
