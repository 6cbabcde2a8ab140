"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to StoreFailureError (core/errors.py)
    - Pool size is a hard cap (no overflow): the only admission control in the service

Design Decisions:
    - One manager built in the FastAPI lifespan and stored on app.state, then handed
      to each DAO explicitly (no module-level singleton)
    - expire_on_commit=False: created rows stay readable after commit without a refresh
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

from qa_service.core.errors import StoreFailureError
from qa_service.db.base import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enforce_foreign_keys(engine: AsyncEngine) -> None:
    """Make SQLite honor REFERENCES and ON DELETE CASCADE like PostgreSQL does."""
    if engine.dialect.name != "sqlite":
        return
    if not event.contains(
        engine.sync_engine, "connect", _enable_sqlite_foreign_keys,
    ):
        event.listen(
            engine.sync_engine, "connect", _enable_sqlite_foreign_keys,
        )


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(self, database_url: str, max_connections: int = 5):
        self.engine = create_async_engine(
            database_url,
            pool_size=max_connections,
            max_overflow=0,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        enforce_foreign_keys(self.engine)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> "DatabaseSessionManager":
        """Wrap an already configured engine (test fixtures, scripts)."""
        manager = cls.__new__(cls)
        manager.engine = engine
        enforce_foreign_keys(engine)
        manager._session_factory = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False,
        )
        return manager

    @asynccontextmanager
    async def session(
        self, operation: str = "query",
    ) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(
                f"DB integrity error: {e}", extra={"operation": operation},
            )
            raise StoreFailureError(
                "Integrity constraint violated", operation,
            ) from e
        except OperationalError as e:
            await session.rollback()
            logger.error(
                f"DB operational error: {e}", extra={"operation": operation},
            )
            raise StoreFailureError(
                "Connection or operational error", operation,
            ) from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(
                f"DB driver error: {e}", extra={"operation": operation},
            )
            raise StoreFailureError("Database driver error", operation) from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(
                f"SQLAlchemy error: {e}", extra={"operation": operation},
            )
            raise StoreFailureError(
                "Database operation failed", operation,
            ) from e
        except OSError as e:
            logger.error(
                f"DB connection error: {e}", extra={"operation": operation},
            )
            raise StoreFailureError("Connection error", operation) from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for startup and readiness probes)."""
        try:
            async with self.session("ping") as db:
                await db.execute(text("SELECT 1"))
            return True
        except StoreFailureError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def create_schema(self) -> None:
        """Create all tables known to Base.metadata (dev and SQLite only)."""
        import qa_service.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
