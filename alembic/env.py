"""Alembic environment for the questions/answers schema.

The URL comes from the same Settings the service uses, so DATABASE_URL (and
its asyncpg rewrite) is the single source; alembic.ini only supplies a
fallback when the variable is unset.
"""

import asyncio
from logging.config import fileConfig

from pydantic import ValidationError
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

from qa_service.config import Settings
from qa_service.db.base import Base
import qa_service.models  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _database_url() -> str:
    try:
        return Settings().database_url
    except ValidationError:
        return config.get_main_option("sqlalchemy.url")


def _configure(**kwargs) -> None:
    context.configure(target_metadata=target_metadata, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online() -> None:
    engine = create_async_engine(_database_url(), poolclass=pool.NullPool)
    async with engine.connect() as connection:
        await connection.run_sync(
            lambda conn: _configure(connection=conn),
        )
    await engine.dispose()


if context.is_offline_mode():
    _configure(
        url=_database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
else:
    asyncio.run(_migrate_online())
