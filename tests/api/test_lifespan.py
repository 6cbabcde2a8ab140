"""Lifespan — pool creation on startup, fatal failure when the store is unreachable."""

from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient

from qa_service.config import Settings
from qa_service.main import create_app, lifespan


def _settings(database_url: str, **overrides) -> Settings:
    return Settings(
        _env_file=None,
        database_url=database_url,
        database_create_schema=True,
        log_format="text",
        **overrides,
    )


async def test_startup_creates_pool_and_schema(tmp_path):
    app = create_app(_settings(f"sqlite+aiosqlite:///{tmp_path}/qa.db"))

    async with lifespan(app):
        assert app.state.db_manager is not None
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as client:
            res = await client.post(
                "/question", json={"title": "t", "description": "d"},
            )
            assert res.status_code == 200

    assert app.state.db_manager is None


async def test_startup_fails_when_database_unreachable(tmp_path):
    app = create_app(_settings(f"sqlite+aiosqlite:///{tmp_path}/nope/qa.db"))

    with pytest.raises(RuntimeError, match="Could not connect"):
        async with lifespan(app):
            pass
    assert app.state.db_manager is None


async def test_file_backed_schema_enforces_question_reference(tmp_path):
    app = create_app(_settings(f"sqlite+aiosqlite:///{tmp_path}/qa.db"))

    async with lifespan(app):
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as client:
            orphan = await client.post(
                "/answer", json={"question_uuid": str(uuid4()), "content": "c"},
            )
            assert orphan.status_code == 500

            question = (await client.post(
                "/question", json={"title": "t", "description": "d"},
            )).json()
            qid = question["question_uuid"]
            await client.post(
                "/answer", json={"question_uuid": qid, "content": "c"},
            )
            await client.delete(f"/question/{qid}")

            res = await client.get(f"/answers/{qid}")
            assert res.json() == []
