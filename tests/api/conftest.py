"""API test fixtures — FastAPI app wired to the test database.

Invariants:
    - Each test builds its own app via create_app(); no lifespan runs, the
      test DatabaseSessionManager is placed on app.state directly
    - broken_client shares the routes but every DAO call fails in the driver
"""

import pytest
from httpx import ASGITransport, AsyncClient

from qa_service.main import create_app


def _client_for(db_manager):
    app = create_app()
    app.state.db_manager = db_manager
    return AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    )


@pytest.fixture
async def client(db_manager):
    async with _client_for(db_manager) as c:
        yield c


@pytest.fixture
async def broken_client(broken_db_manager):
    async with _client_for(broken_db_manager) as c:
        yield c
