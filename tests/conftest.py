"""Pytest configuration and fixtures for eventhub.

Points DATABASE_URL at a throwaway SQLite file before app.main is imported,
turns off startup seeding and telemetry, and rebuilds the schema for every
test that asks for the database. Uses app.main:app for HTTP tests.
"""

import os
import tempfile
from pathlib import Path

_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="eventhub-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR / 'test.db'}"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["TELEMETRY_ENABLED"] = "false"
os.environ["API_PREFIX"] = ""

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from app.core.config import get_settings  # noqa: E402
from app.infrastructure.persistence import database  # noqa: E402

get_settings.cache_clear()

from app.main import app  # noqa: E402


@pytest.fixture
async def database_ready():
    """Fresh schema for this test; engine disposed afterwards.

    ASGITransport does not run the app lifespan, so tables are created here.
    """
    await database.drop_models()
    await database.init_models()
    yield
    await database.dispose_engine()


@pytest.fixture
async def client(database_ready) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session(database_ready) -> AsyncSession:
    """Database session for repository/integration tests. Rolled back after the test."""
    async with database.get_session_factory()() as session:
        yield session
        await session.rollback()


@pytest.fixture
def override_dependency():
    """Install app.dependency_overrides entries for one test and remove them afterwards."""
    installed: list = []

    def _override(dependency, provider) -> None:
        app.dependency_overrides[dependency] = provider
        installed.append(dependency)

    yield _override
    for dependency in installed:
        app.dependency_overrides.pop(dependency, None)


class ApiFactory:
    """Creates resources through the HTTP API with valid defaults."""

    def __init__(self, client: AsyncClient) -> None:
        self.client = client

    async def organization(self, **overrides) -> dict:
        body = {
            "name": "Tech United",
            "description": "Promotes technology innovation",
            "contactEmail": "info@techunited.com",
        }
        body.update(overrides)
        response = await self.client.post("/organizations", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    async def event(self, org_id: str, **overrides) -> dict:
        body = {
            "org_id": org_id,
            "name": "Tech Conference 2024",
            "description": "Annual tech conference",
            "date": "2024-11-15",
            "location": "Convention Center",
            "category": "Technology",
        }
        body.update(overrides)
        response = await self.client.post("/events", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    async def ticket(self, event_id: str, **overrides) -> dict:
        body = {
            "event_id": event_id,
            "type": "Regular",
            "price": 100,
            "quantityAvailable": 50,
        }
        body.update(overrides)
        response = await self.client.post("/tickets", json=body)
        assert response.status_code == 201, response.text
        return response.json()


@pytest.fixture
def factory(client: AsyncClient) -> ApiFactory:
    """Resource factory bound to the test client."""
    return ApiFactory(client)
