"""
Recipe API - Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.

Fixture Hierarchy (all function-scoped):
    ├── mock_gateway:   AsyncMock PersistenceGateway (service tests, no database)
    ├── database:       in-memory SQLite Database with both tables created
    ├── gateway:        real PersistenceGateway over a session of `database`
    ├── app:            create_app(database)
    ├── test_client:    HTTPX AsyncClient talking to `app`
    └── sample_*:       request bodies reused across test files
"""

import os

# Settings are read at import time; set them before any recipe_api import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["CREATE_SCHEMA_ON_STARTUP"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from recipe_api.database import Database  # noqa: E402
from recipe_api.gateway import PersistenceGateway  # noqa: E402


@pytest.fixture
def mock_gateway():
    """
    A PersistenceGateway double.

    Usage:
        mock_gateway.fetch_one.return_value = {"id": 1, ...}
        result = await recipe_service.get_recipe(mock_gateway, 1)
    """
    gateway = AsyncMock(spec=PersistenceGateway)
    gateway.fetch_one = AsyncMock(return_value=None)
    gateway.fetch_all = AsyncMock(return_value=[])
    gateway.execute_write = AsyncMock()
    return gateway


@pytest_asyncio.fixture
async def database():
    """Fresh in-memory database per test; StaticPool keeps one shared connection."""
    db = Database("sqlite+aiosqlite:///:memory:", echo=False)
    await db.create_schema()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def gateway(database):
    async with database.session_factory() as session:
        yield PersistenceGateway(session)


@pytest.fixture
def app(database):
    """The FastAPI app serving from the `database` fixture."""
    from recipe_api.main import create_app

    return create_app(database=database)


@pytest_asyncio.fixture
async def test_client(app):
    """HTTPX AsyncClient routed straight into the ASGI app (no server)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_recipe():
    return {
        "name": "Toast",
        "category": "breakfast",
        "instructions": "Toast it",
        "ingredients": "Bread",
        "prep_time": 5,
    }


@pytest.fixture
def sample_meal_plan():
    return {
        "name": "Week of June 5",
        "date": "2023-06-05",
        "recipe_ids": [1, 2],
        "notes": "Focus on quick meals this week",
    }
