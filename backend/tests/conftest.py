"""
Bioskop API: Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the test suite.
How:   Service tests use an AsyncMock session; HTTP tests run the real app
       over httpx's ASGITransport against an in-memory SQLite database.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock AsyncSession (no real DB needed)
    ├── sample_bioskop_data: One venue's field values
    ├── database: Database handle on sqlite+aiosqlite with tables created
    └── test_client: HTTPX AsyncClient bound to an app using `database`
"""

import os

# Must run before bioskop_api.config builds its settings singleton
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from bioskop_api.database import Database  # noqa: E402
from bioskop_api.main import create_app  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = row
            result = await bioskop_service.get_bioskop(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_bioskop_data():
    return {
        "id": 1,
        "nama": "CGV",
        "lokasi": "Mall A",
        "rating": 4.5,
    }


@pytest_asyncio.fixture
async def database():
    """
    In-memory SQLite handle with the schema created.

    StaticPool keeps the single in-memory connection alive for the whole test.
    """
    db = Database(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await db.create_tables()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def test_client(database):
    """
    HTTPX AsyncClient talking to a fresh app instance.

    ASGITransport does not run the lifespan, so the app gets `database`
    injected through create_app().
    """
    app = create_app(database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
