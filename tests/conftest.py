"""
Shared pytest fixtures for users-api tests.
"""
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from users_api.core.config import Settings
from users_api.infrastructure.db.connection import create_engine_from_settings, init_schema
from users_api.infrastructure.db.sqlalchemy_user_repository import SqlAlchemyUserRepository


SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    return repo


@pytest.fixture
def sqlite_settings():
    """Settings pointing at a private in-memory SQLite database."""
    return Settings(
        database_url=SQLITE_MEMORY_URL,
        create_schema=True,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def engine(sqlite_settings):
    """Async engine with the users table created."""
    engine = create_engine_from_settings(sqlite_settings)
    await init_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def user_repository(engine):
    return SqlAlchemyUserRepository(engine)
