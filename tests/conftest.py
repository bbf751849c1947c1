"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio

from workforce.config import settings


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use the minimum bcrypt work factor so tests stay fast."""
    monkeypatch.setattr(settings, "password_hash_rounds", 4)


@pytest.fixture(scope="function")
def database_url(tmp_path: Path) -> str:
    """DSN of a throwaway SQLite database file."""
    return f"sqlite:///{tmp_path / 'workforce_test.db'}"


@pytest_asyncio.fixture(scope="function")
async def test_database(database_url: str) -> AsyncGenerator[str, None]:
    """Initialize shared connections against a fresh database with all tables."""
    from workforce.database.connection import (
        create_tables,
        dispose_database,
        init_database,
        reset_database,
    )

    reset_database()
    init_database(database_url, force_reinit=True)
    await create_tables()

    yield database_url

    await dispose_database()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_database: str) -> AsyncGenerator[Any, None]:
    """Provide an async SQLAlchemy session bound to the test database."""
    _ = test_database
    from workforce.database.connection import get_async_session

    async with get_async_session() as session:
        yield session


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
