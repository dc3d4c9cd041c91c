"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from datetime import date
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio

from staffbook.config import Settings
from staffbook.context import ServiceContext
from staffbook.database.connection import Database
from staffbook.stores.employees import NewEmployee

# bcrypt's minimum cost factor keeps hashing fast in tests
TEST_HASH_ROUNDS = 4


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway SQLite database."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'staffbook.db'}",
        database_create_tables=True,
        password_hash_rounds=TEST_HASH_ROUNDS,
        debug=False,
        environment="test",
    )


@pytest_asyncio.fixture
async def database(test_settings: Settings) -> AsyncGenerator[Database, None]:
    """Provide a database with all tables created."""
    db = Database.from_settings(test_settings)
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def services(database: Database) -> ServiceContext:
    return ServiceContext.from_database(database, hash_rounds=TEST_HASH_ROUNDS)


@pytest.fixture
def new_employee() -> NewEmployee:
    return NewEmployee(
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        gender="Female",
        designation="Engineer",
        salary=5000.0,
        date_of_joining=date(2024, 3, 1),
        department="R&D",
        employee_photo="https://example.com/ada.png",
    )


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
