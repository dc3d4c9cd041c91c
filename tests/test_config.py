"""
Tests for settings loading
"""

import pytest

from staffbook.config import Settings, get_async_database_url


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PORT", "DATABASE_URL", "STAFFBOOK_API_PORT", "STAFFBOOK_DATABASE_URL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.api_port == 3000
    assert settings.password_hash_rounds == 10
    assert settings.database_create_tables is False


def test_port_from_plain_env(monkeypatch):
    monkeypatch.setenv("PORT", "4000")

    assert Settings(_env_file=None).api_port == 4000


def test_prefixed_port_wins(monkeypatch):
    monkeypatch.setenv("PORT", "4000")
    monkeypatch.setenv("STAFFBOOK_API_PORT", "5000")

    assert Settings(_env_file=None).api_port == 5000


def test_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/staff")

    assert Settings(_env_file=None).database_url == "postgresql://u:p@db:5432/staff"


def test_prefixed_settings(monkeypatch):
    monkeypatch.setenv("STAFFBOOK_PASSWORD_HASH_ROUNDS", "12")
    monkeypatch.setenv("STAFFBOOK_DEBUG", "false")

    settings = Settings(_env_file=None)

    assert settings.password_hash_rounds == 12
    assert settings.debug is False


@pytest.mark.parametrize(
    "url,expected",
    [
        ("postgresql://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
        ("postgres://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
        ("postgresql+asyncpg://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
        ("sqlite+aiosqlite:///tmp/x.db", "sqlite+aiosqlite:///tmp/x.db"),
    ],
)
def test_async_database_url(url, expected):
    assert get_async_database_url(url) == expected
