"""
Tests for the user store
"""

import pytest

from staffbook.stores.users import DuplicateUserError, UserStore


@pytest.fixture
def store(database):
    return UserStore(database)


class TestUserStore:
    @pytest.mark.asyncio
    async def test_create_and_find(self, store):
        created = await store.create(
            username="ada", email="ada@example.com", password_hash="$2b$hash"
        )

        assert created.id is not None
        assert created.password == "$2b$hash"

        by_username = await store.find_by_username_or_email(username="ada")
        by_email = await store.find_by_username_or_email(email="ada@example.com")

        assert by_username.id == created.id
        assert by_email.id == created.id

    @pytest.mark.asyncio
    async def test_find_matches_either_field(self, store):
        created = await store.create(username="ada", email="ada@example.com", password_hash="h")

        found = await store.find_by_username_or_email(username="nobody", email="ada@example.com")

        assert found is not None
        assert found.id == created.id

    @pytest.mark.asyncio
    async def test_find_without_identifiers(self, store):
        await store.create(username="ada", email="ada@example.com", password_hash="h")

        assert await store.find_by_username_or_email() is None
        assert await store.find_by_username_or_email(username="", email="") is None

    @pytest.mark.asyncio
    async def test_find_unknown(self, store):
        assert await store.find_by_username_or_email(username="ghost") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username,email",
        [("ada", "other@example.com"), ("other", "ada@example.com")],
    )
    async def test_unique_constraints(self, store, username, email):
        await store.create(username="ada", email="ada@example.com", password_hash="h")

        with pytest.raises(DuplicateUserError):
            await store.create(username=username, email=email, password_hash="h")
