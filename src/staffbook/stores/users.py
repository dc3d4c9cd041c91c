"""Store helpers for the users collection."""

from __future__ import annotations

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError

from ..database.connection import Database
from ..dbmodels import Users
from ..logging import get_logger

logger = get_logger(__name__)


class DuplicateUserError(Exception):
    """Raised when a username or email is already taken."""


class UserStore:
    def __init__(self, database: Database) -> None:
        self._database = database

    async def find_by_username_or_email(
        self, username: str | None = None, email: str | None = None
    ) -> Users | None:
        """Return the first user whose username or email matches, if any."""
        conditions = []
        if username:
            conditions.append(Users.username == username)
        if email:
            conditions.append(Users.email == email)
        if not conditions:
            return None

        async with self._database.session() as session:
            stmt = select(Users).where(or_(*conditions)).limit(1)
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def create(self, *, username: str, email: str, password_hash: str) -> Users:
        user = Users(username=username, email=email, password=password_hash)
        try:
            async with self._database.session() as session:
                session.add(user)
                await session.flush()
                await session.refresh(user)
        except IntegrityError as e:
            logger.info("User insert hit a unique constraint", username=username)
            raise DuplicateUserError(str(e.orig)) from e
        return user
