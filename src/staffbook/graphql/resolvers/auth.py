from __future__ import annotations

from typing import TYPE_CHECKING

from ...logging import get_logger
from ...results import Failure, Result, Success
from ...stores.users import DuplicateUserError

if TYPE_CHECKING:
    from ...context import ServiceContext
    from ...dbmodels import Users

logger = get_logger(__name__)

ALL_FIELDS_REQUIRED = "All fields are required"
USER_EXISTS = "Username or email already exists"
LOGIN_FIELDS_REQUIRED = "Username or email and password are required"
USER_NOT_FOUND = "User not found"
INVALID_PASSWORD = "Invalid password"


async def signup(
    services: ServiceContext, username: str, email: str, password: str
) -> Result[Users]:
    """
    Register a new user.

    Duplicate usernames and emails are reported the same way so callers
    cannot tell which one collided.
    """
    if not username or not email or not password:
        return Failure(ALL_FIELDS_REQUIRED)

    existing = await services.users.find_by_username_or_email(username=username, email=email)
    if existing is not None:
        logger.info("Signup rejected for existing user", username=username)
        return Failure(USER_EXISTS)

    password_hash = await services.hasher.hash_async(password)
    try:
        user = await services.users.create(
            username=username, email=email, password_hash=password_hash
        )
    except DuplicateUserError:
        return Failure(USER_EXISTS)

    logger.info("User signed up", user_id=str(user.id))
    return Success(user, "User created successfully")


async def login(
    services: ServiceContext,
    username: str | None,
    email: str | None,
    password: str | None,
) -> Result[Users]:
    """Check credentials. Nothing is issued on success; the user is returned as-is."""
    if (not username and not email) or not password:
        return Failure(LOGIN_FIELDS_REQUIRED)

    user = await services.users.find_by_username_or_email(username=username, email=email)
    if user is None:
        logger.info("Login for unknown user", username=username, email=email)
        return Failure(USER_NOT_FOUND)

    if not await services.hasher.verify_async(password, user.password):
        logger.info("Login with invalid password", user_id=str(user.id))
        return Failure(INVALID_PASSWORD)

    return Success(user, "Login successful")
