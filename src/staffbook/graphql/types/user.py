"""
User GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Users


@strawberry.type
class User:
    """User type for GraphQL API. The password hash is never exposed."""

    id: strawberry.ID
    username: str
    email: str
    created_at: datetime
    updated_at: datetime


def user_from_model(user: "Users") -> User:
    return User(
        id=strawberry.ID(str(user.id)),
        username=user.username,
        email=user.email,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )
