"""
Service context shared by every resolver
"""

from dataclasses import dataclass

from .config import Settings
from .database.connection import Database
from .logging import get_logger
from .security.passwords import PasswordHasher
from .stores.employees import EmployeeStore
from .stores.users import UserStore

logger = get_logger(__name__)


@dataclass
class ServiceContext:
    """Owns the database handle and the stores built on top of it.

    Created once during application startup and handed to resolvers by
    reference through the GraphQL context.
    """

    database: Database
    users: UserStore
    employees: EmployeeStore
    hasher: PasswordHasher

    @classmethod
    def from_database(cls, database: Database, *, hash_rounds: int = 10) -> "ServiceContext":
        return cls(
            database=database,
            users=UserStore(database),
            employees=EmployeeStore(database),
            hasher=PasswordHasher(rounds=hash_rounds),
        )

    async def close(self) -> None:
        await self.database.dispose()


async def create_service_context(settings: Settings) -> ServiceContext:
    """Connect to the database described by ``settings`` and build the stores."""
    database = Database.from_settings(settings)

    ok, error = await database.ping()
    if ok:
        logger.info("Database connection verified")
    else:
        logger.error("Database connection check failed", error=error)

    if settings.database_create_tables:
        await database.create_all()

    return ServiceContext.from_database(database, hash_rounds=settings.password_hash_rounds)
