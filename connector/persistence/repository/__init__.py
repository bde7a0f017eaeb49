"""PostgreSQL repository implementations."""

from connector.persistence.repository.post import PostgresPostRepository
from connector.persistence.repository.profile import PostgresProfileRepository
from connector.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresProfileRepository",
    "PostgresPostRepository",
]
