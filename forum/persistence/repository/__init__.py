"""PostgreSQL repository implementations."""

from forum.persistence.repository.thread import PostgresThreadRepository
from forum.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresThreadRepository",
    "PostgresUserRepository",
]
