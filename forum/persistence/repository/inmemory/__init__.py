"""In-memory repository implementations for testing."""

from .thread import InMemoryThreadRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryThreadRepository",
    "InMemoryUserRepository",
]
