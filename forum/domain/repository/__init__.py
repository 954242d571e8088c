"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from forum.domain.repository.thread import ThreadRepository
from forum.domain.repository.user import UserRepository

__all__ = [
    "ThreadRepository",
    "UserRepository",
]
