"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    CategoryId,
    ReplyId,
    TagId,
    ThreadId,
    UserId,
)
from forum.domain.value.types import UserRole, Username, VoteType

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "ReplyId",
    "CategoryId",
    "TagId",
    # Types
    "VoteType",
    "UserRole",
    "Username",
]
