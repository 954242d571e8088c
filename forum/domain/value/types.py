"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from forum.domain.value.common import RootValueObject


class VoteType(str, Enum):
    """Direction of a vote on a thread or reply."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class UserRole(str, Enum):
    """Role of a forum member."""

    USER = "user"
    MODERATOR = "moderator"
    ADMIN = "admin"


class Username(RootValueObject[str]):
    """Public username of a forum member.

    Must be 3-30 characters: letters, digits, underscores, dots or hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_.-]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, digits, '_', '.' or '-'"
            )
        return v
