"""User record.

Forum members accumulate reputation from the votes on their threads.
Identity and sessions are handled outside this service; the record is
kept here so reputation has somewhere to live.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import UserId, UserRole, Username


class User(DomainModel):
    """Forum member."""

    id: UserId
    username: Username
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    role: UserRole = UserRole.USER
    reputation: int = Field(default=0, ge=0)
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        """Whether the user has administrative rights."""
        return self.role == UserRole.ADMIN
