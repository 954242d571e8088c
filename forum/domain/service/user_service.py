"""Member lookups and profile edits."""

from datetime import datetime
from typing import Optional

import logfire

from forum.domain.error import BusinessRuleViolationError, NotFoundError
from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import UserId, Username

from .base import Service


class UserService(Service):
    """Reads and stores forum member records.

    Member records originate in the identity service and are mirrored here
    so that reputation and roles can be looked up locally. Members edit their
    own public profile (username, bio, avatar) through this service.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get a member by ID.

        Raises:
            NotFoundError: If no record exists for the ID
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def save(self, user: User) -> User:
        """Create or replace a member record."""
        with logfire.span("user_service.save", user_id=str(user.id)):
            return await self.user_repository.save(user)

    async def update_profile(
        self,
        user_id: UserId,
        username: Optional[Username] = None,
        bio: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> User:
        """Change a member's public profile.

        Fields left as None keep their current value. An empty bio or avatar
        URL clears it.

        Args:
            user_id: Member editing their own profile
            username: New username, unique among members
            bio: New bio (at most 500 characters)
            avatar_url: New avatar URL

        Returns:
            Updated member record

        Raises:
            NotFoundError: If the member does not exist
            BusinessRuleViolationError: If the username belongs to someone else
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            changes: dict = {"updated_at": datetime.now()}

            if username is not None and username != user.username:
                holder = await self.user_repository.find_by_username(username)
                if holder is not None and holder.id != user_id:
                    logfire.warn(
                        "Username already taken",
                        user_id=str(user_id),
                        username=username.root,
                    )
                    raise BusinessRuleViolationError("Username already taken")
                changes["username"] = username
            if bio is not None:
                changes["bio"] = bio or None
            if avatar_url is not None:
                changes["avatar_url"] = avatar_url or None

            # model_copy skips validation, so re-validate the edited record
            updated = User.model_validate(user.model_copy(update=changes).model_dump())
            saved = await self.save(updated)
            logfire.info("Profile updated", user_id=str(user_id))
            return saved

    async def is_admin(self, user_id: UserId) -> bool:
        """Whether the member may moderate other members' threads.

        Members without a stored record are treated as regular members.
        """
        user = await self.user_repository.find_by_id(user_id)
        return bool(user and user.is_admin)
