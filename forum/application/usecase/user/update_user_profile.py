"""Update user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from forum.domain.service import UserService
from forum.domain.value import UserId, UserRole, Username


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    user_id: str  # From authenticated user
    username: str | None = Field(default=None, min_length=3, max_length=30)
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = Field(default=None)


class UpdateUserProfileResponse(BaseModel):
    """Update user profile response."""

    message: str = "Profile updated successfully"
    user_id: str
    username: Username
    avatar_url: str | None
    bio: str | None
    role: UserRole
    reputation: int
    updated_at: datetime


class UpdateUserProfileUseCase:
    """Use case for updating the caller's own profile.

    Members can change their username, bio and avatar URL.
    Role and reputation cannot be changed through this endpoint.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        """Execute update user profile flow.

        Steps:
        1. Validate the new username, if any
        2. Apply the changes via the user service
        3. Return the updated profile

        Args:
            request: Request with user ID and fields to update

        Returns:
            Updated user profile information

        Raises:
            NotFoundError: If the user does not exist
            BusinessRuleViolationError: If the username is already taken
        """
        user_id = UserId(UUID(request.user_id))
        username = Username(request.username) if request.username else None

        user = await self.user_service.update_profile(
            user_id,
            username=username,
            bio=request.bio,
            avatar_url=request.avatar_url,
        )

        return UpdateUserProfileResponse(
            user_id=str(user.id),
            username=user.username,
            avatar_url=user.avatar_url,
            bio=user.bio,
            role=user.role,
            reputation=user.reputation,
            updated_at=user.updated_at,
        )
