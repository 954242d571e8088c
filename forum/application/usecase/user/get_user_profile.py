"""Get user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import ThreadService, UserService
from forum.domain.value import UserId, UserRole, Username

RECENT_THREAD_LIMIT = 5


class RecentThreadItem(BaseModel):
    """Recent thread summary for a profile."""

    thread_id: str
    title: str
    net_score: int
    reply_count: int
    created_at: datetime


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str  # UUID string


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    user_id: str
    username: Username
    avatar_url: str | None
    bio: str | None
    role: UserRole
    reputation: int
    created_at: datetime
    thread_count: int
    reply_count: int
    recent_threads: list[RecentThreadItem]


class GetUserProfileUseCase:
    """Use case for getting a user's public profile."""

    def __init__(
        self, user_service: UserService, thread_service: ThreadService
    ) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            thread_service: Thread domain service
        """
        self.user_service = user_service
        self.thread_service = thread_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Steps:
        1. Get user by ID via user service
        2. Count the user's threads and replies, fetch the most recent ones
        3. Return public profile info

        Args:
            request: Request with user ID

        Returns:
            User profile information

        Raises:
            NotFoundError: If the user does not exist
        """
        user_id = UserId(UUID(request.user_id))
        user = await self.user_service.get_by_id(user_id)

        thread_count = await self.thread_service.count_by_author(user_id)
        reply_count = await self.thread_service.count_replies_by_author(user_id)
        recent = await self.thread_service.list_by_author(
            user_id, limit=RECENT_THREAD_LIMIT
        )

        return GetUserProfileResponse(
            user_id=str(user.id),
            username=user.username,
            avatar_url=user.avatar_url,
            bio=user.bio,
            role=user.role,
            reputation=user.reputation,
            created_at=user.created_at,
            thread_count=thread_count,
            reply_count=reply_count,
            recent_threads=[
                RecentThreadItem(
                    thread_id=str(thread.id),
                    title=thread.title,
                    net_score=thread.net_score,
                    reply_count=thread.reply_count,
                    created_at=thread.created_at,
                )
                for thread in recent
            ],
        )
