"""Update thread use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import ThreadService
from forum.domain.value import ThreadId, UserId


class UpdateThreadRequest(BaseModel):
    """Update thread request."""

    thread_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    title: str | None = None  # New title (None to keep)
    content: str | None = None  # New content (None to keep)


class UpdateThreadResponse(BaseModel):
    """Update thread response."""

    thread_id: str
    title: str
    content: str
    net_score: int
    is_edited: bool
    edited_at: datetime | None
    updated_at: datetime


class UpdateThreadUseCase:
    """Use case for editing a thread's title or content."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize update thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: UpdateThreadRequest) -> UpdateThreadResponse:
        """Execute update thread flow.

        Args:
            request: Update thread request

        Returns:
            Updated thread details

        Raises:
            ThreadNotFoundError: If the thread does not exist
            NotAuthorizedError: If the user is not the author
        """
        thread = await self.thread_service.update_thread(
            thread_id=ThreadId(UUID(request.thread_id)),
            user_id=UserId(UUID(request.user_id)),
            title=request.title,
            content=request.content,
        )

        return UpdateThreadResponse(
            thread_id=str(thread.id),
            title=thread.title,
            content=thread.content,
            net_score=thread.net_score,
            is_edited=thread.is_edited,
            edited_at=thread.edited_at,
            updated_at=thread.updated_at,
        )
