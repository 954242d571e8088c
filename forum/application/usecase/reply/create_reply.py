"""Create reply use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import ThreadService
from forum.domain.value import ReplyId, ThreadId, UserId


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    thread_id: str  # UUID string
    author_id: str  # User ID from authenticated user
    content: str
    parent_id: str | None = None  # Parent reply ID for nested replies


class CreateReplyResponse(BaseModel):
    """Create reply response."""

    reply_id: str
    thread_id: str
    parent_id: str | None
    author_id: str
    content: str
    depth: int
    created_at: datetime


class CreateReplyUseCase:
    """Use case for replying to a thread or to another reply."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize create reply use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: CreateReplyRequest) -> CreateReplyResponse:
        """Execute create reply flow.

        Args:
            request: Create reply request

        Returns:
            Created reply details

        Raises:
            ThreadNotFoundError: If the thread does not exist
            ReplyNotFoundError: If the parent reply is not in the thread
            BusinessRuleViolationError: If the reply would nest too deeply
        """
        reply, depth = await self.thread_service.add_reply(
            thread_id=ThreadId(UUID(request.thread_id)),
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
            parent_id=ReplyId(UUID(request.parent_id)) if request.parent_id else None,
        )

        return CreateReplyResponse(
            reply_id=str(reply.id),
            thread_id=request.thread_id,
            parent_id=request.parent_id,
            author_id=str(reply.author_id),
            content=reply.content,
            depth=depth,
            created_at=reply.created_at,
        )
