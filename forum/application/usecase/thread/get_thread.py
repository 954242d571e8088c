"""Get thread use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from forum.domain.model import Reply, walk_replies
from forum.domain.service import ThreadService
from forum.domain.value import ThreadId, UserId, VoteType


class ReplyItem(BaseModel):
    """Reply item in response."""

    reply_id: str
    parent_id: str | None
    author_id: str
    content: str
    depth: int
    net_score: int
    user_vote: VoteType | None
    is_edited: bool
    created_at: datetime


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetThreadResponse(BaseModel):
    """Get thread response."""

    thread_id: str
    author_id: str
    title: str
    content: str
    category_id: str
    tag_ids: list[str]
    views: int
    net_score: int
    user_vote: VoteType | None
    is_pinned: bool
    is_edited: bool
    edited_at: datetime | None
    created_at: datetime
    updated_at: datetime
    reply_count: int
    replies: list[ReplyItem]


class GetThreadUseCase:
    """Use case for reading a thread with its whole discussion."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Reading a thread counts as a view. Replies are returned flattened in
        tree order (each reply followed by its subtree) with their depth and
        parent so clients can render the nesting.

        Args:
            request: Get thread request with thread ID and optional user ID

        Returns:
            Thread details with scored replies

        Raises:
            ThreadNotFoundError: If the thread does not exist
        """
        thread_id = ThreadId(UUID(request.thread_id))
        thread = await self.thread_service.record_view(thread_id)
        user_id = UserId(UUID(request.user_id)) if request.user_id else None

        return GetThreadResponse(
            thread_id=str(thread.id),
            author_id=str(thread.author_id),
            title=thread.title,
            content=thread.content,
            category_id=str(thread.category_id),
            tag_ids=sorted(str(tag_id) for tag_id in thread.tag_ids),
            views=thread.views,
            net_score=thread.net_score,
            user_vote=thread.user_vote(user_id) if user_id else None,
            is_pinned=thread.is_pinned,
            is_edited=thread.is_edited,
            edited_at=thread.edited_at,
            created_at=thread.created_at,
            updated_at=thread.updated_at,
            reply_count=thread.reply_count,
            replies=_flatten(thread.replies, user_id),
        )


def _flatten(replies: list[Reply], user_id: Optional[UserId]) -> list[ReplyItem]:
    """Render a reply tree as a pre-order list of items."""
    return [
        ReplyItem(
            reply_id=str(reply.id),
            parent_id=str(parent.id) if parent else None,
            author_id=str(reply.author_id),
            content=reply.content,
            depth=depth,
            net_score=reply.net_score,
            user_vote=reply.user_vote(user_id) if user_id else None,
            is_edited=reply.is_edited,
            created_at=reply.created_at,
        )
        for depth, parent, reply in walk_replies(replies)
    ]
