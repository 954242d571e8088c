"""Create thread use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from forum.domain.service import ThreadService
from forum.domain.value import CategoryId, TagId, UserId


class CreateThreadRequest(BaseModel):
    """Create thread request."""

    author_id: str  # User ID from authenticated user
    title: str
    content: str
    category_id: str  # UUID string
    tag_ids: list[str] = Field(default_factory=list)  # UUID strings, at most 5


class CreateThreadResponse(BaseModel):
    """Create thread response."""

    thread_id: str
    author_id: str
    title: str
    content: str
    category_id: str
    tag_ids: list[str]
    created_at: datetime


class CreateThreadUseCase:
    """Use case for starting a new thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize create thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: CreateThreadRequest) -> CreateThreadResponse:
        """Execute create thread flow.

        Args:
            request: Create thread request

        Returns:
            Created thread details

        Raises:
            pydantic.ValidationError: If title, content or tags break the
                thread rules
        """
        thread = await self.thread_service.create_thread(
            author_id=UserId(UUID(request.author_id)),
            title=request.title,
            content=request.content,
            category_id=CategoryId(UUID(request.category_id)),
            tag_ids=[TagId(UUID(tag_id)) for tag_id in request.tag_ids],
        )

        return CreateThreadResponse(
            thread_id=str(thread.id),
            author_id=str(thread.author_id),
            title=thread.title,
            content=thread.content,
            category_id=str(thread.category_id),
            tag_ids=sorted(str(tag_id) for tag_id in thread.tag_ids),
            created_at=thread.created_at,
        )
