"""Delete thread use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import ThreadService, UserService
from forum.domain.value import ThreadId, UserId


class DeleteThreadRequest(BaseModel):
    """Delete thread request."""

    thread_id: str  # UUID string
    user_id: str  # Current user ID (author or admin)


class DeleteThreadResponse(BaseModel):
    """Delete thread response."""

    message: str
    thread_id: str


class DeleteThreadUseCase:
    """Use case for deleting a thread and its replies."""

    def __init__(
        self, thread_service: ThreadService, user_service: UserService
    ) -> None:
        """Initialize delete thread use case.

        Args:
            thread_service: Thread domain service
            user_service: User domain service (admin check)
        """
        self.thread_service = thread_service
        self.user_service = user_service

    async def execute(self, request: DeleteThreadRequest) -> DeleteThreadResponse:
        """Execute delete thread flow.

        Args:
            request: Delete thread request

        Returns:
            Confirmation message

        Raises:
            ThreadNotFoundError: If the thread does not exist
            NotAuthorizedError: If the user is neither author nor admin
        """
        user_id = UserId(UUID(request.user_id))
        is_admin = await self.user_service.is_admin(user_id)

        await self.thread_service.delete_thread(
            thread_id=ThreadId(UUID(request.thread_id)),
            user_id=user_id,
            is_admin=is_admin,
        )

        return DeleteThreadResponse(
            message="Thread deleted successfully", thread_id=request.thread_id
        )
