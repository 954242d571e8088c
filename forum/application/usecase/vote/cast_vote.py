"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import VoteService
from forum.domain.value import ReplyId, ThreadId, UserId, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    thread_id: str  # UUID string
    reply_id: str | None = None  # UUID string, None to vote on the thread
    user_id: str  # User ID from authenticated user
    vote_type: VoteType


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    message: str
    thread_id: str
    reply_id: str | None
    net_score: int
    user_vote: VoteType | None


class CastVoteUseCase:
    """Use case for voting on a thread or on a reply anywhere in its tree."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            New net score of the voted item and the user's resulting vote

        Raises:
            ThreadNotFoundError: If the thread does not exist
            ReplyNotFoundError: If the reply is not in the thread
            ValueError: If an identifier is not a valid UUID
        """
        outcome = await self.vote_service.cast_vote(
            thread_id=ThreadId(UUID(request.thread_id)),
            user_id=UserId(UUID(request.user_id)),
            vote_type=request.vote_type,
            reply_id=ReplyId(UUID(request.reply_id)) if request.reply_id else None,
        )

        return CastVoteResponse(
            message="Vote recorded successfully"
            if outcome.user_vote
            else "Vote removed successfully",
            thread_id=str(outcome.thread_id),
            reply_id=str(outcome.reply_id) if outcome.reply_id else None,
            net_score=outcome.net_score,
            user_vote=outcome.user_vote,
        )
