"""Vote domain service."""

from dataclasses import dataclass

import logfire

from forum.config import VotingSettings
from forum.domain.error import ReplyNotFoundError, ThreadNotFoundError
from forum.domain.model import Votable, apply_vote, locate_reply
from forum.domain.repository import ThreadRepository
from forum.domain.value import ReplyId, ThreadId, UserId, VoteType

from .base import Service
from .reputation_service import ReputationService
from .thread_lock import ThreadLockRegistry


@dataclass
class VoteOutcome:
    """Result of a vote request.

    author_reputation is only set for votes on the thread itself, since
    reply votes never touch reputation.
    """

    thread_id: ThreadId
    reply_id: ReplyId | None
    net_score: int
    user_vote: VoteType | None
    author_reputation: int | None = None


class VoteService(Service):
    """Domain service for voting on threads and replies."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        reputation_service: ReputationService,
        thread_locks: ThreadLockRegistry,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            thread_repository: Thread repository
            reputation_service: Reputation domain service
            thread_locks: Application-wide per-thread lock registry
            voting_settings: Voting configuration
        """
        self.thread_repository = thread_repository
        self.reputation_service = reputation_service
        self.thread_locks = thread_locks
        self.voting_settings = voting_settings

    async def cast_vote(
        self,
        thread_id: ThreadId,
        user_id: UserId,
        vote_type: VoteType,
        reply_id: ReplyId | None = None,
    ) -> VoteOutcome:
        """Cast, switch or withdraw a vote on a thread or one of its replies.

        Voting the same way twice removes the vote; voting the other way
        switches it. Thread votes recompute the author's reputation; reply
        votes only change the reply's own score.

        Args:
            thread_id: Thread ID
            user_id: Voting user ID
            vote_type: Requested vote direction
            reply_id: Reply ID anywhere in the thread's tree (None to vote on
                the thread itself)

        Returns:
            New net score of the target and the user's resulting vote

        Raises:
            ThreadNotFoundError: If the thread does not exist
            ReplyNotFoundError: If the reply is not in the thread
            InvalidVoteTypeError: If vote_type is not a VoteType
            PersistenceError: If saving fails
        """
        with logfire.span(
            "vote_service.cast_vote",
            thread_id=str(thread_id),
            reply_id=str(reply_id) if reply_id else None,
            user_id=str(user_id),
            vote_type=vote_type,
        ):
            async with self.thread_locks.hold(thread_id):
                thread = await self.thread_repository.find_by_id(
                    thread_id, for_update=self.thread_locks.enabled
                )
                if not thread:
                    logfire.warn(
                        "Vote on non-existent thread", thread_id=str(thread_id)
                    )
                    raise ThreadNotFoundError(str(thread_id))

                target: Votable
                if reply_id is None:
                    target = thread
                else:
                    reply = locate_reply(
                        thread.replies, reply_id, self.voting_settings.max_reply_depth
                    )
                    if not reply:
                        logfire.warn(
                            "Vote on non-existent reply",
                            thread_id=str(thread_id),
                            reply_id=str(reply_id),
                        )
                        raise ReplyNotFoundError(str(reply_id))
                    target = reply

                votes, user_vote = apply_vote(target.votes, user_id, vote_type)
                target.votes = votes

                author_reputation = None
                if target is thread:
                    author_reputation = await self.reputation_service.recompute(thread)

                await self.thread_repository.save(thread)

                logfire.info(
                    "Vote recorded",
                    thread_id=str(thread_id),
                    reply_id=str(reply_id) if reply_id else None,
                    user_id=str(user_id),
                    user_vote=user_vote.value if user_vote else None,
                    net_score=target.net_score,
                )
                return VoteOutcome(
                    thread_id=thread_id,
                    reply_id=reply_id,
                    net_score=target.net_score,
                    user_vote=user_vote,
                    author_reputation=author_reputation,
                )
