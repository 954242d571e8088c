"""Reputation domain service."""

import logfire

from forum.config import VotingSettings
from forum.domain.model import Thread
from forum.domain.repository import UserRepository

from .base import Service


class ReputationService(Service):
    """Derives thread authors' reputation from thread votes."""

    def __init__(
        self, user_repository: UserRepository, voting_settings: VotingSettings
    ) -> None:
        """Initialize reputation service.

        Args:
            user_repository: User repository
            voting_settings: Voting configuration
        """
        self.user_repository = user_repository
        self.voting_settings = voting_settings

    async def recompute(self, thread: Thread) -> int:
        """Recompute and store the reputation of a thread's author.

        The value is derived from the thread's full vote set every time, so it
        cannot drift from the votes. Reply votes are not considered.

        Args:
            thread: Thread whose own votes just changed

        Returns:
            The reputation stored for the author
        """
        with logfire.span(
            "reputation_service.recompute",
            thread_id=str(thread.id),
            author_id=str(thread.author_id),
        ):
            reputation = thread.author_reputation(
                self.voting_settings.reputation_per_vote
            )
            await self.user_repository.set_reputation(thread.author_id, reputation)
            logfire.info(
                "Author reputation updated",
                author_id=str(thread.author_id),
                net_score=thread.net_score,
                reputation=reputation,
            )
            return reputation
