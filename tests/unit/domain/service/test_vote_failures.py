"""Storage failures while casting votes."""

from uuid import uuid4

import pytest

from forum.config import VotingSettings
from forum.domain.error import PersistenceError
from forum.domain.model import Thread
from forum.domain.service import ReputationService, ThreadLockRegistry, VoteService
from forum.domain.value import UserId, VoteType
from forum.persistence.repository.inmemory import (
    InMemoryThreadRepository,
    InMemoryUserRepository,
)
from tests.conftest import make_reply, make_thread, make_user


class FailingThreadRepository(InMemoryThreadRepository):
    """In-memory repository whose saves fail once `failure` is set."""

    failure: PersistenceError | None = None

    async def save(self, thread: Thread) -> Thread:
        if self.failure is not None:
            raise self.failure
        return await super().save(thread)


class FailingUserRepository(InMemoryUserRepository):
    """In-memory repository whose reputation updates fail once `failure` is set."""

    failure: PersistenceError | None = None

    async def set_reputation(self, user_id: UserId, reputation: int) -> None:
        if self.failure is not None:
            raise self.failure
        await super().set_reputation(user_id, reputation)


async def _setup(replies=None):
    thread_repo = FailingThreadRepository()
    user_repo = FailingUserRepository()
    settings = VotingSettings()
    locks = ThreadLockRegistry()
    service = VoteService(
        thread_repository=thread_repo,
        reputation_service=ReputationService(user_repo, settings),
        thread_locks=locks,
        voting_settings=settings,
    )

    author = make_user("author", reputation=30)
    await user_repo.save(author)
    thread = make_thread(author_id=author.id, replies=replies)
    await thread_repo.save(thread)
    return service, thread_repo, user_repo, locks, author, thread


class TestVoteStorageFailures:
    """A failing store surfaces its error unchanged."""

    @pytest.mark.asyncio
    async def test_thread_save_failure_propagates(self):
        """A PersistenceError from saving the thread should reach the caller as is."""
        # Arrange
        service, thread_repo, _, locks, _, thread = await _setup()
        error = PersistenceError("database unavailable")
        thread_repo.failure = error

        # Act
        with pytest.raises(PersistenceError) as exc_info:
            await service.cast_vote(thread.id, UserId(uuid4()), VoteType.UPVOTE)

        # Assert
        assert exc_info.value is error
        assert len(locks) == 0
        thread_repo.failure = None
        assert (await thread_repo.find_by_id(thread.id)).votes == []

    @pytest.mark.asyncio
    async def test_reputation_failure_propagates(self):
        """A PersistenceError from the reputation update should stop the vote."""
        # Arrange
        service, thread_repo, user_repo, locks, author, thread = await _setup()
        error = PersistenceError("users table locked")
        user_repo.failure = error

        # Act
        with pytest.raises(PersistenceError) as exc_info:
            await service.cast_vote(thread.id, UserId(uuid4()), VoteType.UPVOTE)

        # Assert
        assert exc_info.value is error
        assert len(locks) == 0
        assert (await thread_repo.find_by_id(thread.id)).votes == []
        assert (await user_repo.find_by_id(author.id)).reputation == 30

    @pytest.mark.asyncio
    async def test_reply_vote_save_failure_propagates(self):
        """Reply votes should surface save failures the same way."""
        reply = make_reply()
        service, thread_repo, _, locks, _, thread = await _setup(replies=[reply])
        thread_repo.failure = PersistenceError("disk full")

        with pytest.raises(PersistenceError, match="disk full"):
            await service.cast_vote(
                thread.id, UserId(uuid4()), VoteType.DOWNVOTE, reply_id=reply.id
            )

        assert len(locks) == 0

    @pytest.mark.asyncio
    async def test_lock_usable_after_failure(self):
        """A later vote on the same thread should succeed once storage recovers."""
        service, thread_repo, _, locks, _, thread = await _setup()
        thread_repo.failure = PersistenceError("timeout")
        with pytest.raises(PersistenceError):
            await service.cast_vote(thread.id, UserId(uuid4()), VoteType.UPVOTE)

        thread_repo.failure = None
        outcome = await service.cast_vote(thread.id, UserId(uuid4()), VoteType.UPVOTE)

        assert outcome.net_score == 1
        assert len(locks) == 0
