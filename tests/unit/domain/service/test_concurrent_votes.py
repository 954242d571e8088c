"""Concurrency tests for votes on a single thread."""

import asyncio
from typing import Optional
from uuid import uuid4

import pytest

from forum.config import VotingSettings
from forum.domain.model import Thread
from forum.domain.service import ReputationService, ThreadLockRegistry, VoteService
from forum.domain.value import ThreadId, UserId, VoteType
from forum.persistence.repository.inmemory import (
    InMemoryThreadRepository,
    InMemoryUserRepository,
)
from tests.conftest import make_reply, make_thread, make_user


class SlowThreadRepository(InMemoryThreadRepository):
    """In-memory repository that yields to the event loop after every load.

    Stands in for a database round trip, giving other requests the chance to
    load the same thread before this one saves.
    """

    async def find_by_id(
        self, thread_id: ThreadId, for_update: bool = False
    ) -> Optional[Thread]:
        thread = await super().find_by_id(thread_id, for_update)
        await asyncio.sleep(0)
        return thread


async def _setup(serialize: bool, replies=None):
    thread_repo = SlowThreadRepository()
    user_repo = InMemoryUserRepository()
    settings = VotingSettings(serialize_thread_writes=serialize)
    locks = ThreadLockRegistry(enabled=settings.serialize_thread_writes)
    service = VoteService(
        thread_repository=thread_repo,
        reputation_service=ReputationService(user_repo, settings),
        thread_locks=locks,
        voting_settings=settings,
    )

    author = make_user("author")
    await user_repo.save(author)
    thread = make_thread(author_id=author.id, replies=replies)
    await thread_repo.save(thread)
    return service, thread_repo, user_repo, locks, author, thread


class TestConcurrentVotes:
    """Concurrent voters on the same thread."""

    @pytest.mark.asyncio
    async def test_serialized_writes_keep_every_vote(self):
        """With per-thread locking, every concurrent vote should be kept."""
        # Arrange
        service, thread_repo, user_repo, locks, author, thread = await _setup(True)
        voters = [UserId(uuid4()) for _ in range(10)]

        # Act
        await asyncio.gather(
            *(service.cast_vote(thread.id, v, VoteType.UPVOTE) for v in voters)
        )

        # Assert
        stored = await thread_repo.find_by_id(thread.id)
        assert stored.net_score == 10
        assert {vote.user_id for vote in stored.votes} == set(voters)
        assert (await user_repo.find_by_id(author.id)).reputation == 100
        assert len(locks) == 0

    @pytest.mark.asyncio
    async def test_unserialized_writes_lose_updates(self):
        """Without locking, concurrent load-mutate-persist loses votes."""
        # Arrange
        service, thread_repo, _, _, _, thread = await _setup(False)
        voters = [UserId(uuid4()) for _ in range(10)]

        # Act
        await asyncio.gather(
            *(service.cast_vote(thread.id, v, VoteType.UPVOTE) for v in voters)
        )

        # Assert - last writer wins
        stored = await thread_repo.find_by_id(thread.id)
        assert stored.net_score < 10

    @pytest.mark.asyncio
    async def test_serialized_reply_votes_keep_every_vote(self):
        """Concurrent votes on a nested reply should all be kept."""
        # Arrange
        leaf = make_reply("leaf")
        root = make_reply("root", children=[leaf])
        service, thread_repo, _, _, _, thread = await _setup(True, replies=[root])
        voters = [UserId(uuid4()) for _ in range(6)]

        # Act
        await asyncio.gather(
            *(
                service.cast_vote(thread.id, v, VoteType.DOWNVOTE, reply_id=leaf.id)
                for v in voters
            )
        )

        # Assert
        stored = await thread_repo.find_by_id(thread.id)
        assert stored.replies[0].children[0].net_score == -6

    @pytest.mark.asyncio
    async def test_threads_voted_independently(self):
        """Votes on different threads should not interfere."""
        # Arrange
        service, thread_repo, _, _, author, first = await _setup(True)
        second = make_thread(author_id=author.id)
        await thread_repo.save(second)
        voter = UserId(uuid4())

        # Act
        await asyncio.gather(
            service.cast_vote(first.id, voter, VoteType.UPVOTE),
            service.cast_vote(second.id, voter, VoteType.DOWNVOTE),
        )

        # Assert
        assert (await thread_repo.find_by_id(first.id)).net_score == 1
        assert (await thread_repo.find_by_id(second.id)).net_score == -1
