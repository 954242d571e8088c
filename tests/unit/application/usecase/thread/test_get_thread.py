"""Unit tests for GetThreadUseCase."""

from uuid import uuid4

import pytest

from forum.application.usecase.thread import GetThreadRequest, GetThreadUseCase
from forum.domain.error import ThreadNotFoundError
from forum.domain.repository import ThreadRepository
from forum.domain.value import UserId, VoteType
from tests.conftest import down, make_reply, make_thread, up
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestGetThreadUseCase:
    """Tests for GetThreadUseCase."""

    @pytest.mark.asyncio
    async def test_replies_flattened_in_tree_order(self, unit_env, reply_tree):
        """Replies should come back pre-order with depth and parent."""
        # Arrange
        use_case = await unit_env.get(GetThreadUseCase)
        thread_repo = await unit_env.get(ThreadRepository)
        replies, nodes = reply_tree
        thread = make_thread(replies=replies)
        await thread_repo.save(thread)

        # Act
        response = await use_case.execute(GetThreadRequest(thread_id=str(thread.id)))

        # Assert
        assert [item.content for item in response.replies] == ["A", "B", "C", "D"]
        assert [item.depth for item in response.replies] == [0, 1, 1, 2]
        assert [item.parent_id for item in response.replies] == [
            None,
            str(nodes["A"].id),
            str(nodes["A"].id),
            str(nodes["C"].id),
        ]
        assert response.reply_count == 4

    @pytest.mark.asyncio
    async def test_view_counted(self, unit_env):
        """Reading a thread should count a view."""
        # Arrange
        use_case = await unit_env.get(GetThreadUseCase)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = make_thread()
        await thread_repo.save(thread)

        # Act
        await use_case.execute(GetThreadRequest(thread_id=str(thread.id)))
        response = await use_case.execute(GetThreadRequest(thread_id=str(thread.id)))

        # Assert
        assert response.views == 2

    @pytest.mark.asyncio
    async def test_scores_and_viewer_votes(self, unit_env):
        """Each item should carry its score and the viewer's vote."""
        # Arrange
        use_case = await unit_env.get(GetThreadUseCase)
        thread_repo = await unit_env.get(ThreadRepository)
        viewer = UserId(uuid4())
        reply = make_reply(votes=[up(viewer)])
        thread = make_thread(
            votes=[down(viewer), down(UserId(uuid4()))], replies=[reply]
        )
        await thread_repo.save(thread)

        # Act
        response = await use_case.execute(
            GetThreadRequest(thread_id=str(thread.id), user_id=str(viewer))
        )
        anonymous = await use_case.execute(GetThreadRequest(thread_id=str(thread.id)))

        # Assert
        assert response.net_score == -2
        assert response.user_vote == VoteType.DOWNVOTE
        assert response.replies[0].net_score == 1
        assert response.replies[0].user_vote == VoteType.UPVOTE
        assert anonymous.user_vote is None
        assert anonymous.replies[0].user_vote is None

    @pytest.mark.asyncio
    async def test_unknown_thread(self, unit_env):
        """An unknown thread should raise ThreadNotFoundError."""
        use_case = await unit_env.get(GetThreadUseCase)

        with pytest.raises(ThreadNotFoundError):
            await use_case.execute(GetThreadRequest(thread_id=str(uuid4())))
