"""Unit tests for creating, editing and deleting threads."""

from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from forum.application.usecase.thread import (
    CreateThreadRequest,
    CreateThreadUseCase,
    DeleteThreadRequest,
    DeleteThreadUseCase,
    UpdateThreadRequest,
    UpdateThreadUseCase,
)
from forum.domain.error import NotAuthorizedError
from forum.domain.repository import ThreadRepository, UserRepository
from forum.domain.value import UserRole
from tests.conftest import make_thread, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateThreadUseCase:
    """Tests for CreateThreadUseCase."""

    @pytest.mark.asyncio
    async def test_create_thread(self, unit_env):
        """A valid request should create and store a thread."""
        # Arrange
        use_case = await unit_env.get(CreateThreadUseCase)
        thread_repo = await unit_env.get(ThreadRepository)
        author_id = str(uuid4())

        # Act
        response = await use_case.execute(
            CreateThreadRequest(
                author_id=author_id,
                title="Favourite editors",
                content="Which editor do you use and why?",
                category_id=str(uuid4()),
                tag_ids=[str(uuid4())],
            )
        )

        # Assert
        assert response.author_id == author_id
        assert len(response.tag_ids) == 1
        stored = await thread_repo.find_by_id(UUID(response.thread_id))
        assert stored is not None
        assert stored.title == "Favourite editors"

    @pytest.mark.asyncio
    async def test_short_title_rejected(self, unit_env):
        """A title under five characters should fail validation."""
        use_case = await unit_env.get(CreateThreadUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateThreadRequest(
                    author_id=str(uuid4()),
                    title="Hi",
                    content="Which editor do you use and why?",
                    category_id=str(uuid4()),
                )
            )


class TestUpdateThreadUseCase:
    """Tests for UpdateThreadUseCase."""

    @pytest.mark.asyncio
    async def test_author_edit_keeps_votes(self, unit_env):
        """Editing should mark the thread edited without touching votes."""
        # Arrange
        use_case = await unit_env.get(UpdateThreadUseCase)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = make_thread()
        await thread_repo.save(thread)

        # Act
        response = await use_case.execute(
            UpdateThreadRequest(
                thread_id=str(thread.id),
                user_id=str(thread.author_id),
                content="Edited content with enough length",
            )
        )

        # Assert
        assert response.is_edited is True
        assert response.content == "Edited content with enough length"
        assert response.title == thread.title
        assert response.net_score == 0

    @pytest.mark.asyncio
    async def test_other_user_rejected(self, unit_env):
        """Only the author should be able to edit."""
        use_case = await unit_env.get(UpdateThreadUseCase)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = make_thread()
        await thread_repo.save(thread)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateThreadRequest(
                    thread_id=str(thread.id),
                    user_id=str(uuid4()),
                    title="Not my thread",
                )
            )


class TestDeleteThreadUseCase:
    """Tests for DeleteThreadUseCase."""

    @pytest.mark.asyncio
    async def test_admin_deletes_any_thread(self, unit_env):
        """A stored admin should be able to delete another user's thread."""
        # Arrange
        use_case = await unit_env.get(DeleteThreadUseCase)
        thread_repo = await unit_env.get(ThreadRepository)
        user_repo = await unit_env.get(UserRepository)
        admin = make_user("site_admin", role=UserRole.ADMIN)
        await user_repo.save(admin)
        thread = make_thread()
        await thread_repo.save(thread)

        # Act
        response = await use_case.execute(
            DeleteThreadRequest(thread_id=str(thread.id), user_id=str(admin.id))
        )

        # Assert
        assert response.thread_id == str(thread.id)
        assert await thread_repo.find_by_id(thread.id) is None

    @pytest.mark.asyncio
    async def test_moderator_cannot_delete(self, unit_env):
        """Moderators should not be able to delete someone else's thread."""
        use_case = await unit_env.get(DeleteThreadUseCase)
        thread_repo = await unit_env.get(ThreadRepository)
        user_repo = await unit_env.get(UserRepository)
        moderator = make_user("moderator", role=UserRole.MODERATOR)
        await user_repo.save(moderator)
        thread = make_thread()
        await thread_repo.save(thread)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteThreadRequest(
                    thread_id=str(thread.id), user_id=str(moderator.id)
                )
            )
