"""Unit tests for UpdateUserProfileUseCase."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from forum.application.usecase.user import (
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from forum.domain.error import BusinessRuleViolationError, NotFoundError
from forum.domain.repository import UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpdateUserProfileUseCase:
    """Tests for UpdateUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_update_all_fields(self, unit_env):
        """Username, bio and avatar should be stored."""
        # Arrange
        use_case = await unit_env.get(UpdateUserProfileUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = make_user("heidi", reputation=12)
        await user_repo.save(user)

        # Act
        response = await use_case.execute(
            UpdateUserProfileRequest(
                user_id=str(user.id),
                username="heidi_k",
                bio="Reads everything twice",
                avatar_url="https://example.com/heidi.png",
            )
        )

        # Assert
        assert response.message == "Profile updated successfully"
        assert response.username.root == "heidi_k"
        assert response.reputation == 12
        stored = await user_repo.find_by_id(user.id)
        assert stored.username.root == "heidi_k"
        assert stored.bio == "Reads everything twice"
        assert stored.avatar_url == "https://example.com/heidi.png"
        assert stored.updated_at >= user.updated_at

    @pytest.mark.asyncio
    async def test_omitted_fields_are_kept(self, unit_env):
        """Only the fields sent should change."""
        use_case = await unit_env.get(UpdateUserProfileUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = make_user("ivan", bio="Old bio")
        await user_repo.save(user)

        await use_case.execute(
            UpdateUserProfileRequest(user_id=str(user.id), avatar_url="https://a.io")
        )

        stored = await user_repo.find_by_id(user.id)
        assert stored.username.root == "ivan"
        assert stored.bio == "Old bio"

    @pytest.mark.asyncio
    async def test_empty_bio_clears_it(self, unit_env):
        """An empty bio should remove the existing one."""
        use_case = await unit_env.get(UpdateUserProfileUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = make_user("judy", bio="Something")
        await user_repo.save(user)

        await use_case.execute(UpdateUserProfileRequest(user_id=str(user.id), bio=""))

        assert (await user_repo.find_by_id(user.id)).bio is None

    @pytest.mark.asyncio
    async def test_username_taken_by_someone_else(self, unit_env):
        """Taking another member's username should be refused."""
        # Arrange
        use_case = await unit_env.get(UpdateUserProfileUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = make_user("kate")
        await user_repo.save(user)
        await user_repo.save(make_user("leo"))

        # Act / Assert
        with pytest.raises(BusinessRuleViolationError, match="already taken"):
            await use_case.execute(
                UpdateUserProfileRequest(user_id=str(user.id), username="leo")
            )
        assert (await user_repo.find_by_id(user.id)).username.root == "kate"

    @pytest.mark.asyncio
    async def test_keeping_own_username(self, unit_env):
        """Re-sending the current username is not a conflict."""
        use_case = await unit_env.get(UpdateUserProfileUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = make_user("mia")
        await user_repo.save(user)

        response = await use_case.execute(
            UpdateUserProfileRequest(user_id=str(user.id), username="mia", bio="Hi")
        )

        assert response.username.root == "mia"
        assert response.bio == "Hi"

    @pytest.mark.asyncio
    async def test_invalid_username(self, unit_env):
        """Usernames with disallowed characters should be rejected."""
        use_case = await unit_env.get(UpdateUserProfileUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = make_user("nina")
        await user_repo.save(user)

        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdateUserProfileRequest(user_id=str(user.id), username="no spaces")
            )

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        """Editing a missing member should raise NotFoundError."""
        use_case = await unit_env.get(UpdateUserProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateUserProfileRequest(user_id=str(uuid4()), bio="Hello")
            )
