"""In-memory user repository for testing."""

from typing import Optional

from forum.domain.model.user import User
from forum.domain.repository.user import UserRepository
from forum.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        return next(
            (user for user in self._users.values() if user.username == username),
            None,
        )

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def set_reputation(self, user_id: UserId, reputation: int) -> None:
        """Overwrite a user's reputation."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(update={"reputation": reputation})
