"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import Optional

import logfire
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import PersistenceError
from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import UserId, Username
from forum.persistence.mappers import row_to_user, user_to_dict
from forum.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to load user {user_id}") from exc
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to load user {username}") from exc
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)
        try:
            existing = await self.find_by_id(user.id)
            if existing:
                stmt = (
                    users_table.update()
                    .where(users_table.c.id == user.id)
                    .values(**user_dict)
                )
            else:
                stmt = users_table.insert().values(**user_dict)
            await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to save user {user.id}") from exc
        return user

    async def set_reputation(self, user_id: UserId, reputation: int) -> None:
        """Overwrite a user's reputation.

        Unknown users are left alone; the update simply matches no row.

        Args:
            user_id: User ID to update
            reputation: New reputation value
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(reputation=reputation, updated_at=datetime.now())
        )
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as exc:
            logfire.error(
                "Failed to update reputation", user_id=str(user_id), error=str(exc)
            )
            raise PersistenceError(
                f"Failed to update reputation for user {user_id}"
            ) from exc
