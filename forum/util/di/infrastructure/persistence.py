"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from forum.config import Settings
from forum.domain.repository import ThreadRepository, UserRepository
from forum.persistence.database import (
    SessionFactory,
    create_engine,
    create_session_factory,
    transaction,
)
from forum.persistence.repository import (
    PostgresThreadRepository,
    PostgresUserRepository,
)
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Thread and user storage.

    Subclassed by the PostgreSQL provider below and by the in-memory
    provider used in tests.
    """

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL storage with one transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the engine and dispose of its pool on shutdown."""
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> SessionFactory:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: SessionFactory
    ) -> AsyncIterator[AsyncSession]:
        """Provide the request's session.

        Committed when the request finishes, rolled back if it raised.
        """
        async with transaction(session_factory) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, session: AsyncSession) -> ThreadRepository:
        return PostgresThreadRepository(session)
