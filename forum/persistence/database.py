"""Database engine, sessions and transactions.

Each API request runs in one transaction. Thread rows read with
SELECT ... FOR UPDATE stay locked until that transaction ends, so the
commit in `transaction()` is also where a thread's row lock is released.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from forum.config import DatabaseSettings

SessionFactory = async_sessionmaker[AsyncSession]


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the async PostgreSQL engine.

    Args:
        database: Connection URL and pool sizing
        echo: Log every SQL statement (debug mode)

    Returns:
        Async engine backed by an asyncpg connection pool
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> SessionFactory:
    """Create the session factory used for per-request sessions."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@asynccontextmanager
async def transaction(session_factory: SessionFactory) -> AsyncIterator[AsyncSession]:
    """Open a session and commit it when the block exits cleanly.

    Any exception rolls the transaction back and is re-raised.

    Args:
        session_factory: Factory from create_session_factory

    Yields:
        Session bound to a single transaction
    """
    async with session_factory() as session:
        try:
            yield session
        except Exception as e:
            logfire.warn("Transaction rolled back", error=str(e))
            await session.rollback()
            raise
        await session.commit()
        logfire.debug("Transaction committed")
