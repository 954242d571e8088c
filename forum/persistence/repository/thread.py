"""PostgreSQL implementation of Thread repository."""

from typing import List, Optional

import logfire
from sqlalchemy import (
    String,
    cast,
    delete,
    func,
    insert,
    literal_column,
    select,
    update,
)
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import PersistenceError
from forum.domain.model import Thread
from forum.domain.repository import ThreadRepository
from forum.domain.value import ThreadId, UserId
from forum.persistence.mappers import row_to_thread, thread_to_dict
from forum.persistence.tables import threads_table

# Every reply object anywhere in a reply tree whose author_id equals $author
_REPLIES_BY_AUTHOR = literal_column(
    "'strict $.** ? (@.author_id == $author)'::jsonpath"
)


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository.

    Reads with `for_update=True` take a row lock (SELECT ... FOR UPDATE) held
    until the request's transaction commits, which serializes writers to the
    same thread across processes.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, thread_id: ThreadId, for_update: bool = False
    ) -> Optional[Thread]:
        """Find a thread by ID."""
        with logfire.span(
            "thread_repository.find_by_id",
            thread_id=str(thread_id),
            for_update=for_update,
        ):
            stmt = select(threads_table).where(threads_table.c.id == thread_id)
            if for_update:
                stmt = stmt.with_for_update()
            try:
                result = await self.session.execute(stmt)
            except SQLAlchemyError as exc:
                logfire.error(
                    "Failed to load thread", thread_id=str(thread_id), error=str(exc)
                )
                raise PersistenceError(f"Failed to load thread {thread_id}") from exc

            row = result.mappings().first()
            return row_to_thread(dict(row)) if row else None

    async def find_by_author(
        self, author_id: UserId, limit: int = 5, offset: int = 0
    ) -> List[Thread]:
        """Find threads by a specific author, newest first."""
        stmt = (
            select(threads_table)
            .where(threads_table.c.author_id == author_id)
            .order_by(threads_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError(
                f"Failed to list threads for author {author_id}"
            ) from exc
        return [row_to_thread(dict(row)) for row in result.mappings().all()]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count threads by a specific author."""
        stmt = (
            select(func.count())
            .select_from(threads_table)
            .where(threads_table.c.author_id == author_id)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError(
                f"Failed to count threads for author {author_id}"
            ) from exc
        return result.scalar_one()

    async def count_replies_by_author(self, author_id: UserId) -> int:
        """Count replies by a user across every thread's reply tree."""
        matches = func.jsonb_path_query_array(
            threads_table.c.replies,
            _REPLIES_BY_AUTHOR,
            func.jsonb_build_object(
                literal_column("'author'"), cast(str(author_id), String)
            ),
        )
        stmt = select(func.coalesce(func.sum(func.jsonb_array_length(matches)), 0))
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise PersistenceError(
                f"Failed to count replies for author {author_id}"
            ) from exc
        return int(result.scalar_one())

    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or replace), including its reply tree."""
        with logfire.span("thread_repository.save", thread_id=str(thread.id)):
            thread_dict = thread_to_dict(thread)
            try:
                exists = await self.session.execute(
                    select(threads_table.c.id).where(threads_table.c.id == thread.id)
                )
                if exists.first():
                    values = {k: v for k, v in thread_dict.items() if k != "id"}
                    await self.session.execute(
                        update(threads_table)
                        .where(threads_table.c.id == thread.id)
                        .values(**values)
                    )
                else:
                    await self.session.execute(
                        insert(threads_table).values(**thread_dict)
                    )
                await self.session.flush()
            except SQLAlchemyError as exc:
                logfire.error(
                    "Failed to save thread", thread_id=str(thread.id), error=str(exc)
                )
                raise PersistenceError(f"Failed to save thread {thread.id}") from exc
            return thread

    async def delete(self, thread_id: ThreadId) -> bool:
        """Delete a thread and every reply under it."""
        with logfire.span("thread_repository.delete", thread_id=str(thread_id)):
            try:
                result = await self.session.execute(
                    delete(threads_table).where(threads_table.c.id == thread_id)
                )
                await self.session.flush()
            except SQLAlchemyError as exc:
                raise PersistenceError(f"Failed to delete thread {thread_id}") from exc
            return result.rowcount > 0
