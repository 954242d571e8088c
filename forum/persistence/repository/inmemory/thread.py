"""In-memory thread repository for testing."""

from typing import List, Optional

from forum.domain.model.reply import iter_replies
from forum.domain.model.thread import Thread
from forum.domain.repository.thread import ThreadRepository
from forum.domain.value import ThreadId, UserId


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing.

    Threads are copied on the way in and on the way out, so every load is an
    independent snapshot and changes only become visible through save(),
    the same as with a real database.
    """

    def __init__(self) -> None:
        self._threads: dict[ThreadId, Thread] = {}

    async def find_by_id(
        self, thread_id: ThreadId, for_update: bool = False
    ) -> Optional[Thread]:
        """Find a thread by ID (row locking is not modelled)."""
        thread = self._threads.get(thread_id)
        return thread.model_copy(deep=True) if thread else None

    async def find_by_author(
        self, author_id: UserId, limit: int = 5, offset: int = 0
    ) -> List[Thread]:
        """Find threads by a specific author, newest first."""
        threads = sorted(
            (t for t in self._threads.values() if t.author_id == author_id),
            key=lambda t: t.created_at,
            reverse=True,
        )
        return [t.model_copy(deep=True) for t in threads[offset : offset + limit]]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count threads by a specific author."""
        return sum(1 for t in self._threads.values() if t.author_id == author_id)

    async def count_replies_by_author(self, author_id: UserId) -> int:
        """Count replies by a user across every stored reply tree."""
        return sum(
            1
            for thread in self._threads.values()
            for _, reply in iter_replies(thread.replies)
            if reply.author_id == author_id
        )

    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or replace)."""
        self._threads[thread.id] = thread.model_copy(deep=True)
        return thread

    async def delete(self, thread_id: ThreadId) -> bool:
        """Delete a thread and its replies."""
        return self._threads.pop(thread_id, None) is not None
