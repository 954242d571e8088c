"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.thread import Thread
from forum.domain.value import ThreadId, UserId


class ThreadRepository(ABC):
    """Repository for the Thread aggregate.

    A thread is stored together with its votes and its whole reply tree.
    Implementations raise PersistenceError when the store fails.
    """

    @abstractmethod
    async def find_by_id(
        self, thread_id: ThreadId, for_update: bool = False
    ) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's unique identifier
            for_update: Lock the stored thread until the current transaction
                ends (stores without transactions may ignore this)

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int = 5, offset: int = 0
    ) -> List[Thread]:
        """Find threads by a specific author, newest first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of threads to return
            offset: Number of threads to skip

        Returns:
            List of threads by the author
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count threads by a specific author.

        Args:
            author_id: The author's user ID

        Returns:
            Number of threads
        """
        pass

    @abstractmethod
    async def count_replies_by_author(self, author_id: UserId) -> int:
        """Count replies written by a user, at any depth of any thread.

        Args:
            author_id: The author's user ID

        Returns:
            Number of replies
        """
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or replace), including its reply tree.

        Args:
            thread: The thread to save

        Returns:
            The saved thread
        """
        pass

    @abstractmethod
    async def delete(self, thread_id: ThreadId) -> bool:
        """Delete a thread and every reply under it.

        Args:
            thread_id: The thread ID to delete

        Returns:
            True if a thread was deleted, False if it did not exist
        """
        pass
