"""Thread domain service."""

from datetime import datetime
from typing import Iterable, Optional
from uuid import uuid4

import logfire

from forum.config import VotingSettings
from forum.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    ReplyNotFoundError,
    ThreadNotFoundError,
)
from forum.domain.model import Reply, Thread, locate_reply_with_depth
from forum.domain.repository import ThreadRepository
from forum.domain.value import CategoryId, ReplyId, TagId, ThreadId, UserId

from .base import Service
from .thread_lock import ThreadLockRegistry


class ThreadService(Service):
    """Domain service for thread and reply operations.

    Every change loads the whole thread, mutates it in memory and saves it
    back while holding the thread's lock.
    """

    def __init__(
        self,
        thread_repository: ThreadRepository,
        thread_locks: ThreadLockRegistry,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            thread_locks: Application-wide per-thread lock registry
            voting_settings: Voting configuration (reply depth limit)
        """
        self.thread_repository = thread_repository
        self.thread_locks = thread_locks
        self.voting_settings = voting_settings

    async def create_thread(
        self,
        author_id: UserId,
        title: str,
        content: str,
        category_id: CategoryId,
        tag_ids: Iterable[TagId] = (),
    ) -> Thread:
        """Create a new thread with no votes and no replies.

        Args:
            author_id: Author user ID
            title: Thread title
            content: Thread body
            category_id: Category the thread is filed under
            tag_ids: Tags attached to the thread

        Returns:
            Created thread
        """
        with logfire.span(
            "thread_service.create_thread",
            author_id=str(author_id),
            category_id=str(category_id),
        ):
            now = datetime.now()
            thread = Thread(
                id=ThreadId(uuid4()),
                author_id=author_id,
                title=title,
                content=content,
                category_id=category_id,
                tag_ids=set(tag_ids),
                created_at=now,
                updated_at=now,
            )
            saved = await self.thread_repository.save(thread)
            logfire.info(
                "Thread created", thread_id=str(saved.id), author_id=str(author_id)
            )
            return saved

    async def get_thread(self, thread_id: ThreadId) -> Thread:
        """Get a thread by ID.

        Args:
            thread_id: Thread ID

        Returns:
            Thread with its full reply tree

        Raises:
            ThreadNotFoundError: If thread not found
        """
        with logfire.span("thread_service.get_thread", thread_id=str(thread_id)):
            thread = await self.thread_repository.find_by_id(thread_id)
            if not thread:
                logfire.warn("Thread not found", thread_id=str(thread_id))
                raise ThreadNotFoundError(str(thread_id))
            return thread

    async def list_by_author(
        self, author_id: UserId, limit: int = 5, offset: int = 0
    ) -> list[Thread]:
        """List an author's threads, newest first.

        Args:
            author_id: Author user ID
            limit: Maximum number of threads
            offset: Number of threads to skip

        Returns:
            Threads by the author
        """
        with logfire.span(
            "thread_service.list_by_author", author_id=str(author_id), limit=limit
        ):
            return await self.thread_repository.find_by_author(
                author_id, limit=limit, offset=offset
            )

    async def count_by_author(self, author_id: UserId) -> int:
        """Count an author's threads."""
        return await self.thread_repository.count_by_author(author_id)

    async def count_replies_by_author(self, author_id: UserId) -> int:
        """Count a user's replies at any depth of any thread."""
        return await self.thread_repository.count_replies_by_author(author_id)

    async def record_view(self, thread_id: ThreadId) -> Thread:
        """Increment a thread's view counter.

        Args:
            thread_id: Thread ID

        Returns:
            Thread with the updated view count

        Raises:
            ThreadNotFoundError: If thread not found
        """
        with logfire.span("thread_service.record_view", thread_id=str(thread_id)):
            async with self.thread_locks.hold(thread_id):
                thread = await self._load_for_update(thread_id)
                thread.views += 1
                return await self.thread_repository.save(thread)

    async def update_thread(
        self,
        thread_id: ThreadId,
        user_id: UserId,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Thread:
        """Edit a thread's title and/or content.

        Only the author can edit. Votes and replies are untouched.

        Args:
            thread_id: Thread ID
            user_id: Editing user ID
            title: New title (None to keep)
            content: New content (None to keep)

        Returns:
            Updated thread

        Raises:
            ThreadNotFoundError: If thread not found
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "thread_service.update_thread",
            thread_id=str(thread_id),
            user_id=str(user_id),
        ):
            async with self.thread_locks.hold(thread_id):
                thread = await self._load_for_update(thread_id)

                if thread.author_id != user_id:
                    logfire.warn(
                        "Unauthorized thread edit",
                        thread_id=str(thread_id),
                        user_id=str(user_id),
                    )
                    raise NotAuthorizedError("thread", str(thread_id), str(user_id))

                now = datetime.now()
                if title:
                    thread.title = title
                if content:
                    thread.content = content
                thread.is_edited = True
                thread.edited_at = now
                thread.updated_at = now

                saved = await self.thread_repository.save(thread)
                logfire.info("Thread updated", thread_id=str(thread_id))
                return saved

    async def delete_thread(
        self, thread_id: ThreadId, user_id: UserId, is_admin: bool = False
    ) -> None:
        """Delete a thread together with all of its replies.

        Args:
            thread_id: Thread ID
            user_id: Requesting user ID
            is_admin: Whether the requesting user is an administrator

        Raises:
            ThreadNotFoundError: If thread not found
            NotAuthorizedError: If the user is neither author nor admin
        """
        with logfire.span(
            "thread_service.delete_thread",
            thread_id=str(thread_id),
            user_id=str(user_id),
        ):
            async with self.thread_locks.hold(thread_id):
                thread = await self._load_for_update(thread_id)

                if thread.author_id != user_id and not is_admin:
                    logfire.warn(
                        "Unauthorized thread delete",
                        thread_id=str(thread_id),
                        user_id=str(user_id),
                    )
                    raise NotAuthorizedError("thread", str(thread_id), str(user_id))

                await self.thread_repository.delete(thread_id)
                logfire.info(
                    "Thread deleted",
                    thread_id=str(thread_id),
                    reply_count=thread.reply_count,
                )

    async def add_reply(
        self,
        thread_id: ThreadId,
        author_id: UserId,
        content: str,
        parent_id: Optional[ReplyId] = None,
    ) -> tuple[Reply, int]:
        """Post a reply to a thread or to another reply.

        The reply is appended after its existing siblings.

        Args:
            thread_id: Thread ID
            author_id: Author user ID
            content: Reply text
            parent_id: Reply being answered (None for a top-level reply)

        Returns:
            (created reply, its depth in the tree)

        Raises:
            ThreadNotFoundError: If thread not found
            ReplyNotFoundError: If the parent reply is not in the thread
            BusinessRuleViolationError: If the reply would nest too deeply
        """
        with logfire.span(
            "thread_service.add_reply",
            thread_id=str(thread_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            async with self.thread_locks.hold(thread_id):
                thread = await self._load_for_update(thread_id)
                max_depth = self.voting_settings.max_reply_depth

                reply = Reply(
                    id=ReplyId(uuid4()),
                    author_id=author_id,
                    content=content,
                    created_at=datetime.now(),
                )

                if parent_id is None:
                    depth = 0
                    thread.replies.append(reply)
                else:
                    found = locate_reply_with_depth(
                        thread.replies, parent_id, max_depth
                    )
                    if not found:
                        logfire.warn(
                            "Parent reply not found",
                            thread_id=str(thread_id),
                            parent_id=str(parent_id),
                        )
                        raise ReplyNotFoundError(str(parent_id))
                    parent, parent_depth = found
                    depth = parent_depth + 1
                    if max_depth is not None and depth > max_depth:
                        logfire.warn(
                            "Reply nesting limit reached",
                            thread_id=str(thread_id),
                            parent_id=str(parent_id),
                            max_depth=max_depth,
                        )
                        raise BusinessRuleViolationError(
                            f"Replies cannot be nested deeper than {max_depth} levels"
                        )
                    parent.children.append(reply)

                thread.updated_at = datetime.now()
                await self.thread_repository.save(thread)
                logfire.info(
                    "Reply created",
                    thread_id=str(thread_id),
                    reply_id=str(reply.id),
                    depth=depth,
                )
                return reply, depth

    async def _load_for_update(self, thread_id: ThreadId) -> Thread:
        """Load a thread that is about to be modified.

        Raises:
            ThreadNotFoundError: If thread not found
        """
        thread = await self.thread_repository.find_by_id(
            thread_id, for_update=self.thread_locks.enabled
        )
        if not thread:
            logfire.warn("Thread not found", thread_id=str(thread_id))
            raise ThreadNotFoundError(str(thread_id))
        return thread
