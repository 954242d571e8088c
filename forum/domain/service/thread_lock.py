"""Per-thread write serialization.

Every change to a thread is a load-mutate-persist sequence over the whole
aggregate. Two such sequences interleaving on the same thread would let
the second writer silently overwrite the first, so writers take the
thread's lock for the duration. Different threads never contend.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire

from forum.domain.value import ThreadId


class ThreadLockRegistry:
    """Hands out one asyncio.Lock per thread ID.

    Locks are reference counted and dropped as soon as no request holds or
    waits for them, so the registry only grows with the number of threads
    being written concurrently. Shared application-wide.
    """

    def __init__(self, enabled: bool = True) -> None:
        """Initialize lock registry.

        Args:
            enabled: When False, hold() does not serialize anything
        """
        self.enabled = enabled
        self._locks: dict[ThreadId, asyncio.Lock] = {}
        self._holders: dict[ThreadId, int] = {}

    @asynccontextmanager
    async def hold(self, thread_id: ThreadId) -> AsyncIterator[None]:
        """Hold the lock for a thread while the block runs.

        Args:
            thread_id: Thread being written
        """
        if not self.enabled:
            yield
            return

        lock = self._locks.get(thread_id)
        if lock is None:
            lock = self._locks[thread_id] = asyncio.Lock()
        self._holders[thread_id] = self._holders.get(thread_id, 0) + 1

        try:
            if lock.locked():
                logfire.debug("Waiting for thread lock", thread_id=str(thread_id))
            async with lock:
                yield
        finally:
            self._holders[thread_id] -= 1
            if self._holders[thread_id] == 0:
                del self._holders[thread_id]
                del self._locks[thread_id]

    def __len__(self) -> int:
        """Number of threads currently locked or awaited."""
        return len(self._locks)
