"""Asynchronous mutual exclusion with scoped release.

``AsyncLock`` suspends the waiting task, never the event loop thread.
Acquisition returns a ``LockReleaser`` whose scope exit frees the permit,
so release happens on every path out of the guarded block, including
exceptions and task cancellation.

Usage:
    lock = AsyncLock()

    with await lock.acquire():
        await do_network_call()

    # or
    async with lock:
        await do_network_call()

The lock is not reentrant: a task that acquires twice without releasing
waits on itself forever. Waiters are resumed in whatever order
``asyncio.Semaphore`` wakes them; no fairness is promised.
"""

from __future__ import annotations

import asyncio
from types import TracebackType
from typing import Optional, Type


class LockReleaser:
    """Handle for one successful acquisition of an ``AsyncLock``.

    Must be released exactly once; the context manager protocols do it on
    scope exit. Releasing twice is a usage error and is not checked.
    """

    __slots__ = ("_lock",)

    def __init__(self, lock: AsyncLock) -> None:
        self._lock = lock

    def release(self) -> None:
        """Free the permit, letting one waiter proceed."""
        self._lock._semaphore.release()

    def __enter__(self) -> LockReleaser:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.release()

    async def __aenter__(self) -> LockReleaser:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.release()


class AsyncLock:
    """Single-permit async mutex.

    Each instance owns its own permit; separate locks never contend.
    """

    def __init__(self) -> None:
        """Initialize with the permit free."""
        self._semaphore = asyncio.Semaphore(1)
        # Releaser holds no per-acquisition state, so one instance is reused
        self._releaser = LockReleaser(self)

    async def acquire(self) -> LockReleaser:
        """Wait for the permit and return the handle that releases it.

        When the permit is free the semaphore is taken without yielding to
        the event loop. A task cancelled while waiting never holds the
        permit.
        """
        await self._semaphore.acquire()
        return self._releaser

    def locked(self) -> bool:
        """Return True if the permit is currently held."""
        return self._semaphore.locked()

    async def __aenter__(self) -> LockReleaser:
        return await self.acquire()

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self._releaser.release()
