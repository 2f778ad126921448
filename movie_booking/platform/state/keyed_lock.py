"""
Keyed Lock

In-process mutual exclusion scoped by a string key (one lock per screening).
Callers holding different keys never block each other.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Dict

import anyio

from movie_booking.platform.logging.loguru_io import Logger


class KeyedLock:
    """
    Lazily creates one anyio.Lock per key and drops it once the last holder
    or waiter leaves, so the map only holds keys in use.

    Locks are not reentrant: a task holding `key` must not call `hold(key)`
    again on the same instance.
    """

    def __init__(self, *, name: str = 'lock') -> None:
        self._name = name
        self._locks: Dict[str, anyio.Lock] = {}
        self._users: Dict[str, int] = {}

    def _acquire_ref(self, key: str) -> anyio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = anyio.Lock()
            self._locks[key] = lock
        self._users[key] = self._users.get(key, 0) + 1
        return lock

    def _release_ref(self, key: str) -> None:
        remaining = self._users[key] - 1
        if remaining:
            self._users[key] = remaining
            return
        del self._users[key]
        del self._locks[key]

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        lock = self._acquire_ref(key)
        try:
            if lock.locked():
                Logger.base.debug(f'⏳ [LOCK] {self._name}:{key} busy, waiting')
            async with lock:
                yield
        finally:
            self._release_ref(key)

    def locked(self, key: str) -> bool:
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        return len(self._locks)
