"""Process-local reference store."""

import asyncio
import itertools
import time
from collections.abc import Callable

from curabot.models.reference import StoredReference
from curabot.store.base import ReferenceStore


class InMemoryReferenceStore(ReferenceStore):
    """Dict-backed store with monotonic counter ids.

    Contents are lost on restart. ``ttl_seconds=None`` keeps entries for the
    lifetime of the process; otherwise expired entries are dropped when read
    and swept on every write, so unread entries do not accumulate.
    """

    def __init__(
        self,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._counter = itertools.count()
        self._entries: dict[str, tuple[StoredReference, float | None]] = {}
        self._lock = asyncio.Lock()

    async def put(self, url: str, tags: str) -> str:
        async with self._lock:
            now = self._clock()
            self._purge_expired(now)
            reference_id = str(next(self._counter))
            expires_at = now + self._ttl if self._ttl is not None else None
            self._entries[reference_id] = (
                StoredReference(id=reference_id, url=url, tags=tags),
                expires_at,
            )
            return reference_id

    async def get(self, reference_id: str) -> StoredReference | None:
        async with self._lock:
            entry = self._entries.get(reference_id)
            if entry is None:
                return None
            reference, expires_at = entry
            if expires_at is not None and self._clock() >= expires_at:
                del self._entries[reference_id]
                return None
            return reference

    def _purge_expired(self, now: float) -> None:
        # Caller holds the lock
        if self._ttl is None:
            return
        expired = [
            reference_id
            for reference_id, (_, expires_at) in self._entries.items()
            if expires_at is not None and now >= expires_at
        ]
        for reference_id in expired:
            del self._entries[reference_id]

    def __len__(self) -> int:
        return len(self._entries)
