"""
In-memory CacheStore — one dict behind one lock, scoped to the process.

A fresh process starts empty; separate processes never share entries.
"""

import logging
import threading
import time
from typing import Any, Callable

from src.domain.cache_store import DEFAULT_TTL_SECONDS, CacheEntry, CacheStore

log = logging.getLogger(__name__)


class InMemoryCacheStore(CacheStore):

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.stored_at >= self._ttl:
            log.debug("cache key=%s expired (age %.0fs)", key, self._clock() - entry.stored_at)
            return None
        return entry.value

    def get_stale(self, key: str) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
        return entry.value if entry is not None else None

    def set(self, key: str, value: Any) -> None:
        entry = CacheEntry(key=key, value=value, stored_at=self._clock())
        with self._lock:
            self._entries[key] = entry

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
