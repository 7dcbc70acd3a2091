"""In-memory cache store for bizadmin.

Process-wide dictionary keyed by query cache key. Entries are judged fresh
against a TTL on read; expired entries stay around so the query executor can
fall back to them when the network fails, and are only dropped by capacity
eviction, prefix invalidation or ``purge_expired()``.
"""

import logging
import math
import time
from typing import Any, Callable, Dict, List, Optional

from ....config.constants import CacheDefaults
from ..entities.cache_entry import CacheEntry

logger = logging.getLogger(__name__)


class MemoryCacheStore:
    """In-memory ``CacheStore`` with TTL reads and oldest-first eviction.

    No locking: all access happens on a single event loop and no method
    awaits between reading and writing the dictionary.
    """

    def __init__(
        self,
        ttl_seconds: float = CacheDefaults.TTL_SECONDS,
        max_entries: int = CacheDefaults.MAX_ENTRIES,
        eviction_fraction: float = CacheDefaults.EVICTION_FRACTION,
        clock: Callable[[], float] = time.time,
    ):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")

        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self.eviction_fraction = eviction_fraction
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    async def get(self, key: str, ttl: Optional[float] = None) -> Optional[CacheEntry]:
        entry = self._entries.get(key)
        if entry is None:
            return None

        ttl = self.ttl_seconds if ttl is None else ttl
        if not entry.is_fresh(ttl, now=self._clock()):
            logger.debug(f"Cache entry expired: {key}")
            return None

        return entry

    async def get_stale(self, key: str) -> Optional[CacheEntry]:
        return self._entries.get(key)

    async def set(self, key: str, data: Any) -> CacheEntry:
        entry = CacheEntry(key=key, data=data, fetched_at=self._clock())
        self._entries[key] = entry

        if len(self._entries) > self.max_entries:
            self._evict_oldest()

        return entry

    async def invalidate(self, prefix: str) -> int:
        """Remove all keys starting with ``prefix``."""
        doomed = [key for key in self._entries if key.startswith(prefix)]
        for key in doomed:
            del self._entries[key]

        if doomed:
            logger.debug(f"Invalidated {len(doomed)} cache entries with prefix '{prefix}'")
        return len(doomed)

    async def clear(self) -> None:
        self._entries.clear()

    async def purge_expired(self, ttl: Optional[float] = None) -> int:
        """Drop entries older than ``ttl``. Returns the number removed."""
        ttl = self.ttl_seconds if ttl is None else ttl
        now = self._clock()
        expired = [key for key, entry in self._entries.items() if not entry.is_fresh(ttl, now=now)]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def keys(self) -> List[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def _evict_oldest(self) -> None:
        count = math.ceil(len(self._entries) * self.eviction_fraction)
        oldest = sorted(self._entries.values(), key=lambda entry: entry.fetched_at)[:count]
        for entry in oldest:
            del self._entries[entry.key]
        logger.debug(f"Evicted {len(oldest)} oldest cache entries")
