"""Cache entry entity.

A cached query result plus the wall-clock time it was fetched. Freshness is
judged by the reader against a TTL, so the same entry can be live for one
caller and stale for another.
"""

import time
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class CacheEntry:
    """Cached value with its fetch timestamp (seconds since epoch)."""

    key: str
    data: Any
    fetched_at: float

    def age(self, now: Optional[float] = None) -> float:
        """Seconds elapsed since the value was fetched."""
        return (now if now is not None else time.time()) - self.fetched_at

    def is_fresh(self, ttl_seconds: float, now: Optional[float] = None) -> bool:
        """Check whether the entry is younger than the TTL."""
        return self.age(now) < ttl_seconds
