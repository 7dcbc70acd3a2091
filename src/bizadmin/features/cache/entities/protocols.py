"""Cache protocols for bizadmin.

``CacheStore`` is the interface handed to the query executor and list
controllers. Implementations are injected, so tests can pass a fake and a
deployment can add a persistent tier without touching callers.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .cache_entry import CacheEntry


@runtime_checkable
class CacheStore(Protocol):
    """Key -> (data, fetched_at) store with TTL reads and prefix invalidation."""

    async def get(self, key: str, ttl: Optional[float] = None) -> Optional[CacheEntry]:
        """Return the entry if it is younger than ``ttl`` (store default when None)."""
        ...

    async def get_stale(self, key: str) -> Optional[CacheEntry]:
        """Return the entry regardless of its age."""
        ...

    async def set(self, key: str, data: Any) -> CacheEntry:
        """Store or overwrite ``key`` stamped with the current time."""
        ...

    async def invalidate(self, prefix: str) -> int:
        """Remove every key starting with ``prefix``; return how many were removed."""
        ...

    async def clear(self) -> None:
        """Remove every entry."""
        ...
