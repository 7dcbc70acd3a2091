"""Redis-backed persistent cache tier for bizadmin.

Entries survive process restarts and are consulted when the in-memory tier
misses. Values are pickled ``CacheEntry`` objects, so they must only ever be
read back by this application.
"""

import logging
import pickle
import re
import time
from typing import Any, Callable, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from ....config.constants import CacheDefaults
from ....core.exceptions.infrastructure import CacheError, CacheSerializationError
from ..entities.cache_entry import CacheEntry

logger = logging.getLogger(__name__)


class RedisCacheStore:
    """``CacheStore`` persisted in Redis under a key namespace.

    Redis keeps each key for a multiple of the TTL so that stale entries are
    still available to the critical-data fallback.
    """

    def __init__(
        self,
        client: redis.Redis,
        namespace: str = CacheDefaults.PERSISTENT_NAMESPACE,
        ttl_seconds: float = CacheDefaults.TTL_SECONDS,
        retention_factor: int = 6,
        clock: Callable[[], float] = time.time,
    ):
        self.client = client
        self.namespace = namespace
        self.ttl_seconds = ttl_seconds
        self.retention_seconds = int(ttl_seconds * retention_factor)
        self._clock = clock

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> "RedisCacheStore":
        """Create a store with its own connection pool."""
        return cls(redis.from_url(url), **kwargs)

    def _key(self, key: str) -> str:
        return f"{self.namespace}{key}"

    def _pattern(self, prefix: str) -> str:
        # Search text ends up in keys; escape glob metacharacters for SCAN MATCH.
        return re.sub(r"([*?\[\]\\])", r"\\\1", self._key(prefix)) + "*"

    async def get(self, key: str, ttl: Optional[float] = None) -> Optional[CacheEntry]:
        entry = await self.get_stale(key)
        if entry is None:
            return None

        ttl = self.ttl_seconds if ttl is None else ttl
        if not entry.is_fresh(ttl, now=self._clock()):
            return None
        return entry

    async def get_stale(self, key: str) -> Optional[CacheEntry]:
        try:
            raw = await self.client.get(self._key(key))
        except RedisError as e:
            raise CacheError(f"Failed to read cache key {key}: {e}") from e

        if raw is None:
            return None

        try:
            entry = pickle.loads(raw)
        except (pickle.PickleError, EOFError, AttributeError, ImportError) as e:
            logger.warning(f"Discarding unreadable cache entry {key}: {e}")
            try:
                await self.client.delete(self._key(key))
            except RedisError as delete_error:
                raise CacheError(f"Failed to delete cache key {key}: {delete_error}") from delete_error
            return None

        if not isinstance(entry, CacheEntry):
            return None
        return entry

    async def set(self, key: str, data: Any) -> CacheEntry:
        entry = CacheEntry(key=key, data=data, fetched_at=self._clock())

        try:
            payload = pickle.dumps(entry, protocol=pickle.HIGHEST_PROTOCOL)
        except (pickle.PickleError, TypeError, AttributeError) as e:
            raise CacheSerializationError(
                f"Cannot persist cache entry {key}: {e}",
                details={"key": key},
            ) from e

        try:
            await self.client.set(self._key(key), payload, ex=self.retention_seconds)
        except RedisError as e:
            raise CacheError(f"Failed to write cache key {key}: {e}") from e

        return entry

    async def invalidate(self, prefix: str) -> int:
        """Delete every namespaced key starting with ``prefix`` (SCAN + DELETE)."""
        removed = 0
        try:
            async for redis_key in self.client.scan_iter(match=self._pattern(prefix)):
                removed += await self.client.delete(redis_key)
        except RedisError as e:
            raise CacheError(f"Failed to invalidate prefix {prefix}: {e}") from e

        if removed:
            logger.debug(f"Invalidated {removed} persistent cache entries with prefix '{prefix}'")
        return removed

    async def clear(self) -> None:
        await self.invalidate("")

    async def close(self) -> None:
        await self.client.aclose()
