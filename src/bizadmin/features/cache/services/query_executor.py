"""Cached query execution for bizadmin.

``QueryExecutor.execute`` wraps an async fetch with a cache read, a cache
write, retry with exponential backoff, and a stale fallback for data the
caller marks as critical. Failures are never raised; they come back as a
tagged ``QueryError`` on the ``QueryResult``.

Lookup order:
    1. memory tier (unless ``force_refresh``)
    2. persistent tier, promoted into memory on hit
    3. connectivity probe; offline short-circuits the fetch
    4. ``fetch_fn()`` with retries on transport failures
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Generic, Optional, TypeVar

from ....config.constants import CacheDefaults
from ....core.exceptions.infrastructure import (
    CacheError,
    DatabaseError,
    NetworkUnavailableError,
    UpstreamQueryError,
)
from ..entities.metrics import CacheMetrics
from ..entities.protocols import CacheStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

OFFLINE_MESSAGE = "Network connection unavailable"
STALE_OFFLINE_MESSAGE = "Using stale data due to network being unavailable"


class ErrorKind(str, Enum):
    """Why a query failed."""

    NETWORK = "network"
    UPSTREAM = "upstream"


@dataclass(frozen=True)
class QueryError:
    """Tagged failure attached to a ``QueryResult``."""

    kind: ErrorKind
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: DatabaseError) -> "QueryError":
        kind = ErrorKind.NETWORK if isinstance(exc, NetworkUnavailableError) else ErrorKind.UPSTREAM
        return cls(kind=kind, message=exc.message, details=dict(exc.details))

    @property
    def is_network(self) -> bool:
        return self.kind == ErrorKind.NETWORK

    def to_exception(self) -> DatabaseError:
        if self.is_network:
            return NetworkUnavailableError(self.message, details=self.details)
        return UpstreamQueryError(self.message, details=self.details)


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """Outcome of ``QueryExecutor.execute``.

    ``data`` and ``error`` may both be set: that is stale cached data served
    because the fresh fetch failed.
    """

    data: Optional[T] = None
    error: Optional[QueryError] = None
    from_cache: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_stale(self) -> bool:
        return self.error is not None and self.from_cache

    def raise_for_error(self) -> None:
        """Raise the database exception matching ``error``, if any."""
        if self.error is not None:
            raise self.error.to_exception()


FetchFn = Callable[[], Awaitable[T]]


class QueryExecutor:
    """Run fetches through the cache tiers.

    Args:
        cache: Memory tier, consulted first.
        persistent_cache: Optional second tier (e.g. Redis).
        connectivity: Object with an async ``check() -> bool``; when it
            reports offline no fetch is attempted.
        max_attempts: Total attempts for transport failures.
        backoff_base: Seconds before the first retry; doubles each retry.
        sleep: Awaitable sleep, injectable for tests.
    """

    def __init__(
        self,
        cache: CacheStore,
        *,
        persistent_cache: Optional[CacheStore] = None,
        connectivity: Optional[Any] = None,
        max_attempts: int = 3,
        backoff_base: float = 1.0,
        slow_query_threshold_ms: float = CacheDefaults.SLOW_QUERY_THRESHOLD_MS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        self.cache = cache
        self.persistent_cache = persistent_cache
        self.connectivity = connectivity
        self.max_attempts = max_attempts
        self.backoff_base = backoff_base
        self.slow_query_threshold_ms = slow_query_threshold_ms
        self.metrics = CacheMetrics()
        self._sleep = sleep

    async def execute(
        self,
        fetch_fn: FetchFn,
        cache_key: str,
        *,
        force_refresh: bool = False,
        critical_data: bool = False,
        ttl: Optional[float] = None,
    ) -> QueryResult:
        """Return cached data for ``cache_key`` or fetch, cache and return it."""
        started = time.perf_counter()

        if not force_refresh:
            cached = await self._read_fresh(cache_key, ttl)
            if cached is not None:
                logger.debug(f"Cache hit: {cache_key}")
                self.metrics.record(True, self._elapsed_ms(started))
                return QueryResult(data=cached, from_cache=True)

        if self.connectivity is not None and not await self.connectivity.check():
            logger.warning(f"Network unavailable, skipping fetch for {cache_key}")
            error = QueryError(ErrorKind.NETWORK, OFFLINE_MESSAGE)
            stale_error = QueryError(ErrorKind.NETWORK, STALE_OFFLINE_MESSAGE)
            return await self._fail(cache_key, error, critical_data, started, stale_error=stale_error)

        try:
            data = await self._fetch_with_retry(fetch_fn, cache_key)
        except DatabaseError as e:
            logger.error(f"Query {cache_key} failed: {e.message}")
            return await self._fail(cache_key, QueryError.from_exception(e), critical_data, started)

        elapsed_ms = self._elapsed_ms(started)
        if elapsed_ms > self.slow_query_threshold_ms:
            logger.warning(f"Slow query detected: {cache_key} took {elapsed_ms:.0f}ms")

        if data is not None:
            await self._store(cache_key, data)

        self.metrics.record(False, elapsed_ms)
        return QueryResult(data=data, from_cache=False)

    async def invalidate(self, prefix: str) -> int:
        """Remove keys starting with ``prefix`` from both tiers."""
        removed = await self.cache.invalidate(prefix)
        if self.persistent_cache is not None:
            try:
                removed += await self.persistent_cache.invalidate(prefix)
            except CacheError as e:
                logger.warning(f"Persistent cache invalidation failed for '{prefix}': {e.message}")
        return removed

    async def clear(self) -> None:
        await self.cache.clear()
        if self.persistent_cache is not None:
            try:
                await self.persistent_cache.clear()
            except CacheError as e:
                logger.warning(f"Persistent cache clear failed: {e.message}")

    async def _read_fresh(self, cache_key: str, ttl: Optional[float]) -> Any:
        entry = await self.cache.get(cache_key, ttl)
        if entry is not None:
            return entry.data

        if self.persistent_cache is None:
            return None

        try:
            entry = await self.persistent_cache.get(cache_key, ttl)
        except CacheError as e:
            logger.warning(f"Persistent cache read failed for {cache_key}: {e.message}")
            return None

        if entry is None:
            return None

        logger.debug(f"Promoting {cache_key} from persistent cache")
        await self.cache.set(cache_key, entry.data)
        return entry.data

    async def _read_stale(self, cache_key: str) -> Optional[Any]:
        entry = await self.cache.get_stale(cache_key)
        if entry is None and self.persistent_cache is not None:
            try:
                entry = await self.persistent_cache.get_stale(cache_key)
            except CacheError as e:
                logger.warning(f"Persistent cache read failed for {cache_key}: {e.message}")
        return entry

    async def _store(self, cache_key: str, data: Any) -> None:
        await self.cache.set(cache_key, data)
        if self.persistent_cache is None:
            return
        try:
            await self.persistent_cache.set(cache_key, data)
        except CacheError as e:
            logger.warning(f"Persistent cache write failed for {cache_key}: {e.message}")

    async def _fetch_with_retry(self, fetch_fn: FetchFn, cache_key: str) -> Any:
        attempt = 1
        while True:
            try:
                return await fetch_fn()
            except NetworkUnavailableError as e:
                if attempt >= self.max_attempts:
                    raise
                delay = self.backoff_base * 2 ** (attempt - 1)
                logger.info(
                    f"Retrying {cache_key} in {delay:.1f}s "
                    f"(attempt {attempt + 1}/{self.max_attempts}): {e.message}"
                )
                await self._sleep(delay)
                attempt += 1

    async def _fail(
        self,
        cache_key: str,
        error: QueryError,
        critical_data: bool,
        started: float,
        stale_error: Optional[QueryError] = None,
    ) -> QueryResult:
        self.metrics.record(False, self._elapsed_ms(started), is_error=True)

        if critical_data:
            entry = await self._read_stale(cache_key)
            if entry is not None:
                logger.info(f"Serving stale data for {cache_key}")
                return QueryResult(data=entry.data, error=stale_error or error, from_cache=True)

        return QueryResult(error=error)

    @staticmethod
    def _elapsed_ms(started: float) -> float:
        return (time.perf_counter() - started) * 1000
