"""Two-tier query cache.

Provides the ``CacheStore`` protocol, memory and Redis stores, and the
``QueryExecutor`` that runs fetches through them.
"""

from .entities import CacheEntry, CacheMetrics, CacheStore
from .adapters import MemoryCacheStore, RedisCacheStore
from .services import ErrorKind, QueryError, QueryExecutor, QueryResult

__all__ = [
    "CacheEntry",
    "CacheMetrics",
    "CacheStore",
    "MemoryCacheStore",
    "RedisCacheStore",
    "ErrorKind",
    "QueryError",
    "QueryExecutor",
    "QueryResult",
]
