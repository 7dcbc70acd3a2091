"""bizadmin - data layer for a multi-role business administration console.

Provides a two-tier query cache, a cached query executor, a reusable list
screen controller, dashboard aggregation, and an email proxy, all on top of
a hosted PostgREST database.
"""

from .__version__ import __version__

from .config import AppSettings, get_settings, setup_logging

from .core.exceptions import (
    BizAdminError,
    ConfigurationError,
    ValidationError,
    InvalidResetTokenError,
    DatabaseError,
    NetworkUnavailableError,
    UpstreamQueryError,
    CacheError,
    EmailDeliveryError,
)

from .features.cache import (
    CacheEntry,
    CacheStore,
    MemoryCacheStore,
    RedisCacheStore,
    QueryExecutor,
    QueryResult,
    QueryError,
    ErrorKind,
)
from .features.connectivity import ConnectivityMonitor, http_probe
from .features.database import DatabaseClient, TableQuery
from .features.pagination import ListQueryState, PagedResult, SortOrder, plan_search, build_cache_key
from .features.listing import ListController, ListSource, ScreenState

__all__ = [
    "__version__",
    "AppSettings",
    "get_settings",
    "setup_logging",
    "BizAdminError",
    "ConfigurationError",
    "ValidationError",
    "InvalidResetTokenError",
    "DatabaseError",
    "NetworkUnavailableError",
    "UpstreamQueryError",
    "CacheError",
    "EmailDeliveryError",
    "CacheEntry",
    "CacheStore",
    "MemoryCacheStore",
    "RedisCacheStore",
    "QueryExecutor",
    "QueryResult",
    "QueryError",
    "ErrorKind",
    "ConnectivityMonitor",
    "http_probe",
    "DatabaseClient",
    "TableQuery",
    "ListQueryState",
    "PagedResult",
    "SortOrder",
    "plan_search",
    "build_cache_key",
    "ListController",
    "ListSource",
    "ScreenState",
]
