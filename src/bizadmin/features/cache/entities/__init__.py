"""Cache entities and protocols."""

from .cache_entry import CacheEntry
from .metrics import CacheMetrics
from .protocols import CacheStore

__all__ = ["CacheEntry", "CacheMetrics", "CacheStore"]
