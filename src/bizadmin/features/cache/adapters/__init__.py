"""Cache store implementations."""

from .memory_adapter import MemoryCacheStore
from .redis_adapter import RedisCacheStore

__all__ = ["MemoryCacheStore", "RedisCacheStore"]
