"""Tests for the Redis cache store against an in-process fake client."""

import fnmatch
import pickle
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from bizadmin.core.exceptions.infrastructure import CacheError, CacheSerializationError
from bizadmin.features.cache.adapters.redis_adapter import RedisCacheStore


class FakeRedis:
    """Subset of ``redis.asyncio.Redis`` used by the store."""

    def __init__(self):
        self.values = {}
        self.expiry = {}

    async def get(self, key):
        return self.values.get(key)

    async def set(self, key, value, ex=None):
        self.values[key] = value
        self.expiry[key] = ex
        return True

    async def delete(self, *keys):
        removed = 0
        for key in keys:
            if key in self.values:
                del self.values[key]
                removed += 1
        return removed

    async def scan_iter(self, match=None):
        for key in list(self.values):
            if match is None or fnmatch.fnmatchcase(key, match):
                yield key

    async def aclose(self):
        pass


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def store(fake_redis, clock):
    return RedisCacheStore(fake_redis, namespace="test:", ttl_seconds=600, clock=clock)


class TestRedisCacheStore:
    @pytest.mark.asyncio
    async def test_round_trip_with_retention(self, store, fake_redis):
        await store.set("companies__page0", [{"id": "1"}])

        assert "test:companies__page0" in fake_redis.values
        assert fake_redis.expiry["test:companies__page0"] == 3600
        entry = await store.get("companies__page0")
        assert entry.data == [{"id": "1"}]

    @pytest.mark.asyncio
    async def test_expired_is_stale_only(self, store, clock):
        await store.set("k", 1)
        clock.advance(601)

        assert await store.get("k") is None
        assert (await store.get_stale("k")).data == 1

    @pytest.mark.asyncio
    async def test_unreadable_entry_is_discarded(self, store, fake_redis):
        fake_redis.values["test:k"] = b"not a pickle"

        assert await store.get_stale("k") is None
        assert "test:k" not in fake_redis.values

    @pytest.mark.asyncio
    async def test_failed_discard_becomes_cache_error(self, store, fake_redis):
        fake_redis.values["test:k"] = b"not a pickle"
        fake_redis.delete = AsyncMock(side_effect=RedisConnectionError("connection reset"))

        with pytest.raises(CacheError):
            await store.get_stale("k")

    @pytest.mark.asyncio
    async def test_foreign_object_is_ignored(self, store, fake_redis):
        fake_redis.values["test:k"] = pickle.dumps({"not": "an entry"})

        assert await store.get_stale("k") is None

    @pytest.mark.asyncio
    async def test_unpicklable_value(self, store):
        with pytest.raises(CacheSerializationError):
            await store.set("k", lambda: None)

    @pytest.mark.asyncio
    async def test_invalidate_prefix(self, store, fake_redis):
        await store.set("companies__page0", 1)
        await store.set("companies__page1", 2)
        await store.set("forms__page0", 3)

        removed = await store.invalidate("companies_")

        assert removed == 2
        assert list(fake_redis.values) == ["test:forms__page0"]

    @pytest.mark.asyncio
    async def test_clear_only_removes_namespace(self, store, fake_redis):
        fake_redis.values["other:key"] = b"x"
        await store.set("a", 1)

        await store.clear()

        assert list(fake_redis.values) == ["other:key"]

    def test_pattern_escapes_glob_characters(self, store):
        assert store._pattern("companies_a*b[1]?") == r"test:companies_a\*b\[1\]\?*"

    @pytest.mark.asyncio
    async def test_redis_failure_becomes_cache_error(self, clock):
        client = AsyncMock()
        client.get.side_effect = RedisConnectionError("refused")
        store = RedisCacheStore(client, clock=clock)

        with pytest.raises(CacheError):
            await store.get("k")
