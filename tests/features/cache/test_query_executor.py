"""Tests for the cached query executor."""

from unittest.mock import AsyncMock

import pytest

from bizadmin.core.exceptions.infrastructure import (
    CacheError,
    NetworkUnavailableError,
    UpstreamQueryError,
)
from bizadmin.features.cache.adapters.memory_adapter import MemoryCacheStore
from bizadmin.features.cache.services.query_executor import (
    OFFLINE_MESSAGE,
    STALE_OFFLINE_MESSAGE,
    ErrorKind,
    QueryError,
    QueryExecutor,
    QueryResult,
)


class TestQueryResult:
    def test_ok(self):
        result = QueryResult(data=[1])
        assert result.ok
        assert not result.is_stale
        result.raise_for_error()

    def test_stale(self):
        result = QueryResult(data=[1], error=QueryError(ErrorKind.NETWORK, "offline"), from_cache=True)
        assert result.is_stale
        assert not result.ok

    def test_raise_for_error_maps_kind(self):
        with pytest.raises(NetworkUnavailableError):
            QueryResult(error=QueryError(ErrorKind.NETWORK, "offline")).raise_for_error()
        with pytest.raises(UpstreamQueryError):
            QueryResult(error=QueryError(ErrorKind.UPSTREAM, "bad filter")).raise_for_error()

    def test_error_from_exception(self):
        error = QueryError.from_exception(UpstreamQueryError("denied", details={"code": "42501"}))
        assert error.kind == ErrorKind.UPSTREAM
        assert error.details == {"code": "42501"}


class TestQueryExecutor:
    @pytest.mark.asyncio
    async def test_miss_fetches_and_caches(self, executor, memory_cache):
        fetch = AsyncMock(return_value=["acme"])

        result = await executor.execute(fetch, "companies__page0")

        assert result.data == ["acme"]
        assert not result.from_cache
        assert (await memory_cache.get("companies__page0")).data == ["acme"]
        assert executor.metrics.misses == 1

    @pytest.mark.asyncio
    async def test_hit_skips_fetch(self, executor):
        fetch = AsyncMock(return_value=["acme"])
        await executor.execute(fetch, "k")

        result = await executor.execute(fetch, "k")

        assert result.from_cache
        assert result.data == ["acme"]
        assert fetch.await_count == 1
        assert executor.metrics.hits == 1

    @pytest.mark.asyncio
    async def test_force_refresh_bypasses_cache(self, executor):
        fetch = AsyncMock(side_effect=[["old"], ["new"]])
        await executor.execute(fetch, "k")

        result = await executor.execute(fetch, "k", force_refresh=True)

        assert result.data == ["new"]
        assert fetch.await_count == 2

    @pytest.mark.asyncio
    async def test_expired_entry_is_refetched(self, executor, clock):
        fetch = AsyncMock(side_effect=[["old"], ["new"]])
        await executor.execute(fetch, "k")
        clock.advance(601)

        result = await executor.execute(fetch, "k")

        assert result.data == ["new"]

    @pytest.mark.asyncio
    async def test_none_is_not_cached(self, executor, memory_cache):
        fetch = AsyncMock(return_value=None)

        result = await executor.execute(fetch, "k")

        assert result.ok
        assert result.data is None
        assert "k" not in memory_cache

    @pytest.mark.asyncio
    async def test_network_errors_retry_with_backoff(self, executor, recording_sleep):
        fetch = AsyncMock(
            side_effect=[NetworkUnavailableError("down"), NetworkUnavailableError("down"), ["ok"]]
        )

        result = await executor.execute(fetch, "k")

        assert result.data == ["ok"]
        assert fetch.await_count == 3
        assert recording_sleep.delays == [1.0, 2.0]

    @pytest.mark.asyncio
    async def test_network_errors_exhaust_attempts(self, executor, recording_sleep):
        fetch = AsyncMock(side_effect=NetworkUnavailableError("down"))

        result = await executor.execute(fetch, "k")

        assert result.data is None
        assert result.error.kind == ErrorKind.NETWORK
        assert fetch.await_count == 3
        assert executor.metrics.errors == 1

    @pytest.mark.asyncio
    async def test_upstream_errors_are_not_retried(self, executor, recording_sleep):
        fetch = AsyncMock(side_effect=UpstreamQueryError("permission denied", status_code=401))

        result = await executor.execute(fetch, "k")

        assert result.error.kind == ErrorKind.UPSTREAM
        assert result.error.message == "permission denied"
        assert fetch.await_count == 1
        assert recording_sleep.delays == []

    @pytest.mark.asyncio
    async def test_programming_errors_propagate(self, executor):
        fetch = AsyncMock(side_effect=KeyError("id"))

        with pytest.raises(KeyError):
            await executor.execute(fetch, "k")

    @pytest.mark.asyncio
    async def test_critical_data_falls_back_to_stale(self, executor, clock):
        await executor.execute(AsyncMock(return_value={"total": 5}), "dashboard")
        clock.advance(601)

        result = await executor.execute(
            AsyncMock(side_effect=UpstreamQueryError("boom")), "dashboard", critical_data=True
        )

        assert result.data == {"total": 5}
        assert result.from_cache
        assert result.is_stale
        assert result.error.message == "boom"

    @pytest.mark.asyncio
    async def test_non_critical_data_does_not_fall_back(self, executor, clock):
        await executor.execute(AsyncMock(return_value=[1]), "k")
        clock.advance(601)

        result = await executor.execute(AsyncMock(side_effect=UpstreamQueryError("boom")), "k")

        assert result.data is None
        assert result.error is not None

    @pytest.mark.asyncio
    async def test_offline_skips_fetch(self, memory_cache, recording_sleep, connectivity, network):
        network.online = False
        executor = QueryExecutor(memory_cache, connectivity=connectivity, sleep=recording_sleep)
        fetch = AsyncMock(return_value=[1])

        result = await executor.execute(fetch, "k")

        assert result.error.message == OFFLINE_MESSAGE
        assert result.error.is_network
        fetch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_offline_critical_serves_stale(
        self, memory_cache, recording_sleep, connectivity, network, clock
    ):
        executor = QueryExecutor(memory_cache, connectivity=connectivity, sleep=recording_sleep)
        await executor.execute(AsyncMock(return_value=[1]), "k")
        clock.advance(601)
        network.online = False

        result = await executor.execute(AsyncMock(return_value=[2]), "k", critical_data=True)

        assert result.data == [1]
        assert result.error.message == STALE_OFFLINE_MESSAGE

    @pytest.mark.asyncio
    async def test_offline_still_serves_fresh_cache(
        self, memory_cache, recording_sleep, connectivity, network
    ):
        executor = QueryExecutor(memory_cache, connectivity=connectivity, sleep=recording_sleep)
        await executor.execute(AsyncMock(return_value=[1]), "k")
        network.online = False

        result = await executor.execute(AsyncMock(return_value=[2]), "k")

        assert result.ok
        assert result.data == [1]

    @pytest.mark.asyncio
    async def test_invalidate_prefix(self, executor, memory_cache):
        await executor.execute(AsyncMock(return_value=1), "companies__page0")
        await executor.execute(AsyncMock(return_value=2), "forms__page0")

        removed = await executor.invalidate("companies_")

        assert removed == 1
        assert memory_cache.keys() == ["forms__page0"]

    def test_rejects_zero_attempts(self, memory_cache):
        with pytest.raises(ValueError):
            QueryExecutor(memory_cache, max_attempts=0)


class TestPersistentTier:
    @pytest.fixture
    def persistent(self, clock):
        return MemoryCacheStore(ttl_seconds=600, clock=clock)

    @pytest.fixture
    def two_tier(self, memory_cache, persistent, recording_sleep):
        return QueryExecutor(memory_cache, persistent_cache=persistent, sleep=recording_sleep)

    @pytest.mark.asyncio
    async def test_writes_both_tiers(self, two_tier, memory_cache, persistent):
        await two_tier.execute(AsyncMock(return_value=[1]), "k")

        assert "k" in memory_cache
        assert "k" in persistent

    @pytest.mark.asyncio
    async def test_persistent_hit_is_promoted(self, two_tier, memory_cache, persistent):
        await persistent.set("k", [1])
        fetch = AsyncMock(return_value=[2])

        result = await two_tier.execute(fetch, "k")

        assert result.data == [1]
        assert result.from_cache
        fetch.assert_not_awaited()
        assert (await memory_cache.get("k")).data == [1]

    @pytest.mark.asyncio
    async def test_persistent_failures_are_tolerated(self, memory_cache, recording_sleep):
        broken = AsyncMock()
        broken.get.side_effect = CacheError("redis down")
        broken.set.side_effect = CacheError("redis down")
        executor = QueryExecutor(memory_cache, persistent_cache=broken, sleep=recording_sleep)

        result = await executor.execute(AsyncMock(return_value=[1]), "k")

        assert result.data == [1]
        assert "k" in memory_cache

    @pytest.mark.asyncio
    async def test_clear_tolerates_persistent_failure(self, memory_cache, recording_sleep):
        broken = AsyncMock()
        broken.clear.side_effect = CacheError("redis down")
        executor = QueryExecutor(memory_cache, persistent_cache=broken, sleep=recording_sleep)
        await memory_cache.set("k", [1])

        await executor.clear()

        assert "k" not in memory_cache
        broken.clear.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_stale_from_persistent_tier(self, two_tier, persistent, clock):
        await persistent.set("k", [1])
        clock.advance(601)

        result = await two_tier.execute(
            AsyncMock(side_effect=UpstreamQueryError("boom")), "k", critical_data=True
        )

        assert result.data == [1]
        assert result.is_stale
