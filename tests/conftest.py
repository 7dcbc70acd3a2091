"""Pytest configuration and fixtures for bizadmin tests."""

from typing import Callable

import httpx
import pytest

from bizadmin.features.cache.adapters.memory_adapter import MemoryCacheStore
from bizadmin.features.cache.services.query_executor import QueryExecutor
from bizadmin.features.connectivity.services.connectivity_monitor import ConnectivityMonitor
from bizadmin.features.database.services.database_client import DatabaseClient

from tests.helpers import FakeClock, FakeNetwork, RecordingSleep


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_cache(clock):
    return MemoryCacheStore(ttl_seconds=600, max_entries=300, clock=clock)


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def executor(memory_cache, recording_sleep):
    return QueryExecutor(memory_cache, sleep=recording_sleep)


@pytest.fixture
def network():
    return FakeNetwork()


@pytest.fixture
def connectivity(network):
    return ConnectivityMonitor(network.probe, timeout=1.0)


@pytest.fixture
def make_db() -> Callable[[Callable[[httpx.Request], httpx.Response]], DatabaseClient]:
    """Build a ``DatabaseClient`` whose requests are answered by ``handler``."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> DatabaseClient:
        return DatabaseClient(
            "https://project.example.co",
            "anon-key",
            transport=httpx.MockTransport(handler),
        )

    return factory
