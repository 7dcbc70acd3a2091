"""Fakes and response builders shared by the test modules."""

import json
from typing import Any, Dict, List, Optional

import httpx


class FakeClock:
    """Manually advanced wall clock (seconds since epoch)."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeNetwork:
    """Probe whose answer the test flips."""

    def __init__(self, online: bool = True):
        self.online = online
        self.checks = 0

    async def probe(self) -> bool:
        self.checks += 1
        return self.online


class RecordingSleep:
    """Stand-in for ``asyncio.sleep`` that returns immediately and records delays."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def json_response(
    data: Any,
    status_code: int = 200,
    content_range: Optional[str] = None,
) -> httpx.Response:
    headers: Dict[str, str] = {"Content-Type": "application/json"}
    if content_range is not None:
        headers["Content-Range"] = content_range
    return httpx.Response(status_code, content=json.dumps(data).encode(), headers=headers)


def count_response(total: int) -> httpx.Response:
    """Response to a HEAD ``count=exact`` query."""
    return httpx.Response(200, headers={"Content-Range": f"*/{total}"})


def query_params(request: httpx.Request) -> Dict[str, List[str]]:
    """Query string of ``request`` as name -> list of values."""
    params: Dict[str, List[str]] = {}
    for name, value in request.url.params.multi_items():
        params.setdefault(name, []).append(value)
    return params
