"""Network connectivity awareness.

Only a definite "offline" answer from the probe is trusted. A probe that
times out or blows up is treated as online so that a flaky check never
blocks a query that might still succeed.
"""

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional

import httpx

logger = logging.getLogger(__name__)

Probe = Callable[[], Awaitable[bool]]
Listener = Callable[[bool], None]


class ConnectivityMonitor:
    """Tracks whether the backend is reachable and notifies listeners on change."""

    def __init__(self, probe: Probe, *, timeout: float = 3.0):
        self._probe = probe
        self.timeout = timeout
        self._is_online: Optional[bool] = None
        self._listeners: List[Listener] = []

    @property
    def is_online(self) -> Optional[bool]:
        """Last known state; None until the first check."""
        return self._is_online

    async def check(self) -> bool:
        """Run the probe and return True unless it definitely reports offline."""
        try:
            online = bool(await asyncio.wait_for(self._probe(), timeout=self.timeout))
        except asyncio.TimeoutError:
            logger.warning(f"Connectivity probe timed out after {self.timeout}s, assuming online")
            online = True
        except Exception as e:
            logger.warning(f"Connectivity probe failed, assuming online: {e}")
            online = True

        self.update(online)
        return online

    def update(self, online: bool) -> None:
        """Record a new state, e.g. pushed by a platform network event."""
        previous = self._is_online
        self._is_online = online
        if previous == online:
            return

        logger.info(f"Connectivity changed: {'online' if online else 'offline'}")
        for listener in list(self._listeners):
            listener(online)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


def http_probe(
    url: str,
    *,
    timeout: float = 3.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Probe:
    """Build a probe that sends ``HEAD url``; any HTTP response means online."""

    async def probe() -> bool:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            try:
                await client.head(url)
            except httpx.TransportError as e:
                logger.debug(f"Connectivity probe to {url} failed: {e}")
                return False
        return True

    return probe
