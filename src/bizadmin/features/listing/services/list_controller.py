"""Paginated list screen controller.

Owns the query state of one list screen (search text, status filter, sort
order, page) and the rows loaded so far. Every page goes through the
``QueryExecutor``, keyed by ``build_cache_key``.

Responses can arrive out of order: a slow request for an old search term may
finish after the request for the current one. Each request takes a new
generation number and only the latest generation may touch state; older
responses are dropped (they still land in the cache).
"""

import asyncio
import logging
from dataclasses import replace
from typing import Awaitable, Callable, Generic, List, Optional, TypeVar

from ....config.constants import DEFAULT_PAGE_SIZE, SearchDefaults
from ...cache.services.query_executor import ErrorKind, QueryExecutor, QueryResult
from ...connectivity.services.connectivity_monitor import ConnectivityMonitor
from ...pagination.entities.requests import ListQueryState, SortOrder
from ...pagination.entities.responses import PagedResult
from ...pagination.utils.cache_keys import build_cache_key, search_prefix
from ...pagination.utils.search import SearchPlan, plan_search
from ..entities.protocols import ListSource
from ..entities.screen_state import (
    OFFLINE_BANNER,
    OFFLINE_REFRESH_MESSAGE,
    SEARCH_UNAVAILABLE_MESSAGE,
    STALE_DATA_NOTICE,
    ScreenState,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET = object()


def _same_query(a: ListQueryState, b: ListQueryState) -> bool:
    return replace(a, page_index=0) == replace(b, page_index=0)


class ListController(Generic[T]):
    """State machine behind a searchable, filterable, infinitely scrolling list."""

    def __init__(
        self,
        source: ListSource[T],
        executor: QueryExecutor,
        *,
        connectivity: Optional[ConnectivityMonitor] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        short_debounce: float = SearchDefaults.SHORT_DEBOUNCE_SECONDS,
        long_debounce: float = SearchDefaults.LONG_DEBOUNCE_SECONDS,
        critical_data: bool = False,
        discard_stale_responses: bool = True,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.source = source
        self.executor = executor
        self.connectivity = connectivity
        self.short_debounce = short_debounce
        self.long_debounce = long_debounce
        self.critical_data = critical_data
        self.discard_stale_responses = discard_stale_responses
        self._sleep = sleep

        self.state = ListQueryState(page_size=page_size)
        # Query behind ``items``. ``state`` runs ahead of it while a change is pending or failed.
        self._loaded_state = self.state
        self.items: List[T] = []
        self.total_count: Optional[int] = None
        self.loading = False
        self.loading_more = False
        self.error: Optional[str] = None
        self.error_kind: Optional[ErrorKind] = None
        self.notice: Optional[str] = None
        self.banner: Optional[str] = None

        self._has_loaded = False
        self._exhausted = False
        self._generation = 0
        self._pending_debounce: Optional[asyncio.Task] = None
        self._unsubscribe = (
            connectivity.subscribe(self._on_connectivity_change) if connectivity else None
        )

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def can_load_more(self) -> bool:
        if self._exhausted:
            return False
        if self.total_count is not None and self._has_loaded and len(self.items) >= self.total_count:
            return False
        return True

    @property
    def screen_state(self) -> ScreenState:
        if self.items:
            return ScreenState.LOADED_WITH_DATA
        if self.error is not None:
            return ScreenState.ERROR
        if self.loading or not self._has_loaded:
            return ScreenState.INITIAL_LOADING
        return ScreenState.LOADED_EMPTY

    def plan(self, text: str) -> SearchPlan:
        return plan_search(
            text,
            self.source.search_fields,
            short_debounce=self.short_debounce,
            long_debounce=self.long_debounce,
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def set_search_text(self, text: str) -> asyncio.Task:
        """Schedule a debounced search; a newer call cancels a pending one.

        Must be called from a running event loop. The returned task finishes
        once the search has been applied (or abandoned).
        """
        if self._pending_debounce is not None and not self._pending_debounce.done():
            self._pending_debounce.cancel()

        self.state = replace(self.state, search_text=text, page_index=0)
        task = asyncio.ensure_future(self._debounced_search(self.state))
        self._pending_debounce = task
        return task

    async def apply_filter(self, status=_UNSET, sort_order: Optional[SortOrder] = None) -> bool:
        """Change status filter and/or sort order and reload from page 0."""
        self._cancel_pending_debounce()

        changes = {"page_index": 0}
        if status is not _UNSET:
            changes["status_filter"] = status
        if sort_order is not None:
            changes["sort_order"] = sort_order
        self.state = replace(self.state, **changes)

        return await self._load(self.state, append=False, force_refresh=False)

    async def refresh(self, force: bool = True) -> bool:
        """Reload page 0, replacing current rows."""
        if await self._is_offline():
            self._set_offline_error(OFFLINE_REFRESH_MESSAGE)
            return False

        self.state = self.state.reset_page()
        return await self._load(self.state, append=False, force_refresh=force)

    async def load_more(self) -> bool:
        """Append the next page. Returns False when nothing was requested."""
        if self.loading or self.loading_more or not self.can_load_more:
            return False

        if await self._is_offline():
            self._set_offline_error(OFFLINE_REFRESH_MESSAGE)
            return False

        if self._has_loaded:
            return await self._load(self._loaded_state.next_page(), append=True, force_refresh=False)
        return await self._load(self.state.reset_page(), append=False, force_refresh=False)

    def dismiss_banner(self) -> None:
        self.banner = None

    async def close(self) -> None:
        """Cancel pending work and stop listening for connectivity changes."""
        self._cancel_pending_debounce()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _cancel_pending_debounce(self) -> None:
        if self._pending_debounce is not None and not self._pending_debounce.done():
            self._pending_debounce.cancel()
        self._pending_debounce = None

    async def _debounced_search(self, state: ListQueryState) -> None:
        plan = self.plan(state.search_text)
        if plan.debounce_seconds > 0:
            await self._sleep(plan.debounce_seconds)

        # Past the debounce this search can no longer be cancelled, only superseded.
        if self._pending_debounce is asyncio.current_task():
            self._pending_debounce = None

        if not plan.is_empty and await self._is_offline():
            self._set_offline_error(SEARCH_UNAVAILABLE_MESSAGE)
            return

        if not plan.is_empty:
            await self.executor.invalidate(search_prefix(self.source.entity, state.search_text))
        await self._load(state, append=False, force_refresh=False, plan=plan)

    async def _is_offline(self) -> bool:
        if self.connectivity is None:
            return False
        return not await self.connectivity.check()

    def _set_offline_error(self, message: str) -> None:
        self.error = message
        self.error_kind = ErrorKind.NETWORK
        self.banner = OFFLINE_BANNER

    async def _load(
        self,
        state: ListQueryState,
        *,
        append: bool,
        force_refresh: bool,
        plan: Optional[SearchPlan] = None,
    ) -> bool:
        self._generation += 1
        generation = self._generation
        plan = plan or self.plan(state.search_text)

        if append:
            self.loading_more = True
        else:
            self.loading = True

        try:
            result = await self.executor.execute(
                lambda: self.source.fetch(state, plan),
                build_cache_key(self.source.entity, state),
                force_refresh=force_refresh,
                critical_data=self.critical_data,
            )
        finally:
            if generation == self._generation:
                self.loading = False
                self.loading_more = False

        if generation != self._generation and self.discard_stale_responses:
            logger.debug(
                f"Discarding {self.source.entity} response for generation {generation}, "
                f"latest is {self._generation}"
            )
            return False

        return self._apply(state, result, append)

    def _apply(self, state: ListQueryState, result: QueryResult, append: bool) -> bool:
        if result.data is None:
            if result.error is not None:
                logger.warning(f"Loading {self.source.entity} failed: {result.error.message}")
                self.error = result.error.message
                self.error_kind = result.error.kind
                if result.error.is_network:
                    self.banner = OFFLINE_BANNER
                return False
            page: PagedResult = PagedResult()
        else:
            page = result.data

        self.error = None
        self.error_kind = None
        if result.is_stale:
            self.notice = STALE_DATA_NOTICE
            if result.error.is_network:
                self.banner = OFFLINE_BANNER
        else:
            self.notice = None

        self.items = self.items + list(page.items) if append else list(page.items)
        self.total_count = page.total_count
        self._loaded_state = state
        if not append or _same_query(state, self.state):
            self.state = state
        self._exhausted = not page.has_more(state.offset, state.page_size)
        self._has_loaded = True
        return True

    def _on_connectivity_change(self, online: bool) -> None:
        if not online:
            self.banner = OFFLINE_BANNER
            return

        self.banner = None
        if self.error_kind == ErrorKind.NETWORK:
            self.error = None
            self.error_kind = None
