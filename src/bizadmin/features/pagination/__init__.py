"""List query state, paged results, search planning and cache keys."""

from .entities import ALL_STATUSES, ListQueryState, PagedResult, SortOrder
from .utils import SearchMode, SearchPlan, build_cache_key, plan_search, search_prefix

__all__ = [
    "ALL_STATUSES",
    "ListQueryState",
    "PagedResult",
    "SortOrder",
    "SearchMode",
    "SearchPlan",
    "build_cache_key",
    "plan_search",
    "search_prefix",
]
