from .cache_keys import build_cache_key, search_prefix
from .search import SearchMode, SearchPlan, plan_search

__all__ = ["build_cache_key", "search_prefix", "SearchMode", "SearchPlan", "plan_search"]
