from .requests import ALL_STATUSES, ListQueryState, SortOrder
from .responses import PagedResult

__all__ = ["ALL_STATUSES", "ListQueryState", "SortOrder", "PagedResult"]
