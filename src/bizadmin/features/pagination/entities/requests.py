"""List query state entities."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from ....config.constants import DEFAULT_PAGE_SIZE

ALL_STATUSES = "all"


class SortOrder(str, Enum):
    """Sort direction on the creation date."""

    ASC = "asc"
    DESC = "desc"

    @property
    def ascending(self) -> bool:
        return self == SortOrder.ASC


@dataclass(frozen=True)
class ListQueryState:
    """Search text, filter, sort and page of one list screen.

    Immutable; the controller swaps in a new state for every change.
    """

    search_text: str = ""
    status_filter: Optional[str] = None
    sort_order: SortOrder = SortOrder.DESC
    page_index: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        if self.page_index < 0:
            raise ValueError("page_index must be >= 0")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")

    @property
    def offset(self) -> int:
        return self.page_index * self.page_size

    @property
    def range_end(self) -> int:
        """Inclusive index of the last row on this page."""
        return self.offset + self.page_size - 1

    @property
    def normalized_search(self) -> str:
        return self.search_text.strip().lower()

    @property
    def status_key(self) -> str:
        return self.status_filter or ALL_STATUSES

    def reset_page(self) -> "ListQueryState":
        return replace(self, page_index=0)

    def next_page(self) -> "ListQueryState":
        return replace(self, page_index=self.page_index + 1)

    def with_page(self, page_index: int) -> "ListQueryState":
        return replace(self, page_index=page_index)
