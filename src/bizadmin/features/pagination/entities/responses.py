"""Paged result entity."""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of rows and, when the backend reported it, the exact total."""

    items: List[T] = field(default_factory=list)
    total_count: Optional[int] = None
    # Set by sources that merge several tables and know better than the totals.
    next_available: Optional[bool] = None

    @property
    def count(self) -> int:
        return len(self.items)

    def has_more(self, offset: int, page_size: int) -> bool:
        """Whether rows exist past this page when it starts at ``offset``."""
        if self.next_available is not None:
            return self.next_available
        if len(self.items) < page_size:
            return False
        if self.total_count is None:
            return True
        return offset + len(self.items) < self.total_count
