"""Protocols for list data sources."""

from typing import Protocol, Sequence, TypeVar, runtime_checkable

from ...pagination.entities.requests import ListQueryState
from ...pagination.entities.responses import PagedResult
from ...pagination.utils.search import SearchPlan

T = TypeVar("T", covariant=True)


@runtime_checkable
class ListSource(Protocol[T]):
    """Fetches one page of one entity.

    ``entity`` prefixes every cache key for this source, so it must be unique
    per distinct row set (e.g. include a company id when scoped to one).
    """

    entity: str
    search_fields: Sequence[str]

    async def fetch(self, state: ListQueryState, plan: SearchPlan) -> PagedResult[T]:
        ...
