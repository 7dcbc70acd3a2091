"""Search planning.

Turns raw search text into a debounce interval and a PostgREST ``or``
filter. Short queries match prefixes and fire sooner; longer ones match
anywhere in the field and wait a little longer for typing to settle.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from ....config.constants import SearchDefaults
from ...database.services.table_query import TableQuery, quote_value


class SearchMode(str, Enum):
    NONE = "none"
    PREFIX = "prefix"
    CONTAINS = "contains"


@dataclass(frozen=True)
class SearchPlan:
    text: str
    mode: SearchMode
    debounce_seconds: float
    fields: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.mode == SearchMode.NONE

    @property
    def pattern(self) -> Optional[str]:
        if self.mode == SearchMode.PREFIX:
            return f"{self.text}%"
        if self.mode == SearchMode.CONTAINS:
            return f"%{self.text}%"
        return None

    def filter_expression(self) -> Optional[str]:
        """``field.ilike.pattern`` terms joined for a PostgREST ``or`` group."""
        pattern = self.pattern
        if pattern is None or not self.fields:
            return None
        value = quote_value(pattern)
        return ",".join(f"{field}.ilike.{value}" for field in self.fields)

    def apply(self, query: TableQuery) -> TableQuery:
        expression = self.filter_expression()
        if expression is not None:
            query.or_(expression)
        return query


def plan_search(
    text: str,
    fields: Sequence[str] = (),
    *,
    short_debounce: float = SearchDefaults.SHORT_DEBOUNCE_SECONDS,
    long_debounce: float = SearchDefaults.LONG_DEBOUNCE_SECONDS,
    min_broad_length: int = SearchDefaults.MIN_BROAD_LENGTH,
) -> SearchPlan:
    """Plan a search for ``text`` over ``fields``.

    Empty text means no filter and no wait. Text shorter than
    ``min_broad_length`` is a prefix match after ``short_debounce``;
    anything longer is a substring match after ``long_debounce``.
    """
    normalized = text.strip().lower()
    if not normalized:
        return SearchPlan(text="", mode=SearchMode.NONE, debounce_seconds=0.0, fields=tuple(fields))

    if len(normalized) < min_broad_length:
        return SearchPlan(normalized, SearchMode.PREFIX, short_debounce, tuple(fields))
    return SearchPlan(normalized, SearchMode.CONTAINS, long_debounce, tuple(fields))
