"""Fluent PostgREST query builder.

Builds the query string and headers for a table read::

    query = (
        db.table("company")
        .select("*", count="exact")
        .eq("active", True)
        .order("created_at", ascending=False)
        .range(0, 9)
    )
    response = await query.execute()
"""

from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple

if TYPE_CHECKING:
    from .database_client import DatabaseClient
    from ..entities.query_response import QueryResponse

_RESERVED = set(',.:()" ')


def format_value(value: Any) -> str:
    """Render a Python value the way PostgREST expects it in a filter."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def quote_value(value: Any) -> str:
    """Render a value for use inside ``in.(...)`` or ``or=(...)`` lists."""
    text = format_value(value)
    if isinstance(value, (str, Enum)) and any(ch in _RESERVED for ch in text):
        escaped = text.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return text


class TableQuery:
    """Read query against one table. Every method returns ``self``."""

    def __init__(self, table: str, client: Optional["DatabaseClient"] = None):
        self.table = table
        self._client = client
        self._columns = "*"
        self._count: Optional[str] = None
        self._head = False
        self._filters: List[Tuple[str, str]] = []
        self._order: List[str] = []
        self._range: Optional[Tuple[int, int]] = None
        self._limit: Optional[int] = None
        self._single = False

    def select(self, columns: str = "*", *, count: Optional[str] = None, head: bool = False) -> "TableQuery":
        """Choose columns. ``count="exact"`` asks for a total; ``head`` skips rows."""
        self._columns = columns
        self._count = count
        self._head = head
        return self

    def _filter(self, column: str, operator: str, value: Any) -> "TableQuery":
        self._filters.append((column, f"{operator}.{format_value(value)}"))
        return self

    def eq(self, column: str, value: Any) -> "TableQuery":
        if value is None:
            return self._filter(column, "is", None)
        return self._filter(column, "eq", value)

    def neq(self, column: str, value: Any) -> "TableQuery":
        return self._filter(column, "neq", value)

    def gt(self, column: str, value: Any) -> "TableQuery":
        return self._filter(column, "gt", value)

    def gte(self, column: str, value: Any) -> "TableQuery":
        return self._filter(column, "gte", value)

    def lt(self, column: str, value: Any) -> "TableQuery":
        return self._filter(column, "lt", value)

    def lte(self, column: str, value: Any) -> "TableQuery":
        return self._filter(column, "lte", value)

    def in_(self, column: str, values: Iterable[Any]) -> "TableQuery":
        rendered = ",".join(quote_value(value) for value in values)
        self._filters.append((column, f"in.({rendered})"))
        return self

    def ilike(self, column: str, pattern: str) -> "TableQuery":
        return self._filter(column, "ilike", pattern)

    def or_(self, expression: str) -> "TableQuery":
        """Add a raw PostgREST ``or`` group, e.g. ``name.ilike.%a%,email.ilike.%a%``."""
        self._filters.append(("or", f"({expression})"))
        return self

    def order(self, column: str, ascending: bool = True) -> "TableQuery":
        self._order.append(f"{column}.{'asc' if ascending else 'desc'}")
        return self

    def range(self, start: int, end: int) -> "TableQuery":
        """Inclusive row range, e.g. ``range(0, 9)`` for the first ten rows."""
        if start < 0 or end < start:
            raise ValueError(f"Invalid range {start}-{end}")
        self._range = (start, end)
        return self

    def limit(self, count: int) -> "TableQuery":
        self._limit = count
        return self

    def single(self) -> "TableQuery":
        """Expect exactly one row and return it as an object."""
        self._single = True
        return self

    @property
    def method(self) -> str:
        return "HEAD" if self._head else "GET"

    @property
    def is_single(self) -> bool:
        return self._single

    @property
    def is_head(self) -> bool:
        return self._head

    def build_params(self) -> List[Tuple[str, str]]:
        params: List[Tuple[str, str]] = [("select", self._columns)]
        params.extend(self._filters)
        if self._order:
            params.append(("order", ",".join(self._order)))
        if self._limit is not None:
            params.append(("limit", str(self._limit)))
        return params

    def build_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if self._count:
            headers["Prefer"] = f"count={self._count}"
        if self._range is not None:
            headers["Range-Unit"] = "items"
            headers["Range"] = f"{self._range[0]}-{self._range[1]}"
        if self._single:
            headers["Accept"] = "application/vnd.pgrst.object+json"
        return headers

    async def execute(self) -> "QueryResponse":
        if self._client is None:
            raise RuntimeError("TableQuery is not bound to a DatabaseClient")
        return await self._client.execute(self)

    @property
    def filters(self) -> List[Tuple[str, str]]:
        return list(self._filters)

    def __repr__(self) -> str:
        return f"TableQuery(table={self.table!r}, params={self.build_params()!r})"
