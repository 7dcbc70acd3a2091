"""Response of a table query against the hosted database."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class QueryResponse:
    """Rows returned by the database plus the exact count when requested.

    ``data`` is a list of row dicts, a single dict for ``single()`` queries,
    or an empty list for ``head`` (count-only) queries.
    """

    data: Any
    count: Optional[int] = None
    status_code: int = 200

    @property
    def rows(self) -> list:
        if self.data is None:
            return []
        if isinstance(self.data, dict):
            return [self.data]
        return list(self.data)
