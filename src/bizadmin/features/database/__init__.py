"""Client for the hosted database's REST interface."""

from .entities import QueryResponse
from .services import DatabaseClient, TableQuery, format_value
from .utils import parse_content_range

__all__ = [
    "QueryResponse",
    "DatabaseClient",
    "TableQuery",
    "format_value",
    "parse_content_range",
]
