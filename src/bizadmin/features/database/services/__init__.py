from .database_client import DatabaseClient
from .table_query import TableQuery, format_value, quote_value

__all__ = ["DatabaseClient", "TableQuery", "format_value", "quote_value"]
