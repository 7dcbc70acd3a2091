"""Cache services."""

from .query_executor import (
    ErrorKind,
    QueryError,
    QueryExecutor,
    QueryResult,
)

__all__ = ["ErrorKind", "QueryError", "QueryExecutor", "QueryResult"]
