from .query_response import QueryResponse

__all__ = ["QueryResponse"]
