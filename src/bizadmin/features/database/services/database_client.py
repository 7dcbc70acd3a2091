"""Async client for the hosted database's REST interface.

Wraps ``httpx.AsyncClient`` and converts transport failures into
``NetworkUnavailableError`` and rejected queries into
``UpstreamQueryError`` so callers (mainly the query executor) can tell
retryable failures apart from permanent ones.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

import httpx

from ....config.settings import AppSettings
from ....core.exceptions.domain import ConfigurationError
from ....core.exceptions.infrastructure import NetworkUnavailableError, UpstreamQueryError
from ..entities.query_response import QueryResponse
from ..utils.content_range import parse_content_range
from .table_query import TableQuery, format_value

logger = logging.getLogger(__name__)


class DatabaseClient:
    """PostgREST client bound to one project URL and API key."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        access_token: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=f"{self.base_url}/rest/v1",
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {access_token or api_key}",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        *,
        access_token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "DatabaseClient":
        api_key = settings.supabase_anon_key.get_secret_value()
        if not api_key:
            raise ConfigurationError("SUPABASE_ANON_KEY is not set")

        return cls(
            settings.supabase_url,
            api_key,
            access_token=access_token,
            timeout=settings.database_timeout_seconds,
            transport=transport,
        )

    def table(self, name: str) -> TableQuery:
        """Start a query against ``name``."""
        return TableQuery(name, client=self)

    async def execute(self, query: TableQuery) -> QueryResponse:
        response = await self._request(
            query.method,
            query.table,
            params=query.build_params(),
            headers=query.build_headers(),
        )

        count = parse_content_range(response.headers.get("content-range"))

        # Offset past the end of the table: PostgREST answers 416 with the total.
        if response.status_code == 416:
            return QueryResponse(data=[], count=count, status_code=416)

        self._raise_for_status(response, query.table)

        if query.is_head or not response.content:
            data: Any = None if query.is_single else []
        else:
            data = response.json()

        return QueryResponse(data=data, count=count, status_code=response.status_code)

    async def insert(
        self,
        table: str,
        rows: Union[Mapping[str, Any], List[Mapping[str, Any]]],
    ) -> List[Dict[str, Any]]:
        """Insert one or more rows and return them as stored."""
        response = await self._request(
            "POST",
            table,
            json=rows,
            headers={"Prefer": "return=representation"},
        )
        self._raise_for_status(response, table)
        return response.json() if response.content else []

    async def update(
        self,
        table: str,
        values: Mapping[str, Any],
        filters: Mapping[str, Any],
    ) -> List[Dict[str, Any]]:
        """Update rows matching all equality ``filters``; returns updated rows."""
        if not filters:
            raise ValueError("Refusing to update without filters")

        params = [(column, f"eq.{format_value(value)}") for column, value in filters.items()]
        response = await self._request(
            "PATCH",
            table,
            params=params,
            json=dict(values),
            headers={"Prefer": "return=representation"},
        )
        self._raise_for_status(response, table)
        return response.json() if response.content else []

    async def delete(self, query: TableQuery) -> List[Dict[str, Any]]:
        """Delete rows matching the filters of ``query``; returns deleted rows."""
        if not query.filters:
            raise ValueError("Refusing to delete without filters")

        response = await self._request(
            "DELETE",
            query.table,
            params=query.filters,
            headers={"Prefer": "return=representation"},
        )
        self._raise_for_status(response, query.table)
        return response.json() if response.content else []

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "DatabaseClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def _request(self, method: str, table: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client.request(method, f"/{table}", **kwargs)
        except httpx.TransportError as e:
            logger.warning(f"Network error on {method} {table}: {e}")
            raise NetworkUnavailableError(
                f"Network error while querying {table}: {e}",
                details={"table": table, "method": method},
            ) from e

    @staticmethod
    def _raise_for_status(response: httpx.Response, table: str) -> None:
        if response.status_code < 400:
            return

        details: Dict[str, Any] = {"table": table}
        message = f"Query on {table} failed with status {response.status_code}"
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            for field in ("code", "details", "hint"):
                if body.get(field) is not None:
                    details[field] = body[field]
            message = body.get("message") or message

        logger.error(f"Upstream error on {table}: {message}")
        raise UpstreamQueryError(message, status_code=response.status_code, details=details)
