"""High-level client for the Searchbase search service.

``search`` performs one request and normalizes every failure into
SearchError. ``search_all`` drives a Paginator over ``search`` so callers
can consume a whole result set without tracking offsets.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping
from typing import Any

from pydantic import ValidationError

from ..api.request_builder import build_search_body
from ..core.config import TOKEN_HEADER, ClientConfig
from ..core.exceptions import SearchError
from ..models import ErrorBody, Query, SearchResponse
from ..runtime.pagination import Paginator
from ..runtime.rest import HTTPClient, HTTPResponse

logger = logging.getLogger(__name__)

QueryLike = Query | Mapping[str, Any]


class SearchbaseClient:
    """Async client for the search endpoint.

    Use as an async context manager, or call ``close()`` when done. A
    caller-supplied HTTPClient is left open.

    Example:
        >>> async with SearchbaseClient("token") as client:
        ...     page = await client.search(Query(index="articles", limit=10))
        ...     async for batch in client.search_all(Query(index="articles")):
        ...         ...
    """

    def __init__(
        self,
        api_token: str | None = None,
        *,
        config: ClientConfig | None = None,
        http_client: HTTPClient | None = None,
    ) -> None:
        """Initialize client.

        Args:
            api_token: Token for the x-searchbase-token header; ignored when config is given
            config: Full client configuration
            http_client: Transport to use instead of a client-owned one

        Raises:
            ValueError: If neither a token nor a config is provided
        """
        if config is None:
            if not api_token:
                raise ValueError("api_token or config is required")
            config = ClientConfig(api_token=api_token)
        self._config = config
        self._owns_http = http_client is None
        self._http = http_client or HTTPClient(timeout=config.timeout)

    @classmethod
    def from_env(cls, **overrides: Any) -> SearchbaseClient:
        """Create a client configured from SEARCHBASE_* environment variables."""
        return cls(config=ClientConfig.from_env(**overrides))

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            TOKEN_HEADER: self._config.api_token,
        }

    async def search(self, query: QueryLike) -> SearchResponse:
        """Fetch a single page of results.

        Args:
            query: Query, or a mapping validated into one

        Returns:
            The decoded response, records untouched

        Raises:
            SearchError: On any HTTP, transport or decoding failure
        """
        query = _coerce_query(query)
        body = build_search_body(query)
        logger.debug(
            "search_request",
            extra={"index": query.index, "limit": query.limit, "offset": query.offset},
        )
        try:
            response = await self._http.post(
                self._config.search_url, json_body=body, headers=self._headers()
            )
            if not response.ok:
                raise _http_error(response)
            return SearchResponse.model_validate_json(response.body)
        except SearchError as e:
            logger.warning(
                "search_failed",
                extra={"index": query.index, "status_code": e.status_code, "error_message": str(e)},
            )
            raise
        except Exception as e:
            detail = str(e) or type(e).__name__
            logger.warning(
                "search_failed",
                extra={"index": query.index, "status_code": None, "error_message": detail},
            )
            raise SearchError(f"Network error: {detail}") from e

    def search_all(self, query: QueryLike, *, page_size: int | None = None) -> Paginator:
        """Iterate over the full result set page by page.

        Args:
            query: Query without limit or offset
            page_size: Records per page (default: config.page_size)

        Returns:
            Async iterator yielding one list of records per non-empty page

        Raises:
            ValueError: If the query sets limit or offset
        """
        return Paginator(
            query=_coerce_query(query),
            fetch_page=self.search,
            page_size=self._config.page_size if page_size is None else page_size,
        )

    async def iter_records(
        self, query: QueryLike, *, page_size: int | None = None
    ) -> AsyncIterator[Any]:
        """Iterate over individual records of the full result set."""
        async for batch in self.search_all(query, page_size=page_size):
            for record in batch:
                yield record

    async def close(self) -> None:
        if self._owns_http:
            await self._http.close()

    async def __aenter__(self) -> SearchbaseClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def _coerce_query(query: QueryLike) -> Query:
    if isinstance(query, Query):
        return query
    return Query.model_validate(query)


def _http_error(response: HTTPResponse) -> SearchError:
    """Build the error for a non-2xx response, preferring the body's message."""
    try:
        message = ErrorBody.model_validate_json(response.body).message
    except ValidationError:
        message = None
    return SearchError(
        message or f"HTTP error! status: {response.status}",
        status_code=response.status,
    )
