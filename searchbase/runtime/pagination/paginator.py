"""Auto-pagination over the search endpoint.

The Paginator turns repeated single-page fetches into one lazy traversal.
Each ``__anext__`` fetches pages until one carries records, so a page is
visible to the consumer before the next one is requested. Stopping
iteration early is the only way to abandon a traversal; nothing needs releasing.

Termination:
    The traversal continues while the records fetched so far are fewer than
    the ``total`` reported by the most recent page. ``total`` is re-read on
    every page, so a result set that grows or shrinks mid-traversal is
    followed on a best-effort basis, without snapshot isolation.

    Empty pages are never emitted. An empty page whose ``range.end`` moved
    forward is skipped and the next page fetched. An empty page that did not
    move the range before reaching ``total`` cannot make progress, so the
    traversal ends and is logged as stalled.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from time import perf_counter
from typing import Any

from ...core.config import DEFAULT_PAGE_SIZE
from ...models import Query, SearchResponse
from .state import PaginationState
from .telemetry import (
    log_page_fetched,
    log_pagination_complete,
    log_pagination_error,
    log_pagination_stalled,
)

FetchPage = Callable[[Query], Awaitable[SearchResponse]]


class Paginator:
    """Forward-only async iterator of record batches.

    Example:
        >>> async for batch in Paginator(query=q, fetch_page=client.search):
        ...     handle(batch)
    """

    def __init__(
        self,
        *,
        query: Query,
        fetch_page: FetchPage,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        """Initialize a traversal.

        Args:
            query: Query without limit or offset; both are driven by the paginator
            fetch_page: Async single-page fetch, typically SearchbaseClient.search
            page_size: Records requested per page

        Raises:
            ValueError: If the query pins limit/offset or page_size is not positive
        """
        if query.is_paged:
            raise ValueError("limit and offset are managed by the paginator; leave them unset")
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._query = query
        self._fetch_page = fetch_page
        self._page_size = page_size
        self._state = PaginationState()
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    @property
    def records_fetched(self) -> int:
        return self._state.records_fetched

    @property
    def pages_fetched(self) -> int:
        return self._state.pages_fetched

    @property
    def total(self) -> int | None:
        """Total reported by the latest page, None before the first fetch."""
        return self._state.last_known_total

    def __aiter__(self) -> Paginator:
        return self

    async def __anext__(self) -> list[Any]:
        while not self._done:
            state = self._state
            offset_before = state.current_offset
            page_query = self._query.with_page(self._page_size, offset_before)

            started = perf_counter()
            try:
                response = await self._fetch_page(page_query)
            except Exception as e:
                self._done = True
                log_pagination_error(
                    index=self._query.index,
                    state=state,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise
            latency_ms = (perf_counter() - started) * 1000.0

            state.advance(response)
            log_page_fetched(
                index=self._query.index,
                state=state,
                page_records=len(response.records),
                latency_ms=latency_ms,
            )

            if not state.has_more:
                self._done = True
                log_pagination_complete(index=self._query.index, state=state)
            elif not response.records and response.range.end <= offset_before:
                # No records and no forward movement: the same page would repeat
                self._done = True
                log_pagination_stalled(index=self._query.index, state=state)

            if response.records:
                return response.records

        raise StopAsyncIteration
