"""Structured logging for pagination traversals.

Each helper emits one event name as the log message with its fields in
``extra`` so log processors can index them.
"""

from __future__ import annotations

import logging

from .state import PaginationState

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    index: str,
    state: PaginationState,
    page_records: int,
    latency_ms: float | None = None,
) -> None:
    """Log one successfully fetched page.

    Args:
        index: Index being traversed
        state: State after the page was folded in
        page_records: Records returned by this page
        latency_ms: Fetch latency in milliseconds (optional)
    """
    logger.debug(
        "pagination_page_fetched",
        extra={
            "index": index,
            "page": state.pages_fetched,
            "page_records": page_records,
            "records_fetched": state.records_fetched,
            "total": state.last_known_total,
            "next_offset": state.current_offset,
            "latency_ms": latency_ms,
        },
    )


def log_pagination_complete(*, index: str, state: PaginationState) -> None:
    logger.info(
        "pagination_complete",
        extra={
            "index": index,
            "pages_fetched": state.pages_fetched,
            "records_fetched": state.records_fetched,
            "total": state.last_known_total,
        },
    )


def log_pagination_stalled(*, index: str, state: PaginationState) -> None:
    """Log a traversal that ended on an empty page before reaching total."""
    logger.warning(
        "pagination_stalled",
        extra={
            "index": index,
            "pages_fetched": state.pages_fetched,
            "records_fetched": state.records_fetched,
            "total": state.last_known_total,
            "offset": state.current_offset,
        },
    )


def log_pagination_error(
    *,
    index: str,
    state: PaginationState,
    error_type: str,
    error_message: str,
) -> None:
    """Log a page fetch failure that aborts the traversal.

    Args:
        index: Index being traversed
        state: State before the failing page
        error_type: Exception class name
        error_message: Exception message
    """
    logger.error(
        "pagination_error",
        extra={
            "index": index,
            "pages_fetched": state.pages_fetched,
            "records_fetched": state.records_fetched,
            "offset": state.current_offset,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
