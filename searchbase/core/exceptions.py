"""Exception raised for every search failure."""

from __future__ import annotations


class SearchError(Exception):
    """A search request failed.

    Raised for HTTP failure statuses, transport errors and undecodable
    responses alike, so callers have a single type to catch.

    Attributes:
        message: Human-readable description of the failure
        status_code: HTTP status when the server answered, None otherwise
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
