"""Bookkeeping for a single pagination traversal."""

from __future__ import annotations

from dataclasses import dataclass

from ...models import SearchResponse


@dataclass
class PaginationState:
    """Mutable progress of one traversal.

    Owned by exactly one Paginator and updated once per fetched page.

    Attributes:
        current_offset: Offset of the next page, taken from the last range.end
        records_fetched: Sum of record counts over all fetched pages
        last_known_total: Total reported by the most recent page, None before the first
        pages_fetched: Number of pages fetched so far
    """

    current_offset: int = 0
    records_fetched: int = 0
    last_known_total: int | None = None
    pages_fetched: int = 0

    def advance(self, response: SearchResponse) -> None:
        """Fold one page into the state.

        The next offset is the server-reported ``range.end``, never the
        previous offset plus the requested page size.
        """
        self.records_fetched += len(response.records)
        self.current_offset = response.range.end
        self.last_known_total = response.total or 0
        self.pages_fetched += 1

    @property
    def has_more(self) -> bool:
        """True until the fetched count reaches the latest reported total."""
        if self.last_known_total is None:
            return True
        return self.records_fetched < self.last_known_total
