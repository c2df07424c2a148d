"""Search query models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import SortDirection


class Filter(BaseModel):
    """A single field condition.

    The operator and value are passed through to the service untouched.
    """

    field: str
    op: str
    value: Any

    model_config = ConfigDict(frozen=True)


class Sort(BaseModel):
    """Sort key for a single field."""

    field: str
    direction: SortDirection = SortDirection.ASCENDING

    model_config = ConfigDict(frozen=True)


class Query(BaseModel):
    """Structured search query against one index.

    Immutable: derive variants with ``with_page()`` or ``model_copy()``.
    ``limit`` and ``offset`` are optional; a missing offset means 0.
    """

    index: str = Field(..., min_length=1)
    filters: tuple[Filter, ...] = ()
    sort: tuple[Sort, ...] = ()
    select: tuple[str, ...] = ()
    limit: int | None = None
    offset: int | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_paged(self) -> bool:
        """True if the caller pinned limit or offset."""
        return self.limit is not None or self.offset is not None

    def with_page(self, limit: int, offset: int) -> Query:
        """Return a copy of this query bound to one page."""
        return self.model_copy(update={"limit": limit, "offset": offset})
