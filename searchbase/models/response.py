"""Search response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Range(BaseModel):
    """Slice of the full result set covered by one response.

    ``end`` is exclusive: it equals ``start`` plus the number of records
    returned, and is the offset of the next page.
    """

    start: int
    end: int

    model_config = ConfigDict(frozen=True)


class SearchResponse(BaseModel):
    """One page of search results as returned by the service.

    Records are opaque and kept exactly as decoded.
    """

    total: int = 0
    range: Range
    records: list[Any] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @field_validator("total", mode="before")
    @classmethod
    def default_missing_total(cls, v: Any) -> Any:
        """A null total is read as 0."""
        return 0 if v is None else v


class ErrorBody(BaseModel):
    """Body of a non-2xx response; every field is optional."""

    message: str | None = None
