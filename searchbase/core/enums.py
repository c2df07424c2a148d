"""Enumerations used on the search wire format."""

from enum import Enum


class SortDirection(str, Enum):
    """Sort order for a single field.

    String enum so values serialize directly to the wire form.
    """

    ASCENDING = "ASC"
    DESCENDING = "DESC"

    def __str__(self) -> str:
        return self.value
