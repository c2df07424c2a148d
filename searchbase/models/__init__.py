"""Pydantic models for the search wire format.

All models are frozen. Query-side models describe what is sent; response
models describe what the service returns.
"""

from .query import Filter, Query, Sort
from .response import ErrorBody, Range, SearchResponse

__all__ = [
    "ErrorBody",
    "Filter",
    "Query",
    "Range",
    "SearchResponse",
    "Sort",
]
