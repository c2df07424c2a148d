"""Searchbase - async client for the Searchbase search service.

Exposes single-page ``search`` and auto-paginating ``search_all`` through
SearchbaseClient, plus the query and response models they exchange.
"""

from .api import QueryBuilder, build_search_body, query
from .clients import SearchbaseClient
from .core import ClientConfig, SearchError, SortDirection
from .models import Filter, Query, Range, SearchResponse, Sort
from .runtime import HTTPClient, HTTPResponse, PaginationState, Paginator

__version__ = "0.1.0"

__all__ = [
    # Client
    "SearchbaseClient",
    "ClientConfig",
    "SearchError",
    # Models
    "Filter",
    "Query",
    "Range",
    "SearchResponse",
    "Sort",
    "SortDirection",
    # Request building
    "QueryBuilder",
    "build_search_body",
    "query",
    # Runtime
    "HTTPClient",
    "HTTPResponse",
    "PaginationState",
    "Paginator",
]
