"""Runtime layer: HTTP transport and pagination driver."""

from .pagination import PaginationState, Paginator
from .rest import HTTPClient, HTTPResponse

__all__ = ["HTTPClient", "HTTPResponse", "PaginationState", "Paginator"]
