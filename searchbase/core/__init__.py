"""Core types: configuration, enums and exceptions."""

from .config import (
    BASE_URL,
    DEFAULT_PAGE_SIZE,
    DEFAULT_TIMEOUT,
    SEARCH_PATH,
    TOKEN_HEADER,
    ClientConfig,
)
from .enums import SortDirection
from .exceptions import SearchError

__all__ = [
    "BASE_URL",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_TIMEOUT",
    "SEARCH_PATH",
    "TOKEN_HEADER",
    "ClientConfig",
    "SearchError",
    "SortDirection",
]
