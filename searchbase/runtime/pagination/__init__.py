"""Auto-pagination driver."""

from .paginator import FetchPage, Paginator
from .state import PaginationState

__all__ = ["FetchPage", "PaginationState", "Paginator"]
