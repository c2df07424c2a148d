"""Request construction helpers."""

from .request_builder import QueryBuilder, build_search_body, query

__all__ = ["QueryBuilder", "build_search_body", "query"]
