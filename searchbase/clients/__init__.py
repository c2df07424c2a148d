"""Client entry points."""

from .search_client import SearchbaseClient

__all__ = ["SearchbaseClient"]
