"""REST transport."""

from .http_client import HTTPClient, HTTPResponse

__all__ = ["HTTPClient", "HTTPResponse"]
