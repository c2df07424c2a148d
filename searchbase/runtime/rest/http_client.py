"""Async HTTP client wrapper around aiohttp."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import aiohttp


@dataclass(frozen=True)
class HTTPResponse:
    """Status and raw body of a completed request."""

    status: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class HTTPClient:
    """Async HTTP client wrapper.

    HTTP failure statuses are returned, not raised, so callers can read the
    error body. Connection errors and timeouts propagate as raised by aiohttp.
    """

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def post(
        self,
        url: str,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> HTTPResponse:
        """POST a JSON body and return the response status and text."""
        async with self.session.post(url, json=json_body, headers=headers) as response:
            body = await response.text()
            return HTTPResponse(status=response.status, body=body)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
