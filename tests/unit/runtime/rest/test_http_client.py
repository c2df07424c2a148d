"""Unit tests for HTTPClient.

Tests focus on session management and POST response handling.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from searchbase.runtime.rest import HTTPClient, HTTPResponse


def _mock_session(status: int, text: str) -> MagicMock:
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.text = AsyncMock(return_value=text)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)

    mock_session = MagicMock()
    mock_session.closed = False
    mock_session.post = MagicMock(return_value=mock_response)
    return mock_session


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        client = HTTPClient()
        await client.close()
        await client.close()

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient() as client:
            session = client.session
        assert session.closed


class TestHTTPClientPost:
    """Test HTTPClient.post."""

    @pytest.mark.asyncio
    async def test_post_returns_status_and_body(self):
        client = HTTPClient()
        client._session = _mock_session(200, '{"total": 0}')

        response = await client.post(
            "https://api.example.com/search",
            json_body={"query": {"index": "i"}},
            headers={"x": "y"},
        )

        assert response == HTTPResponse(status=200, body='{"total": 0}')
        assert response.ok
        client._session.post.assert_called_once_with(
            "https://api.example.com/search",
            json={"query": {"index": "i"}},
            headers={"x": "y"},
        )

    @pytest.mark.asyncio
    async def test_post_does_not_raise_on_error_status(self):
        client = HTTPClient()
        client._session = _mock_session(500, '{"message": "index not found"}')

        response = await client.post("https://api.example.com/search")

        assert response.status == 500
        assert not response.ok
        assert response.body == '{"message": "index not found"}'

    @pytest.mark.asyncio
    async def test_connection_error_propagates(self):
        client = HTTPClient()
        mock_session = MagicMock()
        mock_session.closed = False
        mock_session.post = MagicMock(side_effect=aiohttp.ClientConnectionError("refused"))
        client._session = mock_session

        with pytest.raises(aiohttp.ClientConnectionError):
            await client.post("https://api.example.com/search")


@pytest.mark.parametrize(
    ("status", "ok"),
    [(200, True), (204, True), (299, True), (199, False), (301, False), (404, False), (500, False)],
)
def test_http_response_ok(status, ok):
    assert HTTPResponse(status=status, body="").ok is ok
