"""Precise unit tests for HTTPClient.

Tests focus on session management and request handling.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from laakhay.slicing.utils import HTTPClient


def make_session(payload):
    mock_response = AsyncMock()
    mock_response.status = 200
    mock_response.json = AsyncMock(return_value=payload)
    mock_response.raise_for_status = MagicMock()
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)

    mock_session = MagicMock()
    mock_session.closed = False  # session property checks this
    mock_session.get = MagicMock(return_value=mock_response)
    return mock_session, mock_response


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
        await client.close()  # Should not raise

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientRequests:
    """Test HTTPClient GET handling."""

    @pytest.mark.parametrize(
        ("base_url", "url", "expected"),
        [
            (None, "/items", "/items"),
            ("https://api.example.com", "/items", "https://api.example.com/items"),
            ("https://api.example.com/", "items", "https://api.example.com/items"),
            ("https://api.example.com", "https://other.example.com/x", "https://other.example.com/x"),
        ],
    )
    def test_build_url(self, base_url, url, expected):
        assert HTTPClient(base_url=base_url).build_url(url) == expected

    @pytest.mark.asyncio
    async def test_get_returns_json(self):
        client = HTTPClient(base_url="https://api.example.com")
        mock_session, mock_response = make_session({"items": [], "total": 0})
        client._session = mock_session

        data = await client.get("/items", params={"offset": 0, "limit": 5})

        assert data == {"items": [], "total": 0}
        mock_session.get.assert_called_once_with(
            "https://api.example.com/items", params={"offset": 0, "limit": 5}, headers=None
        )
        mock_response.raise_for_status.assert_called_once()

    @pytest.mark.asyncio
    async def test_get_propagates_http_errors(self):
        client = HTTPClient()
        mock_session, mock_response = make_session({})
        mock_response.raise_for_status = MagicMock(
            side_effect=aiohttp.ClientResponseError(MagicMock(), (), status=500)
        )
        client._session = mock_session

        with pytest.raises(aiohttp.ClientResponseError):
            await client.get("https://api.example.com/items")
