"""Shared test fixtures for SDK tests."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from giphy_sdk.client import Client
from giphy_sdk.http import HTTPClient


@pytest.fixture
def mock_transport():
    """Returns an httpx mock transport that records requests."""
    calls: list[dict[str, Any]] = []
    default_response = httpx.Response(200, json={"data": [], "meta": {"status": 200, "msg": "OK"}})

    class RecordingTransport(httpx.AsyncBaseTransport):
        def __init__(self):
            self.response = default_response

        async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
            calls.append({
                "method": request.method,
                "url": str(request.url),
                "path": request.url.path,
                "params": dict(request.url.params),
            })
            return self.response

    transport = RecordingTransport()
    return transport, calls


@pytest.fixture
def http_client(mock_transport):
    """HTTPClient with a mock transport."""
    transport, calls = mock_transport
    client = HTTPClient("https://api.giphy.test", transport=transport)
    return client, transport, calls


@pytest.fixture
def giphy(mock_transport):
    """Client using the default base URL and a mock transport."""
    transport, calls = mock_transport
    client = Client("abc123", transport=transport)
    return client, transport, calls
