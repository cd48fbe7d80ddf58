"""Tests for the httpx content client.

Uses ``httpx.MockTransport`` for failure modes and ``httpx.ASGITransport``
against the real API app for the happy path.
"""

import httpx
import pytest

from casino_hub.client import ContentApiClient, ContentFetchError
from casino_hub.content.dataset import CASINO_CONTENT


class TestFetchContent:
    async def test_fetches_from_real_api(self, asgi_api_client):
        content = await asgi_api_client.fetch_content()
        assert content == CASINO_CONTENT

    async def test_requests_content_path(self, make_api_client, wire_content):
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(200, json=wire_content)

        client = make_api_client(handler)
        await client.fetch_content()
        assert seen == ["/api/content"]

    async def test_non_success_status(self, make_api_client):
        client = make_api_client(lambda request: httpx.Response(500, json={"error": "boom"}))
        with pytest.raises(ContentFetchError, match="HTTP error! status: 500"):
            await client.fetch_content()

    async def test_malformed_json(self, make_api_client):
        client = make_api_client(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(ContentFetchError, match="Malformed content response"):
            await client.fetch_content()

    async def test_invalid_payload(self, make_api_client):
        client = make_api_client(lambda request: httpx.Response(200, json={"casinoGames": []}))
        with pytest.raises(ContentFetchError):
            await client.fetch_content()

    async def test_transport_error(self, make_api_client):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_api_client(handler)
        with pytest.raises(ContentFetchError, match="Failed to fetch data"):
            await client.fetch_content()


class TestClientLifecycle:
    async def test_owned_client_closed(self):
        client = ContentApiClient("http://localhost:5000/")
        await client.close()
        assert client._client.is_closed

    async def test_injected_client_left_open(self):
        http_client = httpx.AsyncClient()
        client = ContentApiClient("http://localhost:5000", http_client=http_client)
        await client.close()
        assert not http_client.is_closed
        await http_client.aclose()
