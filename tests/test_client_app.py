"""Tests for the browser app: one fetch at startup, views from the query string."""

import httpx
from fastapi.testclient import TestClient

from casino_hub.client import app as client_app
from casino_hub.client import ContentApiClient
from casino_hub.client.app import create_app


def _counting_handler(wire_content, statuses=None):
    calls: list[str] = []
    statuses = list(statuses or [])

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        status = statuses.pop(0) if statuses else 200
        if status != 200:
            return httpx.Response(status)
        return httpx.Response(200, json=wire_content)

    return handler, calls


class TestBrowserApp:
    def test_renders_games_from_real_api(self, asgi_api_client):
        app = create_app(api_client=asgi_api_client)
        with TestClient(app) as client:
            resp = client.get("/")
            assert resp.status_code == 200
            assert resp.headers["content-type"].startswith("text/html")
            assert "Casino Games (10 of 10)" in resp.text

    def test_fetches_once_across_page_views(self, make_api_client, wire_content):
        handler, calls = _counting_handler(wire_content)
        app = create_app(api_client=make_api_client(handler))
        with TestClient(app) as client:
            client.get("/")
            client.get("/?q=vampire")
            client.get("/?tab=news&news=news_bigwin")
        assert calls == ["/api/content"]

    def test_query_drives_view(self, make_api_client, wire_content):
        handler, _ = _counting_handler(wire_content)
        app = create_app(api_client=make_api_client(handler))
        with TestClient(app) as client:
            html = client.get("/?category=slots&category=jackpot").text
            assert "Casino Games (8 of 10)" in html
            html = client.get("/?tab=promotions&promo=promo_cashback").text
            assert "Cashback calculated on net losses" in html

    def test_error_page_and_retry(self, make_api_client, wire_content):
        handler, calls = _counting_handler(wire_content, statuses=[500])
        app = create_app(api_client=make_api_client(handler))
        with TestClient(app) as client:
            resp = client.get("/")
            assert resp.status_code == 502
            assert "Error: HTTP error! status: 500" in resp.text

            resp = client.get("/retry")
            assert resp.status_code == 200
            assert "Casino Games (10 of 10)" in resp.text
        assert calls == ["/api/content", "/api/content"]

    def test_retry_redirects_to_fresh_view(self, make_api_client, wire_content):
        handler, _ = _counting_handler(wire_content)
        app = create_app(api_client=make_api_client(handler))
        with TestClient(app) as client:
            resp = client.get("/retry", follow_redirects=False)
            assert resp.status_code == 303
            assert resp.headers["location"] == "/"


class TestLifespanClient:
    def test_restart_builds_fresh_client(self, monkeypatch, wire_content):
        """A second startup of the same app must not reuse the closed client."""
        created: list[ContentApiClient] = []

        def build(base_url, *, timeout):
            transport = httpx.MockTransport(
                lambda request: httpx.Response(200, json=wire_content)
            )
            client = ContentApiClient(
                base_url,
                timeout=timeout,
                http_client=httpx.AsyncClient(transport=transport, base_url=base_url),
            )
            client._owns_client = True
            created.append(client)
            return client

        monkeypatch.setattr(client_app, "ContentApiClient", build)
        app = create_app()
        for _ in range(2):
            with TestClient(app) as client:
                assert client.get("/").status_code == 200
            assert app.state.api_client is None

        assert len(created) == 2
        assert all(c._client.is_closed for c in created)

    def test_injected_client_is_kept(self, make_api_client, wire_content):
        handler, calls = _counting_handler(wire_content)
        api_client = make_api_client(handler)
        app = create_app(api_client=api_client)
        for _ in range(2):
            with TestClient(app) as client:
                assert client.get("/").status_code == 200
        assert app.state.api_client is api_client
        assert calls == ["/api/content", "/api/content"]
