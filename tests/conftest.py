"""Shared test fixtures for Casino Hub tests."""

import httpx
import pytest


@pytest.fixture(autouse=True)
def _clear_singleton_caches():
    """Reset @lru_cache singletons between tests.

    Prevents cached Settings from leaking environment overrides across
    test modules.
    """
    yield
    from casino_hub.config import get_settings

    get_settings.cache_clear()


@pytest.fixture
def content_store():
    """The process-wide store over the compiled dataset."""
    from casino_hub.content import get_content_store

    return get_content_store()


@pytest.fixture
def api_app():
    from casino_hub.api.app import create_app

    return create_app()


@pytest.fixture
def asgi_api_client(api_app):
    """ContentApiClient wired to the in-process API app (no network)."""
    from casino_hub.client import ContentApiClient

    http_client = httpx.AsyncClient(
        transport=httpx.ASGITransport(app=api_app), base_url="http://testserver"
    )
    return ContentApiClient("http://testserver", http_client=http_client)


@pytest.fixture
def make_api_client():
    """Factory: ContentApiClient whose requests are answered by ``handler``."""
    from casino_hub.client import ContentApiClient

    def _make(handler):
        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(handler), base_url="http://testserver"
        )
        return ContentApiClient("http://testserver", http_client=http_client)

    return _make


@pytest.fixture
def wire_content(content_store):
    """The dataset as the API puts it on the wire."""
    return content_store.get_all().to_wire()
