"""FastAPI application serving the Casino Hub browser page.

Fetches the dataset from the API exactly once at startup (and again only on
``/retry``), then renders every page from the held copy. View state lives in
the query string of each request.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from casino_hub.api.middleware import (
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from casino_hub.config import get_settings

from .api_client import ContentApiClient
from .render import render_page
from .state import ContentBrowser, Phase, ViewState

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the API client and run the single content fetch."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    client = getattr(app.state, "api_client", None)
    owned = client is None
    if owned:
        client = ContentApiClient(
            settings.API_BASE_URL, timeout=settings.CLIENT_TIMEOUT_SECONDS
        )
        app.state.api_client = client
    app.state.browser = ContentBrowser(client)
    logger.info("Fetching casino content from %s", settings.API_BASE_URL)
    try:
        await app.state.browser.load()
        yield
    finally:
        if owned:
            await client.close()
            # A restarted app builds a fresh client.
            app.state.api_client = None
    logger.info("Client shutdown complete.")


def create_app(api_client: ContentApiClient | None = None) -> FastAPI:
    """Create the browser app.

    Args:
        api_client: Injected client for testing; defaults to one built from
            settings at startup.
    """
    app = FastAPI(
        title="Casino Hub",
        version=get_settings().VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
    )
    app.state.api_client = api_client

    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(RequestLoggingMiddleware, service="client")
    app.add_middleware(SecurityHeadersMiddleware)

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        browser: ContentBrowser = request.app.state.browser
        view = ViewState.from_query(request.query_params.multi_items())
        status_code = 200 if browser.phase is not Phase.ERROR else 502
        return HTMLResponse(render_page(browser, view), status_code=status_code)

    @app.get("/retry")
    async def retry(request: Request):
        """Reload everything and start over from a fresh view."""
        browser: ContentBrowser = request.app.state.browser
        await browser.retry()
        return RedirectResponse("/", status_code=303)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "casino_hub.client.app:app",
        host="0.0.0.0",
        port=get_settings().CLIENT_PORT,
    )
