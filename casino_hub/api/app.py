"""FastAPI application serving the casino content dataset.

Uses a lifespan context manager to attach the content store and pure ASGI
middleware for logging, error handling, and security headers. All content
routes are read-only GETs.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from casino_hub.config import get_settings
from casino_hub.content import (
    CasinoContent,
    CasinoGame,
    ContentStore,
    NewsItem,
    Promotion,
    get_content_store,
)

from .errors import ErrorCode, error_json_response
from .middleware import (
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from .models import ErrorResponse, HealthResponse, LiveResponse

logger = logging.getLogger(__name__)

_NOT_FOUND = {404: {"model": ErrorResponse}}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Attach the content store on startup, detach on shutdown."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    app.state.store = get_content_store()
    logger.info("Casino content loaded: %s", app.state.store.counts())
    app.state.ready = True
    yield
    app.state.ready = False
    logger.info("Application shutdown complete.")


def _store(request: Request) -> ContentStore:
    store = getattr(request.app.state, "store", None)
    return store if store is not None else get_content_store()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title="Casino Hub API",
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )

    # Last added runs outermost.
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(RequestLoggingMiddleware, service="api")
    app.add_middleware(SecurityHeadersMiddleware)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            code = ErrorCode.NOT_FOUND
        elif exc.status_code == 405:
            code = ErrorCode.METHOD_NOT_ALLOWED
        else:
            code = str(exc.detail)
        return error_json_response(
            code, exc.status_code, headers=getattr(exc, "headers", None)
        )

    # ------------------------------------------------------------------
    # Content routes
    # ------------------------------------------------------------------
    @app.get(
        "/api/content",
        response_model=CasinoContent,
        response_model_exclude_none=True,
    )
    async def get_content(request: Request):
        return _store(request).get_all()

    @app.get(
        "/api/games",
        response_model=list[CasinoGame],
        response_model_exclude_none=True,
    )
    async def get_games(request: Request):
        return _store(request).get_games()

    # An empty id never names a game; answer it explicitly rather than
    # letting the trailing slash redirect to the collection.
    @app.get("/api/games/", responses=_NOT_FOUND, include_in_schema=False)
    async def get_game_empty_id():
        return error_json_response(ErrorCode.GAME_NOT_FOUND, 404)

    @app.get(
        "/api/games/{game_id}",
        response_model=CasinoGame,
        response_model_exclude_none=True,
        responses=_NOT_FOUND,
    )
    async def get_game(request: Request, game_id: str):
        game = _store(request).get_game_by_id(game_id)
        if game is None:
            return error_json_response(ErrorCode.GAME_NOT_FOUND, 404)
        return game

    @app.get("/api/promotions", response_model=list[Promotion])
    async def get_promotions(request: Request):
        return _store(request).get_promotions()

    @app.get("/api/news", response_model=list[NewsItem])
    async def get_news(request: Request):
        return _store(request).get_news()

    # ------------------------------------------------------------------
    # Probes
    # ------------------------------------------------------------------
    @app.get("/live", response_model=LiveResponse)
    async def liveness():
        return LiveResponse()

    @app.get("/health", response_model=HealthResponse)
    async def health(request: Request):
        ready = getattr(request.app.state, "ready", False)
        store = getattr(request.app.state, "store", None)
        content_loaded = store is not None
        healthy = ready and content_loaded
        body = HealthResponse(
            status="healthy" if healthy else "degraded",
            version=settings.VERSION,
            environment=settings.ENVIRONMENT,
            content_loaded=content_loaded,
            counts=store.counts() if content_loaded else {},
        )
        return JSONResponse(content=body.model_dump(), status_code=200 if healthy else 503)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "casino_hub.api.app:app",
        host="0.0.0.0",
        port=get_settings().PORT,
    )
