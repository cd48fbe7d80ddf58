"""Pure ASGI middleware shared by the Casino Hub API and browser apps.

Stack order in both apps (outermost first): security headers, access log,
error handling. A crash inside a route therefore still produces a logged
500 carrying the request id and the security headers.
"""

import json
import logging
import time
import uuid

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from .errors import ErrorCode, error_json_response

logger = logging.getLogger(__name__)

_access_logger = logging.getLogger("casino_hub.access")
if not _access_logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("%(message)s"))
    _access_logger.addHandler(_handler)
    _access_logger.setLevel(logging.INFO)
    _access_logger.propagate = False


def _with_headers(message: Message, extra: list[tuple[bytes, bytes]]) -> None:
    message["headers"] = list(message.get("headers", [])) + extra


def _route_template(scope: Scope) -> str | None:
    """Path template of the matched route, e.g. ``/api/games/{game_id}``."""
    route = scope.get("route")
    return getattr(route, "path", None)


class RequestLoggingMiddleware:
    """One JSON access line per request on the ``casino_hub.access`` logger.

    The line names the service (``api`` or ``client``) and the matched route
    template, so lookups of different game ids group under one route.
    Responses gain ``X-Request-ID`` (echoed when the caller sent one) and
    ``X-Response-Time-Ms``.
    """

    def __init__(self, app: ASGIApp, service: str = "api") -> None:
        self.app = app
        self.service = service

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = ""
        for name, value in scope.get("headers", []):
            if name == b"x-request-id":
                request_id = value.decode("latin-1")
                break
        request_id = request_id or uuid.uuid4().hex[:8]
        started = time.monotonic()
        status: int | None = None

        async def send_wrapper(message: Message) -> None:
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
                elapsed = (time.monotonic() - started) * 1000
                _with_headers(
                    message,
                    [
                        (b"x-request-id", request_id.encode("latin-1")),
                        (b"x-response-time-ms", f"{elapsed:.1f}".encode()),
                    ],
                )
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            _access_logger.info(
                json.dumps(
                    {
                        "service": self.service,
                        "request_id": request_id,
                        "method": scope["method"],
                        "path": scope["path"],
                        "route": _route_template(scope),
                        "status": status,
                        "duration_ms": round((time.monotonic() - started) * 1000, 1),
                    }
                )
            )


class ErrorHandlingMiddleware:
    """Turn an unhandled exception into the flat 500 error body."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            logger.exception("Unhandled exception on %s %s", scope["method"], scope["path"])
            if started:
                raise
            response = error_json_response(ErrorCode.INTERNAL_ERROR, 500)
            await response(scope, receive, send)


class SecurityHeadersMiddleware:
    """Standard hardening headers on every response.

    HTML pages (the browser app) also get a Content-Security-Policy that
    allows the inline stylesheet and remote card images and nothing else.
    """

    HEADERS = [
        (b"x-content-type-options", b"nosniff"),
        (b"x-frame-options", b"DENY"),
        (b"referrer-policy", b"strict-origin-when-cross-origin"),
    ]
    HTML_CSP = (
        b"default-src 'none'; img-src https:; style-src 'unsafe-inline'; "
        b"form-action 'self'; frame-ancestors 'none'"
    )

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                extra = list(self.HEADERS)
                content_type = dict(message.get("headers", [])).get(b"content-type", b"")
                if content_type.startswith(b"text/html"):
                    extra.append((b"content-security-policy", self.HTML_CSP))
                _with_headers(message, extra)
            await send(message)

        await self.app(scope, receive, send_wrapper)
