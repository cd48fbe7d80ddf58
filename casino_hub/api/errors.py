"""Error bodies for the Casino Hub API.

Every error the API returns has the same flat shape::

    {"error": "<message>"}

Route handlers, the HTTP exception handler and ``ErrorHandlingMiddleware``
all build it through ``error_json_response``.
"""

from enum import Enum

from fastapi.responses import JSONResponse


class ErrorCode(str, Enum):
    """Canonical error messages for API responses."""

    GAME_NOT_FOUND = "Game not found"
    NOT_FOUND = "Not found"
    METHOD_NOT_ALLOWED = "Method not allowed"
    INTERNAL_ERROR = "Internal server error"


def error_response(code: ErrorCode | str) -> dict:
    """Build an error response body.

    Args:
        code: An ``ErrorCode`` or a free-form message.

    Returns:
        Dict with a single ``error`` string.
    """
    message = code.value if isinstance(code, ErrorCode) else str(code)
    return {"error": message}


def error_json_response(
    code: ErrorCode | str, status_code: int, headers: dict | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=error_response(code), headers=headers
    )
