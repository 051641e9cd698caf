"""
Exception handlers mapping service errors to HTTP responses.

Every error response is plain text:

- request body fails to parse or validate   -> 400 "Invalid request body"
- method not routed on an existing path      -> 405 "Invalid request method"
- stored document fails typed decoding      -> 500 "Failed to decode data"
- insert fails                              -> 500 "Failed to save data"
- find fails                                -> 500 "Failed to retrieve data"

The request body is never logged.
"""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response
from starlette.routing import Match

from valuestore.domain.errors import RecordDecodeError, StorageError
from valuestore.utils.logging import get_logger

log = get_logger(__name__)

INVALID_BODY = "Invalid request body"
INVALID_METHOD = "Invalid request method"
SAVE_FAILED = "Failed to save data"
RETRIEVE_FAILED = "Failed to retrieve data"
DECODE_FAILED = "Failed to decode data"


async def validation_exception_handler(request: Request, exc: Exception) -> Response:
    assert isinstance(exc, RequestValidationError)
    log.info(
        "Rejected request body",
        extra={"path": request.url.path, "error_count": len(exc.errors())},
    )
    return PlainTextResponse(INVALID_BODY, status_code=status.HTTP_400_BAD_REQUEST)


def _allowed_methods(request: Request) -> str:
    """Methods of every route whose path matches, not just the first one."""
    methods = set()
    for route in request.app.router.routes:
        route_methods = getattr(route, "methods", None)
        if route_methods and route.matches(request.scope)[0] != Match.NONE:
            methods.update(route_methods)
    return ", ".join(sorted(methods))


async def http_exception_handler(request: Request, exc: Exception) -> Response:
    """Plain-text 405s; every other HTTP error keeps its default detail."""
    assert isinstance(exc, StarletteHTTPException)
    if exc.status_code != status.HTTP_405_METHOD_NOT_ALLOWED:
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)
    headers = dict(exc.headers or {})
    headers["Allow"] = _allowed_methods(request)
    return PlainTextResponse(INVALID_METHOD, status_code=exc.status_code, headers=headers)


async def storage_exception_handler(request: Request, exc: Exception) -> Response:
    assert isinstance(exc, StorageError)
    if isinstance(exc, RecordDecodeError):
        message = DECODE_FAILED
    elif request.method == "POST":
        message = SAVE_FAILED
    else:
        message = RETRIEVE_FAILED
    log.error(
        message,
        exc_info=(type(exc), exc, exc.__traceback__),
        extra={"path": request.url.path, "method": request.method},
    )
    return PlainTextResponse(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)


__all__ = [
    "register_exception_handlers",
    "INVALID_BODY",
    "INVALID_METHOD",
    "SAVE_FAILED",
    "RETRIEVE_FAILED",
    "DECODE_FAILED",
]
