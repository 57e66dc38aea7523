"""Error Handlers — the single terminal stage that renders every failure as plain text.

Invariants:
    - Every error response is text/plain, single line, no stack trace
    - TrackerError → its own http_status and message (variants fix both)
    - Unmatched route (404) or wrong method on a known path (405) → 404 "Not Found"
    - RequestValidationError → 400 with the first error's message
    - Exception (catch-all) → 500 "Internal Server Error", never leaks internal details

Design Decisions:
    - Four-layer handler: domain (TrackerError), routing (HTTPException),
      validation (Pydantic), catch-all (Exception)
    - Plain text on failure vs JSON on success is part of the public contract
    - Extracted from main.py (ADR: import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import TrackerError, NotFoundError, InternalError

logger = logging.getLogger(__name__)

_ROUTE_MISS_STATUSES = (
    status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_tracker_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def render_error(exc: TrackerError) -> PlainTextResponse:
    """Plain-text response for a tagged error."""
    return PlainTextResponse(exc.to_response(), status_code=exc.http_status)


def _register_tracker_error_handler(app: FastAPI) -> None:
    """Register Exercise Tracker domain/infrastructure error handler."""

    @app.exception_handler(TrackerError)
    async def tracker_error_handler(request: Request, exc: TrackerError):
        """Handle all Exercise Tracker errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"TrackerError: {exc.message}",
            extra={**exc.to_log_extra(), "path": request.url.path},
        )
        return render_error(exc)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing/static HTTP error handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Route misses become NotFound; other HTTP errors keep their status."""
        if exc.status_code in _ROUTE_MISS_STATUSES:
            logger.info(
                f"No route for {request.method} {request.url.path}",
                extra={"path": request.url.path, "method": request.method},
            )
            return render_error(NotFoundError.route())
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Report the first request validation error."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return PlainTextResponse(
            _first_validation_message(exc),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return render_error(InternalError())


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request data"
    first = errors[0]
    field = ".".join(str(loc) for loc in first.get("loc", ()) if loc != "body")
    message = first.get("msg", "Invalid request data")
    return f"{field}: {message}" if field else message
