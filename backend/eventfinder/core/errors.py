"""
Centralized error handling for the API.

Services raise AppError subclasses; the handlers registered in main.py turn them into
{"error": message} JSON bodies so routes stay thin. Upstream detail is logged, never returned.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants: status codes and user-facing messages
# ---------------------------------------------------------------------------

STATUS_BAD_REQUEST = 400
STATUS_NOT_FOUND = 404
STATUS_INTERNAL_ERROR = 500

MSG_INTERNAL_ERROR = "Internal server error"
MSG_UPSTREAM_ERROR = "Upstream service error"


class AppError(Exception):
    """Base for errors with a known HTTP status and a safe client message."""

    status_code = STATUS_INTERNAL_ERROR
    message = MSG_INTERNAL_ERROR

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(AppError):
    """Missing or malformed required parameter."""

    status_code = STATUS_BAD_REQUEST
    message = "Invalid request"


class NotFound(AppError):
    """Best-effort lookup produced no result."""

    status_code = STATUS_NOT_FOUND
    message = "Not found"


class UpstreamError(AppError):
    """Provider unreachable or returned a non-success status. The client only sees the generic message."""

    status_code = STATUS_INTERNAL_ERROR

    def __init__(self, provider: str, status_code: int | None = None, detail: str | None = None) -> None:
        super().__init__(MSG_UPSTREAM_ERROR)
        self.provider = provider
        self.upstream_status = status_code
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.provider} error: status={self.upstream_status} detail={self.detail}"


def _error_body(message: str) -> dict[str, str]:
    return {"error": message}


async def _app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, UpstreamError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = ".".join(str(p) for p in first.get("loc", ()) if p not in ("query", "body", "path"))
    message = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg") or "Invalid request")
    return JSONResponse(status_code=STATUS_BAD_REQUEST, content=_error_body(message))


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=STATUS_INTERNAL_ERROR, content=_error_body(MSG_INTERNAL_ERROR))


def register_error_handlers(app: FastAPI) -> None:
    """Install the AppError / validation / catch-all handlers on the app."""
    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
