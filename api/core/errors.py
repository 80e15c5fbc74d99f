"""
Centralized exception handlers.

Feature code raises `HTTPException` for client errors (400/404) and lets
database failures propagate. Everything is rendered here, in the envelope
shape of the route group the request belongs to.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import responses

INTERNAL_ERROR_MESSAGE = "Internal Server Error"
ENDPOINT_NOT_FOUND_MESSAGE = "Endpoint not found"
INVALID_REQUEST_MESSAGE = "Invalid request body"

logger = logging.getLogger(__name__)


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    # Unmatched paths always get the primary envelope.
    matched = request.scope.get("endpoint") is not None
    if matched and responses.is_legacy_path(request.url.path):
        content = responses.legacy_error(message)
    else:
        content = responses.envelope(responses.status_label(status_code), message, None)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # No endpoint in scope means the router matched nothing.
    if exc.status_code == status.HTTP_404_NOT_FOUND and request.scope.get("endpoint") is None:
        message = ENDPOINT_NOT_FOUND_MESSAGE
    else:
        message = str(exc.detail)
    return error_response(request, exc.status_code, message)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request_invalid method=%s path=%s errors=%s", request.method, request.url.path, exc.errors())
    return error_response(request, status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_MESSAGE)


async def internal_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "request_failed method=%s path=%s error=%s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc_info=exc,
    )
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(asyncpg.PostgresError, internal_exception_handler)
    app.add_exception_handler(asyncpg.InterfaceError, internal_exception_handler)
    app.add_exception_handler(OSError, internal_exception_handler)
    app.add_exception_handler(Exception, internal_exception_handler)
