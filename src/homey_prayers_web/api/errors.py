"""Catch-all error handling."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from homey_prayers_web.api.schemas import ErrorResponse
from homey_prayers_web.exceptions import HttpException

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong"


def _error_response(status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(status=status_code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def http_exception_handler(request: Request, exc: HttpException) -> JSONResponse:
    """Render application HTTP exceptions."""
    logger.info(f"{request.method} {request.url.path} -> {exc.status}: {exc.message}")
    return _error_response(exc.status, exc.message or GENERIC_ERROR_MESSAGE)


async def framework_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render framework errors (static 404, 405 ...) in the same shape."""
    response = _error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn any uncaught exception into a 500 response."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the error handlers to the application."""
    app.add_exception_handler(HttpException, http_exception_handler)
    app.add_exception_handler(StarletteHTTPException, framework_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
