"""
Error types raised by request handlers and the JSON handlers that render them.

Every error leaves the app as ``{"type": "error", "status": ..., "message": ...}``.
Unexpected exceptions become a 500 with the same envelope; the traceback is
only included when the app runs in development mode.
"""

import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad Request"


class InvalidShape(InvalidInput):
    """A payload did not match the expected key set or schema."""


class Unauthorized(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not Found"


class Conflict(ApiError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


def error_body(status_code: int, message: str) -> dict:
    return {"type": "error", "status": status_code, "message": message}


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Attach the JSON error handlers to ``app``."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        logger.info(
            "%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message
        )
        return JSONResponse(
            status_code=exc.status_code, content=error_body(exc.status_code, exc.message)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Malformed JSON or a non-object body
        logger.info("%s %s -> 400 %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(status.HTTP_400_BAD_REQUEST, InvalidInput.default_message),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        # Unmatched routes and unsupported methods end up here
        message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, message),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        body = error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, ApiError.default_message)
        if settings.is_development:
            body["stack"] = "".join(
                traceback.format_exception(type(exc), exc, exc.__traceback__)
            )
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)
