"""
Centralized error handlers for FastAPI.

Every error reaching the application boundary is rendered as a JSON
body ``{"message": <string>}``. The status code comes from the error
when it carries one, otherwise 500.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.shared.errors.exceptions import AppError
from app.shared.security.rate_limiting import rate_limit_exceeded_handler

logger = logging.getLogger(__name__)

HTTP_422 = 422
HTTP_500 = 500

INTERNAL_SERVER_ERROR = "Internal Server Error"


def error_response(
    status_code: int, message: str, **extra: object
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, object] = {"message": message or INTERNAL_SERVER_ERROR}
    body.update(extra)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        """Render application errors with their own status and message."""
        status_code = exc.status_code or HTTP_500
        if status_code >= HTTP_500:
            logger.error(
                "%s %s failed: %s", request.method, request.url.path, exc.message
            )
        else:
            logger.warning(
                "%s %s -> %d: %s",
                request.method,
                request.url.path,
                status_code,
                exc.message,
            )
        return error_response(status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle framework HTTP errors (unknown route, wrong method)."""
        response = error_response(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request validation failures."""
        logger.warning("Validation error on %s %s", request.method, request.url.path)
        return error_response(HTTP_422, "Validation error", errors=exc.errors())

    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for errors raised outside the middleware stack."""
        logger.exception(
            "Unexpected error on %s %s: %s",
            request.method,
            request.url.path,
            type(exc).__name__,
        )
        return error_response(HTTP_500, INTERNAL_SERVER_ERROR)
