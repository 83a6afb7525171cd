"""
Innermost error middleware.

FastAPI hands catch-all ``Exception`` handlers to Starlette's
ServerErrorMiddleware, which wraps every user middleware. Responses
built there skip the security and CORS headers, so unexpected errors
are rendered here instead, inside the middleware stack.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.shared.errors.handlers import HTTP_500, INTERNAL_SERVER_ERROR, error_response

logger = logging.getLogger(__name__)


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turns any exception escaping the routes into the standard 500 body."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(
                "Unexpected error on %s %s: %s",
                request.method,
                request.url.path,
                type(exc).__name__,
            )
            return error_response(HTTP_500, INTERNAL_SERVER_ERROR)
