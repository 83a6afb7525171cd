"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every endpoint.
Protects the API and its database against request floods.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import settings

HTTP_429 = 429


def build_limiter(
    default_limit: str = settings.rate_limit_default,
    enabled: bool = settings.rate_limit_enabled,
) -> Limiter:
    """Create a limiter keyed on the client address.

    Args:
        default_limit: Limit applied to every route, e.g. "60/minute".
        enabled: When False, requests are never counted.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[default_limit],
        enabled=enabled,
    )


limiter = build_limiter()


# SlowAPIMiddleware only calls synchronous handlers; an async one is
# silently replaced by slowapi's default body.
def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with the standard error body.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=HTTP_429,
        content={"message": "Rate limit exceeded", "detail": str(exc.detail)},
    )
