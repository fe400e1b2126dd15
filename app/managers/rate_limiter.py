# app/managers/rate_limiter.py

"""Request rate limiting with slowapi."""

from logging import getLogger
from typing import cast

from fastapi import Request
from fastapi.responses import ORJSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.status import HTTP_429_TOO_MANY_REQUESTS

from app.configs import LimiterConfig, file_logger
from app.managers.token_manager import decode_access_token
from app.utils.helpers import host

logger = file_logger(getLogger(__name__))


def get_identifier(request: Request) -> str:
    """
    Rate-limit key for a request.

    Callers with a valid bearer token share one bucket per user across
    devices; everyone else is keyed by client address.

    Args:
        request: FastAPI request object.

    Returns:
        ``user:<id>`` or ``ip:<address>``.
    """
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and token and (token_data := decode_access_token(token)):
        return f"user:{token_data.user_id}"
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(**LimiterConfig().model_dump(), key_func=get_identifier)


async def rate_limit_exceeded_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """
    Answer with 429 and the limit that was hit.

    Args:
        request: FastAPI request object.
        exc: The RateLimitExceeded raised by slowapi.

    Returns:
        JSON response with error details.
    """
    limit = cast(RateLimitExceeded, exc).detail
    logger.warning(f"Rate limit {limit} exceeded by {get_identifier(request)} ({host(request)})")
    return ORJSONResponse(
        status_code=HTTP_429_TOO_MANY_REQUESTS,
        content={"detail": "Rate limit exceeded", "limit": limit},
    )
