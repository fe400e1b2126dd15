"""Tests for the rate-limit key and the 429 handler."""

from unittest.mock import MagicMock

import orjson
import pytest
from fastapi import Request
from slowapi.errors import RateLimitExceeded

from app.managers.rate_limiter import get_identifier, rate_limit_exceeded_handler
from app.managers.token_manager import create_access_token


def _request(authorization: str | None = None) -> Request:
    headers = [(b"authorization", authorization.encode())] if authorization else []
    return Request(
        {
            "type": "http",
            "method": "POST",
            "path": "/api/ai/trip-plan",
            "headers": headers,
            "query_string": b"",
            "client": ("10.0.0.7", 5555),
        },
    )


class TestGetIdentifier:
    def test_anonymous_uses_ip(self) -> None:
        assert get_identifier(_request()) == "ip:10.0.0.7"

    def test_valid_token_uses_user(self) -> None:
        token = create_access_token(user_id=12, email="a@b.com")

        assert get_identifier(_request(f"Bearer {token}")) == "user:12"

    def test_invalid_token_falls_back_to_ip(self) -> None:
        assert get_identifier(_request("Bearer nope")) == "ip:10.0.0.7"


@pytest.mark.asyncio
async def test_exceeded_handler() -> None:
    limit = MagicMock(error_message=None, limit="5 per 1 minute")

    response = await rate_limit_exceeded_handler(_request(), RateLimitExceeded(limit))

    assert response.status_code == 429
    assert orjson.loads(response.body) == {
        "detail": "Rate limit exceeded",
        "limit": "5 per 1 minute",
    }
