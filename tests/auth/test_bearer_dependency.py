"""Tests for bearer token extraction."""

import pytest

from app.dependencies import extract_bearer_token
from app.errors import MissingTokenError


class TestExtractBearerToken:
    def test_returns_token(self) -> None:
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    @pytest.mark.parametrize(
        "header",
        [None, "", "Bearer", "Bearer ", "Bearer    ", "Token abc", "bearer abc", "Basic dXNlcg=="],
    )
    def test_missing_or_malformed_header(self, header: str | None) -> None:
        with pytest.raises(MissingTokenError) as exc_info:
            extract_bearer_token(header)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Access token required"
        assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}
