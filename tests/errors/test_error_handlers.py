"""Tests for the exception handlers and their response shape."""

from logging import getLogger

import orjson
import pytest
from fastapi import Request
from fastapi.exceptions import RequestValidationError

from app.errors import (
    BaseAppError,
    DuplicateUserError,
    RecordNotFoundError,
    TripPlanRequestError,
    ValidationError,
    create_exception_handler,
    validation_exception_handler,
)


@pytest.fixture
def request_stub() -> Request:
    return Request(
        {
            "type": "http",
            "method": "POST",
            "path": "/api/trips",
            "headers": [],
            "query_string": b"",
            "client": ("127.0.0.1", 1234),
        },
    )


class TestCreateExceptionHandler:
    @pytest.mark.asyncio
    async def test_base_error(self, request_stub: Request) -> None:
        handler = create_exception_handler(getLogger("test"))

        response = await handler(request_stub, BaseAppError("Boom", status_code=418))

        assert response.status_code == 418
        assert orjson.loads(response.body) == {"detail": "Boom"}

    @pytest.mark.asyncio
    async def test_extra_attributes_are_included(self, request_stub: Request) -> None:
        handler = create_exception_handler(getLogger("test"))
        error = ValidationError.for_field("endDate", "endDate must be on or after startDate")

        response = await handler(request_stub, error)

        assert response.status_code == 400
        assert orjson.loads(response.body) == {
            "detail": "Validation failed",
            "errors": [
                {
                    "field": "endDate",
                    "message": "endDate must be on or after startDate",
                    "type": "value_error",
                },
            ],
        }

    @pytest.mark.asyncio
    async def test_trip_plan_error_shape(self, request_stub: Request) -> None:
        handler = create_exception_handler(getLogger("test"))

        response = await handler(request_stub, TripPlanRequestError("missing"))

        assert orjson.loads(response.body) == {
            "detail": "missing",
            "success": False,
            "message": "missing",
        }

    def test_error_status_codes(self) -> None:
        assert RecordNotFoundError().status_code == 404
        assert DuplicateUserError("a@b.com").status_code == 400


class TestValidationExceptionHandler:
    @pytest.mark.asyncio
    async def test_formats_field_errors(self, request_stub: Request) -> None:
        exc = RequestValidationError(
            [
                {
                    "loc": ("body", "numberOfTravelers"),
                    "msg": "Input should be greater than 0",
                    "type": "greater_than",
                    "ctx": {"gt": 0},
                },
                {"loc": ("body",), "msg": "Field required", "type": "missing"},
            ],
        )

        response = await validation_exception_handler(request_stub, exc)

        assert response.status_code == 400
        body = orjson.loads(response.body)
        assert body["detail"] == "Validation failed"
        first, second = body["errors"]
        assert first["field"] == "numberOfTravelers"
        assert first["context"] == {"gt": 0}
        assert second["field"] == "body"
