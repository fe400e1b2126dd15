"""Custom validation error handling for FastAPI."""

from logging import getLogger
from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from app.configs import file_logger
from app.errors.base import BaseAppError, create_exception_handler
from app.utils.helpers import host

logger = file_logger(getLogger(__name__))

VALIDATION_FAILED = "Validation failed"


class ValidationError(BaseAppError):
    """Field-level validation failure, reported as a list of field/message pairs."""

    def __init__(
        self,
        detail: str = VALIDATION_FAILED,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)
        self.errors = errors or []

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        """Build an error for a single offending field."""
        return cls(errors=[{"field": field, "message": message, "type": "value_error"}])


class TripPlanRequestError(BaseAppError):
    """Raised when a trip-plan request lacks one of its two parts."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)
        self.success = False
        self.message = detail


validation_error_handler = create_exception_handler(logger)


def _format_error(error: dict[str, Any]) -> dict[str, Any]:
    loc = error.get("loc", ())
    # Drop the leading "body"/"query"/"path" segment
    formatted: dict[str, Any] = {
        "field": ".".join(str(part) for part in loc[1:]) or ".".join(map(str, loc)),
        "message": error.get("msg", "Invalid value"),
        "type": error.get("type", "validation_error"),
    }
    if ctx := error.get("ctx"):
        formatted["context"] = {
            key: str(value) if isinstance(value, Exception) else value
            for key, value in ctx.items()
        }
    return formatted


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle Pydantic request validation errors with the same shape as ValidationError.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with status 400 and formatted field errors.
    """
    exec_error = cast(RequestValidationError, exc)
    formatted_errors = [_format_error(error) for error in exec_error.errors()]

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"detail": VALIDATION_FAILED, "errors": formatted_errors},
    )
