from collections.abc import Awaitable, Callable
from logging import ERROR, WARNING, Logger

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from app.utils.helpers import host

# Attributes that shape the response itself and never appear in the body
_RESERVED_ATTRS = frozenset({"status_code", "detail", "headers"})


class BaseAppError(Exception):
    """
    Root of every error the API turns into a JSON response.

    Public attributes set by subclasses beyond ``detail``, ``status_code``
    and ``headers`` are added to the response body as is.
    """

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code
        self.headers = headers

    def __str__(self) -> str:
        return self.detail


def create_exception_handler(
    logger: Logger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Build an exception handler that answers with ``{"detail": ..., **extras}``.

    Args:
        logger: Logger of the module that owns the error types.

    Returns:
        A handler for ``app.add_exception_handler``.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        status_code = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
        detail = getattr(exc, "detail", "Internal Server Error")
        headers = getattr(exc, "headers", None)

        user_id = getattr(request.state, "user_id", None)
        caller = f"user {user_id}" if user_id is not None else f"ip {host(request)}"
        logger.log(
            ERROR if status_code >= HTTP_500_INTERNAL_SERVER_ERROR else WARNING,
            f"{status_code} {detail} for {caller} at {request.method} {request.url.path}",
        )

        content = {"detail": detail}
        content.update({k: v for k, v in vars(exc).items() if k not in _RESERVED_ATTRS})
        return ORJSONResponse(content=content, status_code=status_code, headers=headers)

    return handler
