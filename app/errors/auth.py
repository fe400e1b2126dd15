"""Authentication errors."""

from logging import getLogger

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from app.configs import file_logger
from app.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(detail, status_code, headers)


class MissingTokenError(UserAuthenticationError):
    """Raised when the request carries no usable bearer token."""

    def __init__(self) -> None:
        super().__init__("Access token required", HTTP_401_UNAUTHORIZED, BEARER_CHALLENGE)


class InvalidTokenError(UserAuthenticationError):
    """Raised when a bearer token fails signature, expiry or claim checks."""

    def __init__(self) -> None:
        super().__init__("Invalid or expired token", HTTP_403_FORBIDDEN)


class InvalidCredentialsError(UserAuthenticationError):
    """Raised when credentials are invalid."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password", HTTP_401_UNAUTHORIZED)


class DuplicateUserError(UserAuthenticationError):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str) -> None:
        super().__init__(f"User with email '{email}' already exists", HTTP_400_BAD_REQUEST)


class PasswordHashingError(BaseAppError):
    """The argon2 backend could not hash a password; not the caller's fault."""

    def __init__(self, detail: str = "Password hashing failed") -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


auth_exception_handler = create_exception_handler(logger)
