from app.errors.ai import (
    AiAuthenticationError,
    AiError,
    AiGenerationError,
    AiNetworkError,
    AiQuotaExceededError,
    ItineraryGenerationError,
    ai_exception_handler,
)
from app.errors.auth import (
    DuplicateUserError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    PasswordHashingError,
    UserAuthenticationError,
    auth_exception_handler,
)
from app.errors.base import BaseAppError, create_exception_handler
from app.errors.database import (
    DatabaseError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from app.errors.validation import (
    TripPlanRequestError,
    ValidationError,
    validation_error_handler,
    validation_exception_handler,
)

__all__ = [
    "AiAuthenticationError",
    "AiError",
    "AiGenerationError",
    "AiNetworkError",
    "AiQuotaExceededError",
    "BaseAppError",
    "DatabaseError",
    "DuplicateEntryError",
    "DuplicateUserError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "ItineraryGenerationError",
    "MissingTokenError",
    "PasswordHashingError",
    "RecordNotFoundError",
    "TripPlanRequestError",
    "UserAuthenticationError",
    "ValidationError",
    "ai_exception_handler",
    "auth_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "validation_error_handler",
    "validation_exception_handler",
]
