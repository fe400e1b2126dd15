from pydantic import BaseModel, ConfigDict, EmailStr, Field, SecretStr, field_validator

from app.configs.settings import MAX_NAME_LENGTH, MIN_PASSWORD_LENGTH
from app.schemas.user import UserResponse


class RegisterRequest(BaseModel):
    """Registration payload."""

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        strict=True,
        json_schema_extra={
            "example": {
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "ada@example.com",
                "password": "pw123456",
            },
        },
    )

    first_name: str | None = Field(
        alias="firstName",
        default=None,
        max_length=MAX_NAME_LENGTH,
        description="User first name",
    )
    last_name: str | None = Field(
        alias="lastName",
        default=None,
        max_length=MAX_NAME_LENGTH,
        description="User last name",
    )
    email: EmailStr = Field(..., description="Email address")
    password: SecretStr = Field(..., min_length=MIN_PASSWORD_LENGTH, description="Password")

    @field_validator("email")
    @classmethod
    def normalise_email(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("first_name", "last_name")
    @classmethod
    def strip_names(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


class LoginRequest(BaseModel):
    """Login payload."""

    model_config = ConfigDict(frozen=True, strict=True)

    email: EmailStr
    password: SecretStr = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def normalise_email(cls, value: str) -> str:
        return value.strip().lower()


class AuthResponse(BaseModel):
    """Token plus the user it was issued for."""

    token: str
    user: UserResponse


class TokenData(BaseModel):
    """Claims extracted from a validated access token."""

    user_id: int
    email: str
    jti: str
    token_type: str = "access"
