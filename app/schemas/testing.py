from pydantic import BaseModel

from app.schemas.profile import ProfileResponse
from app.schemas.user import UserResponse


class CleanDatabaseResponse(BaseModel):
    message: str
    deleted: dict[str, int]
    profiles_seeded: int


class SeedDataResponse(BaseModel):
    message: str
    profiles: list[ProfileResponse]
    user: UserResponse
    user_created: bool
