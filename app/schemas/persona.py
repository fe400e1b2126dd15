"""
Persona schemas.

A persona is split into five named blocks. Every block is a closed record:
unknown keys are rejected so stored personas keep a predictable shape.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, NonNegativeInt

from app.configs.settings import MAX_INTERESTS_COUNT


class _Block(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class PersonalPreferences(_Block):
    interests: list[str] = Field(default_factory=list, max_length=MAX_INTERESTS_COUNT)
    travel_style: str | None = Field(default=None, alias="travelStyle")
    pace: Literal["relaxed", "moderate", "fast"] | None = None
    accommodation_type: str | None = Field(default=None, alias="accommodationType")
    dining_preferences: list[str] = Field(default_factory=list, alias="diningPreferences")


class TravelConstraints(_Block):
    dietary_restrictions: list[str] = Field(default_factory=list, alias="dietaryRestrictions")
    max_walking_minutes: NonNegativeInt | None = Field(default=None, alias="maxWalkingMinutes")
    avoid: list[str] = Field(default_factory=list)
    notes: str | None = None


class BudgetDetails(_Block):
    total: NonNegativeFloat | None = None
    daily: NonNegativeFloat | None = None
    currency: str = Field(default="USD", min_length=3, max_length=3)
    accommodation_percent: float | None = Field(
        default=None,
        ge=0,
        le=100,
        alias="accommodationPercent",
    )
    flexibility: Literal["strict", "moderate", "flexible"] | None = None


class AccessibilityNeeds(_Block):
    wheelchair: bool = False
    limited_mobility: bool = Field(default=False, alias="limitedMobility")
    visual_impairment: bool = Field(default=False, alias="visualImpairment")
    hearing_impairment: bool = Field(default=False, alias="hearingImpairment")
    notes: str | None = None

    @property
    def needs_step_free_access(self) -> bool:
        return self.wheelchair or self.limited_mobility


class GroupDynamics(_Block):
    group_size: int | None = Field(default=None, ge=1, alias="groupSize")
    children: NonNegativeInt = 0
    seniors: NonNegativeInt = 0
    group_type: Literal["solo", "couple", "family", "friends", "business"] | None = Field(
        default=None,
        alias="groupType",
    )


class PersonaBlocks(BaseModel):
    """The optional blocks shared by create and update payloads."""

    model_config = ConfigDict(populate_by_name=True)

    constraints: TravelConstraints | None = None
    budget_details: BudgetDetails | None = Field(default=None, alias="budgetDetails")
    accessibility_needs: AccessibilityNeeds | None = Field(
        default=None,
        alias="accessibility",
    )
    group_dynamics: GroupDynamics | None = Field(default=None, alias="groupDynamics")


class PersonaUpsert(PersonaBlocks):
    """Payload for creating or replacing the caller's persona."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "baseProfileId": 3,
                "personalPreferences": {
                    "interests": ["street food", "markets"],
                    "pace": "moderate",
                },
                "budgetDetails": {"total": 2500, "currency": "EUR"},
                "accessibility": {"wheelchair": False},
                "groupDynamics": {"groupSize": 2, "groupType": "couple"},
            },
        },
    )

    base_profile_id: int = Field(..., alias="baseProfileId")
    personal_preferences: PersonalPreferences = Field(..., alias="personalPreferences")


class PersonaUpdate(PersonaBlocks):
    """Partial update; only the supplied blocks are replaced."""

    base_profile_id: int | None = Field(default=None, alias="baseProfileId")
    personal_preferences: PersonalPreferences | None = Field(
        default=None,
        alias="personalPreferences",
    )


class PersonaResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    user_id: int
    base_profile_id: int
    base_profile_name: str | None = None
    personal_preferences: PersonalPreferences
    constraints: TravelConstraints | None = None
    budget_details: BudgetDetails | None = None
    accessibility_needs: AccessibilityNeeds | None = None
    group_dynamics: GroupDynamics | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PersonaListResponse(BaseModel):
    personas: list[PersonaResponse]


class PersonaMutationResponse(BaseModel):
    message: str
    persona: PersonaResponse
