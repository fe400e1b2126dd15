"""Seed data and reset helpers for the travel planner database."""

from logging import getLogger
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.configs import file_logger
from app.models import (
    ActivityDB,
    ItineraryDayDB,
    TravelerProfileDB,
    TripDB,
    UserDB,
    UserPersonaDB,
)

logger = file_logger(getLogger(__name__))

DEMO_USER_EMAIL = "test@example.com"
DEMO_USER_PASSWORD = "password123"  # noqa: S105
DEMO_USER_FIRST_NAME = "Test"
DEMO_USER_LAST_NAME = "User"

DEFAULT_PROFILES: list[dict[str, Any]] = [
    {
        "name": "Mobility-Conscious Traveler",
        "description": (
            "Designed for travelers who need wheelchair access or prefer minimal walking"
        ),
        "preferences": {
            "transportation": ["taxi", "shuttle"],
            "accessibility": ["wheelchair_access", "elevators", "ramps"],
            "rest_frequency": "high",
            "walking_distance": "minimal",
        },
        "constraints": {
            "max_walking_distance": 200,
            "requires_elevator": True,
            "needs_rest_breaks": True,
        },
    },
    {
        "name": "Family with Young Children",
        "description": (
            "Perfect for families traveling with kids, featuring shorter activities "
            "and child-friendly venues"
        ),
        "preferences": {
            "activity_duration": "short",
            "venues": ["playground", "aquarium", "zoo", "park"],
            "meal_requirements": ["kids_menu"],
            "rest_time": "afternoon",
        },
        "constraints": {
            "max_activity_duration": 120,
            "needs_nap_time": True,
            "child_friendly_only": True,
        },
    },
    {
        "name": "Foodie / Culinary Explorer",
        "description": (
            "For travelers who want to experience local cuisine, food tours, "
            "and culinary adventures"
        ),
        "preferences": {
            "focus": ["restaurants", "food_tours", "markets", "cooking_classes"],
            "meal_priority": "high",
            "local_cuisine": True,
        },
        "constraints": {
            "min_food_activities": 3,
            "restaurant_reservations": True,
            "dietary_considerations": True,
        },
    },
    {
        "name": "Adventure / Active Traveler",
        "description": (
            "High-energy itineraries for travelers who love physical activities "
            "and outdoor adventures"
        ),
        "preferences": {
            "activities": ["hiking", "biking", "kayaking", "climbing"],
            "energy_level": "high",
            "outdoor_focus": True,
            "early_start": True,
        },
        "constraints": {
            "min_physical_activity": 2,
            "fitness_level_required": "moderate",
            "weather_dependent": True,
        },
    },
    {
        "name": "Cultural Enthusiast / History Buff",
        "description": (
            "In-depth exploration of museums, historical sites, and cultural landmarks"
        ),
        "preferences": {
            "venues": ["museums", "galleries", "historic_sites", "tours"],
            "depth": "detailed",
            "guided_tours": True,
            "traditional_dining": True,
        },
        "constraints": {
            "min_cultural_sites": 2,
            "guided_tour_preference": True,
            "educational_focus": True,
        },
    },
]


async def seed_profiles(session: AsyncSession) -> int:
    """
    Insert the default traveler profiles when the table is empty.

    Args:
        session: Open database session; the caller commits.

    Returns:
        int: Number of profiles inserted (0 when already seeded).
    """
    existing = await session.scalar(select(func.count()).select_from(TravelerProfileDB))
    if existing:
        logger.debug("Traveler profiles already exist, skipping insertion")
        return 0

    session.add_all(TravelerProfileDB(**profile) for profile in DEFAULT_PROFILES)
    await session.flush()
    logger.info(f"Inserted {len(DEFAULT_PROFILES)} default traveler profiles")
    return len(DEFAULT_PROFILES)


async def clean_database(session: AsyncSession) -> dict[str, int]:
    """
    Delete every user-owned row, children first, keeping the traveler profiles.

    Args:
        session: Open database session; the caller commits.

    Returns:
        dict[str, int]: Deleted row count per table.
    """
    deleted: dict[str, int] = {}
    for model in (ActivityDB, ItineraryDayDB, TripDB, UserPersonaDB, UserDB):
        result = await session.execute(delete(model))
        deleted[model.__tablename__] = result.rowcount or 0

    logger.info(f"Database cleaned: {deleted}")
    return deleted
