"""Activity templates used by the template itinerary generator.

Titles, descriptions, locations and tips may contain ``{destination}``,
which is filled in when an activity is planned.
"""

from dataclasses import dataclass

from app.schemas.itinerary import PersonaType, TimeSlot


@dataclass(frozen=True, slots=True)
class ActivityTemplate:
    title: str
    description: str
    location: str
    category: str
    base_cost: float
    difficulty: str = "easy"
    reservation_required: bool = False
    accessibility: str | None = None
    tips: str | None = None


@dataclass(frozen=True, slots=True)
class SlotTiming:
    start_time: str
    duration_minutes: int


SLOT_TIMINGS: dict[TimeSlot, SlotTiming] = {
    "morning": SlotTiming("09:00", 150),
    "afternoon": SlotTiming("14:00", 180),
    "evening": SlotTiming("19:00", 120),
}

ARRIVAL = ActivityTemplate(
    title="Welcome to {destination}",
    description="Settle in and get oriented with your new destination",
    location="{destination} - Hotel/City Center",
    category="orientation",
    base_cost=10,
    tips="Take time to rest and explore your immediate surroundings",
)

DEPARTURE = ActivityTemplate(
    title="Farewell {destination}",
    description="Last-minute shopping and final views of the city",
    location="{destination} - Shopping District/Airport",
    category="departure",
    base_cost=20,
    tips="Allow extra time for transportation to the airport",
)

TEMPLATES: dict[PersonaType, dict[TimeSlot, tuple[ActivityTemplate, ...]]] = {
    "adventure": {
        "morning": (
            ActivityTemplate(
                title="Hiking Adventure in {destination}",
                description="Explore scenic trails and natural landscapes around {destination}",
                location="{destination} - Mountain trails or nature parks",
                category="adventure",
                base_cost=25,
                difficulty="moderate",
                accessibility="fitness required",
                tips="Bring comfortable hiking shoes and water",
            ),
            ActivityTemplate(
                title="Bike Tour of {destination}",
                description="Cycle through the city and discover hidden gems",
                location="{destination} - City bike routes",
                category="adventure",
                base_cost=35,
                tips="Most tours provide bikes and helmets",
            ),
        ),
        "afternoon": (
            ActivityTemplate(
                title="Rock Climbing Experience",
                description="Challenge yourself with guided climbing sessions",
                location="{destination} - Local climbing spots",
                category="adventure",
                base_cost=75,
                difficulty="hard",
                reservation_required=True,
                accessibility="fitness required",
            ),
            ActivityTemplate(
                title="Water Sports Adventure",
                description="Enjoy kayaking, paddleboarding, or boat tours",
                location="{destination} - Waterfront area",
                category="adventure",
                base_cost=50,
                difficulty="moderate",
            ),
        ),
        "evening": (
            ActivityTemplate(
                title="Sunset Photography Walk",
                description="Capture sunset views from the best vantage points",
                location="{destination} - Scenic viewpoints",
                category="adventure",
                base_cost=15,
            ),
        ),
    },
    "cultural": {
        "morning": (
            ActivityTemplate(
                title="Historical Museum Tour",
                description="Discover the history and heritage of {destination}",
                location="{destination} - Main History Museum",
                category="cultural",
                base_cost=20,
                tips="Many museums offer audio guides in multiple languages",
            ),
            ActivityTemplate(
                title="Architectural Walking Tour",
                description="Explore iconic buildings and architectural landmarks",
                location="{destination} - Historic District",
                category="cultural",
                base_cost=15,
            ),
        ),
        "afternoon": (
            ActivityTemplate(
                title="Art Gallery Experience",
                description="Visit contemporary and classical art collections",
                location="{destination} - Art District",
                category="cultural",
                base_cost=25,
            ),
            ActivityTemplate(
                title="Cultural Performance",
                description="Attend traditional music, dance, or theater performances",
                location="{destination} - Cultural Center",
                category="cultural",
                base_cost=45,
                reservation_required=True,
            ),
        ),
        "evening": (
            ActivityTemplate(
                title="Traditional Dinner Experience",
                description="Enjoy authentic local cuisine in a cultural setting",
                location="{destination} - Traditional Restaurant",
                category="dining",
                base_cost=60,
                reservation_required=True,
            ),
        ),
    },
    "foodie": {
        "morning": (
            ActivityTemplate(
                title="Local Market Food Tour",
                description="Sample fresh local produce and street food",
                location="{destination} - Central Market",
                category="culinary",
                base_cost=30,
            ),
            ActivityTemplate(
                title="Coffee Culture Experience",
                description="Learn about local coffee traditions with a tasting",
                location="{destination} - Historic Coffee District",
                category="culinary",
                base_cost=20,
            ),
        ),
        "afternoon": (
            ActivityTemplate(
                title="Cooking Class",
                description="Learn to prepare traditional {destination} dishes",
                location="{destination} - Culinary School",
                category="culinary",
                base_cost=85,
                reservation_required=True,
                tips="Classes often include lunch and recipes to take home",
            ),
            ActivityTemplate(
                title="Food Walking Tour",
                description="Taste your way through the best local eateries",
                location="{destination} - Food District",
                category="culinary",
                base_cost=55,
            ),
        ),
        "evening": (
            ActivityTemplate(
                title="Fine Dining Experience",
                description="Enjoy a multi-course meal at a renowned restaurant",
                location="{destination} - Upscale Restaurant",
                category="dining",
                base_cost=120,
                reservation_required=True,
            ),
            ActivityTemplate(
                title="Wine Tasting Evening",
                description="Sample local wines with expert guidance",
                location="{destination} - Wine Bar",
                category="culinary",
                base_cost=45,
            ),
        ),
    },
    "family": {
        "morning": (
            ActivityTemplate(
                title="Children's Museum Visit",
                description="Interactive exhibits designed for young minds",
                location="{destination} - Children's Museum",
                category="family",
                base_cost=15,
                accessibility="family friendly, stroller accessible",
            ),
            ActivityTemplate(
                title="Zoo or Aquarium Tour",
                description="Meet animals from around the world",
                location="{destination} - Zoo/Aquarium",
                category="family",
                base_cost=25,
                accessibility="family friendly",
            ),
        ),
        "afternoon": (
            ActivityTemplate(
                title="Family-Friendly Park Day",
                description="Enjoy playgrounds, picnic areas, and outdoor activities",
                location="{destination} - Central Park",
                category="family",
                base_cost=5,
                accessibility="family friendly, stroller accessible",
            ),
            ActivityTemplate(
                title="Interactive Science Center",
                description="Hands-on science experiments and demonstrations",
                location="{destination} - Science Museum",
                category="family",
                base_cost=20,
                accessibility="family friendly",
            ),
        ),
        "evening": (
            ActivityTemplate(
                title="Family Restaurant",
                description="Kid-friendly dining with special menus",
                location="{destination} - Family Restaurant",
                category="dining",
                base_cost=40,
                accessibility="family friendly, high chairs",
            ),
        ),
    },
    "mobility": {
        "morning": (
            ActivityTemplate(
                title="Accessible Museum Tour",
                description="Fully accessible museum with elevator and wheelchair access",
                location="{destination} - Accessible Museum",
                category="cultural",
                base_cost=15,
                accessibility="wheelchair accessible, elevator, audio guide",
            ),
            ActivityTemplate(
                title="Scenic Drive Tour",
                description="Comfortable vehicle tour of the city highlights",
                location="{destination} - City Tour Route",
                category="sightseeing",
                base_cost=35,
                accessibility="wheelchair accessible",
            ),
        ),
        "afternoon": (
            ActivityTemplate(
                title="Accessible Garden Visit",
                description="Botanical gardens with paved paths",
                location="{destination} - Botanical Gardens",
                category="nature",
                base_cost=10,
                accessibility="wheelchair accessible, paved paths",
            ),
        ),
        "evening": (
            ActivityTemplate(
                title="Accessible Restaurant",
                description="Dining with full accessibility features",
                location="{destination} - Accessible Restaurant",
                category="dining",
                base_cost=50,
                accessibility="wheelchair accessible, accessible restrooms",
            ),
        ),
    },
}

DAY_THEMES: dict[PersonaType, tuple[str, ...]] = {
    "adventure": ("Outdoor Exploration", "Active Adventures", "Nature & Thrills"),
    "cultural": ("Historical Discovery", "Art & Architecture", "Local Traditions"),
    "foodie": ("Culinary Journey", "Taste Exploration", "Food & Culture"),
    "family": ("Family Fun", "Educational Adventures", "Kid-Friendly Activities"),
    "mobility": ("Comfortable Touring", "Accessible Exploration", "Relaxed Discovery"),
}

ARRIVAL_THEME = "Arrival & Orientation"
DEPARTURE_THEME = "Farewell & Departure"

PERSONA_TIPS: dict[PersonaType, tuple[str, ...]] = {
    "adventure": (
        "Check the weather forecast before outdoor activities",
        "Book guided climbs and water sports a few days ahead",
        "Pack layers, sunscreen and a refillable water bottle",
    ),
    "cultural": (
        "Look for combined museum passes to save on entry fees",
        "Many sites offer free entry on certain days of the month",
        "Guided tours often need to be booked in advance",
    ),
    "foodie": (
        "Reserve popular restaurants well before you arrive",
        "Markets are freshest and busiest in the early morning",
        "Ask locals for their favourite neighbourhood spots",
    ),
    "family": (
        "Plan a quiet break in the early afternoon for younger children",
        "Check for family tickets at zoos and museums",
        "Keep snacks and water handy between activities",
    ),
    "mobility": (
        "Confirm step-free access with venues before visiting",
        "Pre-book accessible taxis or shuttles",
        "Leave extra time between activities to rest",
    ),
}
