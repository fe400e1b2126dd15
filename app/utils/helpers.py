from collections.abc import MutableMapping
from datetime import UTC, date, datetime, timedelta
from typing import Any

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute, Match, Route


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return today's date as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(
        "%Y-%m-%d %H:%M:%S",
    )


def utc_now() -> datetime:
    return datetime.now(UTC)


def trip_length(start: date, end: date) -> int:
    """Number of calendar days covered by a trip, both ends included."""
    return (end - start).days + 1


def add_minutes(start: str, minutes: int) -> str:
    """
    Shift an ``HH:MM`` clock time by a number of minutes, wrapping at midnight.

    Args:
        start: Clock time as ``HH:MM``.
        minutes: Minutes to add.

    Returns:
        str: The shifted clock time as ``HH:MM``.
    """
    base = datetime.strptime(start, "%H:%M")
    return (base + timedelta(minutes=minutes)).strftime("%H:%M")


def get_summary(request: Request) -> str | None:
    """Extract route summary from request."""

    scope: MutableMapping[str, Any] = request.scope
    app: FastAPI = scope["app"]
    routes: list[BaseRoute] = app.routes

    summary = None
    for route in routes:
        is_api_route = type(route) is APIRoute
        is_route = type(route) is Route
        if is_api_route and route.matches(scope)[0] == Match.FULL:
            summary = route.summary
            break
        if is_route and route.matches(scope)[0] == Match.FULL:
            summary = route.name
            break

    return summary
