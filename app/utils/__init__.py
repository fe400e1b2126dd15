"""Utility helper functions."""

from app.utils.helpers import add_minutes, get_summary, host, today_str, trip_length, utc_now

__all__ = [
    "add_minutes",
    "get_summary",
    "host",
    "today_str",
    "trip_length",
    "utc_now",
]
