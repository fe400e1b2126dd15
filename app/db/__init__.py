"""Database handle, session dependency and seed helpers."""

from app.db.database import Database, get_database, get_session
from app.db.init_db import setup_database
from app.db.seed import DEFAULT_PROFILES, clean_database, seed_profiles

__all__ = [
    "DEFAULT_PROFILES",
    "Database",
    "clean_database",
    "get_database",
    "get_session",
    "seed_profiles",
    "setup_database",
]
