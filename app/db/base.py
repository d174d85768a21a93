"""
Database base module - imports all models for Alembic migration detection.

This module imports all SQLAlchemy models to ensure they are registered
with Alembic for automatic migration generation. While the imports appear
unused, they are essential for the migration system to work properly.
"""

from app.auth.models.user import User
from app.catalog.models.activity import Activity
from app.catalog.models.city import City
from app.trips.models.trip import Trip, TripActivity, TripStop

# Export all models for Alembic
__all__ = [
    "User",
    "Trip",
    "TripStop",
    "TripActivity",
    "City",
    "Activity",
]
