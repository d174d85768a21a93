from app.trips.models.trip import Trip, TripActivity, TripStop

__all__ = [
    "Trip",
    "TripStop",
    "TripActivity",
]
