"""Statistics schemas for admin dashboard."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from app.core.datetime_utils import UTCDatetime

# ============ Ranked Items ============


class TopCity(BaseModel):
    """City ranked by how many trip stops visit it."""

    city: str = Field(description="City name, or 'Unknown' if the city no longer exists")
    country: str = Field(description="Country name, empty if the city no longer exists")
    tripCount: int = Field(description="Number of trip stops in this city")


class TopActivity(BaseModel):
    """Activity ranked by how many trips include it."""

    activity: str = Field(description="Activity name, or 'Unknown' if it no longer exists")
    category: str = Field(description="Activity category, empty if it no longer exists")
    usageCount: int = Field(description="Number of times trips include this activity")


# ============ Platform Statistics ============


class PlatformStatsResponse(BaseModel):
    """Platform-wide counts and popularity rankings."""

    userCount: int = Field(ge=0)
    tripCount: int = Field(ge=0)
    cityCount: int = Field(ge=0)
    activityCount: int = Field(ge=0)
    topCities: list[TopCity] = Field(description="Most visited cities, highest first")
    topActivities: list[TopActivity] = Field(description="Most used activities, highest first")


# ============ Trends ============


class TripTrend(BaseModel):
    """Trips created in a trailing window, bucketed by UTC calendar day.

    Days without trips are absent from ``byDay``.
    """

    totalCount: int = Field(ge=0)
    byDay: dict[str, int] = Field(description="ISO date (YYYY-MM-DD) to trip count")


class AnalyticsResponse(BaseModel):
    """Usage analytics for the admin dashboard."""

    recentTrips: int = Field(ge=0, description="Trips created within the window")
    tripsByDay: dict[str, int] = Field(
        description="ISO date to trip count; a missing day means zero trips"
    )


# ============ Users ============


class UserOverview(BaseModel):
    """User row in the admin users list."""

    id: str
    email: str
    name: str
    role: str
    createdAt: UTCDatetime = Field(..., validation_alias="created_at")
    tripCount: int = Field(..., validation_alias="trip_count")

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: Any) -> str:
        """Convert UUID to string."""
        return str(v)

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }
