"""User statistics service."""

from app.admin.schemas.admin_statistics import UserOverview
from app.admin.services.statistics.store import StatisticsStore


class UserStatisticsService:
    """Service for user-related statistics."""

    @staticmethod
    async def list_users(store: StatisticsStore) -> list[UserOverview]:
        """List every user with the number of trips they own, newest first."""
        rows = await store.list_users_with_trip_counts()
        return [UserOverview.model_validate(row) for row in rows]
