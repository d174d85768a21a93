"""Statistics routes for admin dashboard.

Admin authentication is handled by an upstream gateway and is not part
of this service.
"""

from fastapi import APIRouter, Depends, Query

from app.admin.dependencies import get_statistics_store
from app.admin.schemas.admin_statistics import (
    AnalyticsResponse,
    PlatformStatsResponse,
    UserOverview,
)
from app.admin.services.statistics import (
    PlatformStatisticsService,
    StatisticsStore,
    UserStatisticsService,
)
from app.core.config import settings
from app.core.constants import MAX_ANALYTICS_WINDOW_DAYS, MAX_RANKINGS_LIMIT

router = APIRouter(tags=["admin-statistics"])


@router.get("/stats", response_model=PlatformStatsResponse)
async def get_platform_stats(
    limit: int = Query(
        settings.STATS_RANKING_LIMIT,
        ge=1,
        le=MAX_RANKINGS_LIMIT,
        description="Number of items per ranking",
    ),
    store: StatisticsStore = Depends(get_statistics_store),
) -> PlatformStatsResponse:
    """
    Get platform statistics.

    Returns:
    - User, trip, city and activity counts
    - Top cities by number of trip stops
    - Top activities by number of trips including them
    """
    return await PlatformStatisticsService.build_report(store, limit)


@router.get("/analytics", response_model=AnalyticsResponse)
async def get_analytics(
    days: int = Query(
        settings.ANALYTICS_WINDOW_DAYS,
        ge=1,
        le=MAX_ANALYTICS_WINDOW_DAYS,
        description="Trailing window in days",
    ),
    store: StatisticsStore = Depends(get_statistics_store),
) -> AnalyticsResponse:
    """
    Get usage analytics.

    Returns:
    - Number of trips created in the window
    - Trips per UTC day (days without trips are omitted)
    """
    return await PlatformStatisticsService.build_analytics(store, days)


@router.get("/users", response_model=list[UserOverview])
async def list_users(
    store: StatisticsStore = Depends(get_statistics_store),
) -> list[UserOverview]:
    """List users with their trip counts, newest first."""
    return await UserStatisticsService.list_users(store)
