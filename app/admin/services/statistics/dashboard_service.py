"""Platform statistics orchestration."""

import time

import structlog

from app.admin.schemas.admin_statistics import AnalyticsResponse, PlatformStatsResponse
from app.admin.services.statistics.counting_service import CountingService
from app.admin.services.statistics.rankings_service import RankingsService
from app.admin.services.statistics.store import EntityKind, StatisticsStore
from app.admin.services.statistics.trend_service import TrendService
from app.core.concurrency import run_concurrently
from app.core.constants import DEFAULT_ANALYTICS_WINDOW_DAYS, DEFAULT_RANKINGS_LIMIT
from app.core.exceptions import StoreUnavailableError

logger = structlog.get_logger(__name__)


class PlatformStatisticsService:
    """Service composing counts, rankings and trends into dashboard reports."""

    @staticmethod
    async def build_report(
        store: StatisticsStore, limit: int = DEFAULT_RANKINGS_LIMIT
    ) -> PlatformStatsResponse:
        """Get platform-wide counts and the top cities and activities.

        The four counts and the two rankings do not depend on each other and
        are issued concurrently. The report is assembled only once all six
        have finished; if any of them fails the whole report fails.

        Args:
            store: Statistics store.
            limit: Maximum number of items in each ranking.

        Returns:
            PlatformStatsResponse.

        Raises:
            StoreUnavailableError: If any sub-query could not be answered.
        """
        start = time.perf_counter()
        try:
            (
                user_count,
                trip_count,
                city_count,
                activity_count,
                top_cities,
                top_activities,
            ) = await run_concurrently(
                CountingService.count(store, EntityKind.USER),
                CountingService.count(store, EntityKind.TRIP),
                CountingService.count(store, EntityKind.CITY),
                CountingService.count(store, EntityKind.ACTIVITY),
                RankingsService.get_top_cities(store, limit),
                RankingsService.get_top_activities(store, limit),
            )
        except StoreUnavailableError as e:
            logger.warning("platform_stats_failed", error=e.message, **e.details)
            raise

        report = PlatformStatsResponse(
            userCount=user_count,
            tripCount=trip_count,
            cityCount=city_count,
            activityCount=activity_count,
            topCities=top_cities,
            topActivities=top_activities,
        )
        logger.info(
            "platform_stats_built",
            users=user_count,
            trips=trip_count,
            cities=city_count,
            activities=activity_count,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return report

    @staticmethod
    async def build_analytics(
        store: StatisticsStore, window_days: int = DEFAULT_ANALYTICS_WINDOW_DAYS
    ) -> AnalyticsResponse:
        """Get trips created in the trailing window, bucketed by UTC day.

        Args:
            store: Statistics store.
            window_days: Trailing window length in days.

        Returns:
            AnalyticsResponse with the total and the per-day counts.
        """
        trend = await TrendService.build_trend(store, window_days)
        return AnalyticsResponse(recentTrips=trend.totalCount, tripsByDay=trend.byDay)
