"""Statistics module for the admin dashboard.

This module is split into focused services:
- store: Read-only query contract the services depend on
- base: Window helpers
- counting_service: Scalar entity counts
- rankings_service: City and activity popularity rankings
- trend_service: Trips bucketed by UTC day
- user_service: Users with their trip counts
- dashboard_service: Report orchestration
"""

from app.admin.services.statistics.base import get_window_start
from app.admin.services.statistics.counting_service import CountingService
from app.admin.services.statistics.dashboard_service import PlatformStatisticsService
from app.admin.services.statistics.rankings_service import (
    TOP_ACTIVITIES,
    TOP_CITIES,
    Ranker,
    RankingSpec,
    RankingsService,
    join_reference,
    rank_records,
)
from app.admin.services.statistics.store import (
    EntityKind,
    RankedKey,
    ReferenceTable,
    StatisticsStore,
    UsageTable,
)
from app.admin.services.statistics.trend_service import TrendService, bucket_by_day
from app.admin.services.statistics.user_service import UserStatisticsService

__all__ = [
    # Store contract
    "StatisticsStore",
    "EntityKind",
    "UsageTable",
    "ReferenceTable",
    "RankedKey",
    # Pure helpers
    "get_window_start",
    "rank_records",
    "join_reference",
    "bucket_by_day",
    # Rankings
    "Ranker",
    "RankingSpec",
    "TOP_CITIES",
    "TOP_ACTIVITIES",
    # Services
    "CountingService",
    "RankingsService",
    "TrendService",
    "UserStatisticsService",
    "PlatformStatisticsService",
]
