"""Time-bucketed trends for the analytics view."""

from collections import Counter
from collections.abc import Iterable
from datetime import datetime

import structlog

from app.admin.schemas.admin_statistics import TripTrend
from app.admin.services.statistics.base import get_window_start
from app.admin.services.statistics.store import EntityKind, StatisticsStore
from app.core.constants import DEFAULT_ANALYTICS_WINDOW_DAYS
from app.core.datetime_utils import utc_day

logger = structlog.get_logger(__name__)


def bucket_by_day(timestamps: Iterable[datetime]) -> dict[str, int]:
    """Count timestamps per UTC calendar day.

    Days are keyed ``YYYY-MM-DD`` in ascending order. Naive timestamps are
    read as UTC; aware ones are converted to UTC before truncation, so the
    server's local zone never moves a record to another day. Days with no
    timestamps are absent.
    """
    counts = Counter(utc_day(ts) for ts in timestamps)
    return {day: counts[day] for day in sorted(counts)}


class TrendService:
    """Service for trailing-window trends."""

    @staticmethod
    async def build_trend(
        store: StatisticsStore,
        window_days: int = DEFAULT_ANALYTICS_WINDOW_DAYS,
        now: datetime | None = None,
        kind: EntityKind = EntityKind.TRIP,
    ) -> TripTrend:
        """Bucket records of ``kind`` created in the last ``window_days`` days.

        Args:
            store: Statistics store.
            window_days: Trailing window length in days.
            now: Reference instant. Defaults to the current UTC time.
            kind: Timestamped entity to bucket.

        Returns:
            TripTrend where ``totalCount`` equals the sum of ``byDay``.
        """
        since = get_window_start(window_days, now)
        timestamps = await store.fetch_created_since(kind, since)
        by_day = bucket_by_day(timestamps)

        logger.info(
            "trend_built",
            kind=kind.value,
            window_days=window_days,
            total=len(timestamps),
            days=len(by_day),
        )
        return TripTrend(totalCount=len(timestamps), byDay=by_day)
