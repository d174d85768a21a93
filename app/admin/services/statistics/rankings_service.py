"""Popularity rankings of cities and activities.

A ranking is built in two stages: the usage table is grouped and ranked
by occurrence count, then the surviving keys are described with a single
batch lookup against the reference table.
"""

from collections import Counter
from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import structlog

from app.admin.schemas.admin_statistics import TopActivity, TopCity
from app.admin.services.statistics.store import (
    RankedKey,
    ReferenceTable,
    StatisticsStore,
    UsageTable,
)
from app.core.constants import (
    DEFAULT_RANKINGS_LIMIT,
    UNKNOWN_DISPLAY_DETAIL,
    UNKNOWN_DISPLAY_NAME,
)

logger = structlog.get_logger(__name__)

RowT = TypeVar("RowT")


@dataclass(frozen=True)
class RankingSpec(Generic[RowT]):
    """Describes one ranking: what to group, how to describe it, how to render it.

    Attributes:
        usage: Join table whose records are counted.
        group_key: Usage field the records are grouped by.
        reference: Table holding the descriptive row for each key.
        name_attr: Reference attribute shown as the display name.
        detail_attr: Reference attribute shown as the secondary label.
        build_row: Renders ``(name, detail, count)`` into the output row.
        id_attr: Reference attribute matched against the ranked key.
    """

    usage: UsageTable
    group_key: str
    reference: ReferenceTable
    name_attr: str
    detail_attr: str
    build_row: Callable[[str, str, int], RowT]
    id_attr: str = "id"


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record[name]
    return getattr(record, name)


def rank_records(records: Iterable[Any], key_field: str, limit: int) -> list[RankedKey]:
    """Group records by ``key_field`` and return the ``limit`` most frequent keys.

    Keys are ordered by count, highest first. Keys with equal counts keep
    the order in which they first appear in ``records``.

    Args:
        records: Mappings or objects exposing ``key_field``.
        key_field: Name of the grouping field.
        limit: Maximum number of keys to return. Non-positive values yield ``[]``.

    Returns:
        List of ``RankedKey`` of length ``min(limit, distinct keys)``.
    """
    if limit <= 0:
        return []
    counts = Counter(_field(record, key_field) for record in records)
    ordered = sorted(counts.items(), key=lambda item: -item[1])
    return [RankedKey(key, count) for key, count in ordered[:limit]]


def join_reference(
    ranked: list[RankedKey],
    reference_rows: Iterable[Any],
    spec: RankingSpec[RowT],
) -> list[RowT]:
    """Describe each ranked key with its reference row, keeping rank order.

    A key without a reference row is still reported, with the display name
    ``"Unknown"`` and an empty detail. When several reference rows share an
    id the first one wins.
    """
    by_id: dict[Hashable, Any] = {}
    for row in reference_rows:
        by_id.setdefault(_field(row, spec.id_attr), row)

    result = []
    for item in ranked:
        row = by_id.get(item.key)
        if row is None:
            logger.debug(
                "ranking_reference_missing", reference=spec.reference.value, key=str(item.key)
            )
            name, detail = UNKNOWN_DISPLAY_NAME, UNKNOWN_DISPLAY_DETAIL
        else:
            name = _field(row, spec.name_attr) or UNKNOWN_DISPLAY_NAME
            detail = _field(row, spec.detail_attr) or UNKNOWN_DISPLAY_DETAIL
        result.append(spec.build_row(name, detail, item.count))
    return result


class Ranker(Generic[RowT]):
    """Runs one ranking against a store."""

    def __init__(self, store: StatisticsStore, spec: RankingSpec[RowT], limit: int):
        self.store = store
        self.spec = spec
        self.limit = limit

    async def rank(self) -> list[RankedKey]:
        """Top keys of the usage table with their occurrence counts."""
        if self.limit <= 0:
            return []
        ranked = await self.store.grouped_counts(
            self.spec.usage, self.spec.group_key, self.limit
        )
        return list(ranked[: self.limit])

    async def enrich(self, ranked: list[RankedKey]) -> list[RowT]:
        """Describe ranked keys using one batch lookup on the reference table."""
        if not ranked:
            return []
        rows = await self.store.fetch_by_ids(self.spec.reference, [item.key for item in ranked])
        return join_reference(ranked, rows, self.spec)

    async def top(self) -> list[RowT]:
        return await self.enrich(await self.rank())


def _top_city(name: str, detail: str, count: int) -> TopCity:
    return TopCity(city=name, country=detail, tripCount=count)


def _top_activity(name: str, detail: str, count: int) -> TopActivity:
    return TopActivity(activity=name, category=detail, usageCount=count)


TOP_CITIES: RankingSpec[TopCity] = RankingSpec(
    usage=UsageTable.TRIP_STOPS,
    group_key="city_id",
    reference=ReferenceTable.CITIES,
    name_attr="name",
    detail_attr="country",
    build_row=_top_city,
)

TOP_ACTIVITIES: RankingSpec[TopActivity] = RankingSpec(
    usage=UsageTable.TRIP_ACTIVITIES,
    group_key="activity_id",
    reference=ReferenceTable.ACTIVITIES,
    name_attr="name",
    detail_attr="category",
    build_row=_top_activity,
)


class RankingsService:
    """Service for city and activity popularity rankings."""

    @staticmethod
    async def get_top_cities(
        store: StatisticsStore, limit: int = DEFAULT_RANKINGS_LIMIT
    ) -> list[TopCity]:
        """Get the most visited cities by number of trip stops.

        Args:
            store: Statistics store.
            limit: Maximum number of cities to return.

        Returns:
            List of TopCity, highest trip count first.
        """
        return await Ranker(store, TOP_CITIES, limit).top()

    @staticmethod
    async def get_top_activities(
        store: StatisticsStore, limit: int = DEFAULT_RANKINGS_LIMIT
    ) -> list[TopActivity]:
        """Get the activities most often included in trips.

        Args:
            store: Statistics store.
            limit: Maximum number of activities to return.

        Returns:
            List of TopActivity, highest usage count first.
        """
        return await Ranker(store, TOP_ACTIVITIES, limit).top()
