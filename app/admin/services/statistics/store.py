"""Read-only query contract the statistics services depend on.

Services receive a ``StatisticsStore`` instead of a database session so the
ranking and bucketing logic can run against any backend, including an
in-memory fixture.
"""

from collections.abc import Collection, Hashable, Mapping
from datetime import datetime
from enum import Enum
from typing import Any, NamedTuple, Protocol


class EntityKind(str, Enum):
    """Entities the store can count."""

    USER = "user"
    TRIP = "trip"
    CITY = "city"
    ACTIVITY = "activity"


class UsageTable(str, Enum):
    """Join tables used as co-occurrence signals for rankings."""

    TRIP_STOPS = "trip_stops"
    TRIP_ACTIVITIES = "trip_activities"


class ReferenceTable(str, Enum):
    """Tables that describe ranked keys."""

    CITIES = "cities"
    ACTIVITIES = "activities"


class RankedKey(NamedTuple):
    """A grouping key and how many usage records carry it."""

    key: Hashable
    count: int


class StatisticsStore(Protocol):
    """Queryable snapshot of the trip-planning dataset.

    Every primitive is an independent read. Implementations raise
    ``StoreUnavailableError`` when the backend cannot be reached in time.
    """

    async def count(self, kind: EntityKind) -> int: ...

    async def grouped_counts(
        self, usage: UsageTable, group_key: str, limit: int
    ) -> list[RankedKey]:
        """Top ``limit`` values of ``usage.group_key`` by occurrence count, highest first.

        Keys with equal counts keep the store's native order, which must be
        the same on every call against unchanged data.
        """
        ...

    async def fetch_by_ids(
        self, reference: ReferenceTable, ids: Collection[Hashable]
    ) -> list[Mapping[str, Any]]:
        """Rows of ``reference`` whose id is in ``ids``, fetched in one batch."""
        ...

    async def fetch_created_since(self, kind: EntityKind, since: datetime) -> list[datetime]:
        """Creation timestamps of ``kind`` rows created at or after ``since``."""
        ...

    async def list_users_with_trip_counts(self) -> list[Mapping[str, Any]]:
        """Every user with ``id``, ``email``, ``name``, ``role``, ``created_at``, ``trip_count``.

        Newest users first.
        """
        ...
