"""In-memory statistics store for exercising services without a database."""

import uuid
from collections import Counter
from collections.abc import Collection, Hashable, Mapping
from datetime import UTC, datetime
from typing import Any

from app.admin.services.statistics import (
    EntityKind,
    RankedKey,
    ReferenceTable,
    UsageTable,
    rank_records,
)
from app.core.datetime_utils import as_utc
from app.core.exceptions import StoreUnavailableError


class InMemoryStatisticsStore:
    """Statistics store over plain lists of dicts.

    Records are kept in insertion order, which is the store's native order
    for equal counts. ``calls`` records every primitive invoked; any
    primitive named in ``failing`` raises ``StoreUnavailableError``.
    """

    def __init__(self) -> None:
        self.users: list[dict[str, Any]] = []
        self.trips: list[dict[str, Any]] = []
        self.cities: list[dict[str, Any]] = []
        self.activities: list[dict[str, Any]] = []
        self.trip_stops: list[dict[str, Any]] = []
        self.trip_activities: list[dict[str, Any]] = []
        self.calls: list[str] = []
        self.failing: set[str] = set()

    # ---- fixture helpers ----

    def add_user(
        self,
        email: str,
        name: str = "Traveller",
        role: str = "user",
        created_at: datetime | None = None,
    ) -> dict[str, Any]:
        user = {
            "id": uuid.uuid4(),
            "email": email,
            "name": name,
            "role": role,
            "created_at": created_at or datetime.now(UTC),
        }
        self.users.append(user)
        return user

    def add_trip(
        self, owner: dict[str, Any] | None = None, created_at: datetime | None = None
    ) -> dict[str, Any]:
        trip = {
            "id": uuid.uuid4(),
            "owner_id": owner["id"] if owner else uuid.uuid4(),
            "created_at": created_at or datetime.now(UTC),
        }
        self.trips.append(trip)
        return trip

    def add_city(self, city_id: str, name: str, country: str) -> dict[str, Any]:
        city = {"id": city_id, "name": name, "country": country}
        self.cities.append(city)
        return city

    def add_activity(self, activity_id: Hashable, name: str, category: str) -> dict[str, Any]:
        activity = {"id": activity_id, "name": name, "category": category}
        self.activities.append(activity)
        return activity

    def add_stops(self, city_id: str, times: int = 1) -> None:
        for _ in range(times):
            self.trip_stops.append({"trip_id": uuid.uuid4(), "city_id": city_id})

    def add_trip_activities(self, activity_id: Hashable, times: int = 1) -> None:
        for _ in range(times):
            self.trip_activities.append({"trip_id": uuid.uuid4(), "activity_id": activity_id})

    # ---- StatisticsStore ----

    def _record(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.failing:
            raise StoreUnavailableError(
                f"Statistics store unavailable during {operation}", operation=operation
            )

    def _entities(self, kind: EntityKind) -> list[dict[str, Any]]:
        return {
            EntityKind.USER: self.users,
            EntityKind.TRIP: self.trips,
            EntityKind.CITY: self.cities,
            EntityKind.ACTIVITY: self.activities,
        }[kind]

    async def count(self, kind: EntityKind) -> int:
        self._record("count")
        return len(self._entities(kind))

    async def grouped_counts(
        self, usage: UsageTable, group_key: str, limit: int
    ) -> list[RankedKey]:
        self._record("grouped_counts")
        records = self.trip_stops if usage is UsageTable.TRIP_STOPS else self.trip_activities
        return rank_records(records, group_key, limit)

    async def fetch_by_ids(
        self, reference: ReferenceTable, ids: Collection[Hashable]
    ) -> list[Mapping[str, Any]]:
        self._record("fetch_by_ids")
        rows = self.cities if reference is ReferenceTable.CITIES else self.activities
        wanted = set(ids)
        return [row for row in rows if row["id"] in wanted]

    async def fetch_created_since(self, kind: EntityKind, since: datetime) -> list[datetime]:
        self._record("fetch_created_since")
        return [
            row["created_at"]
            for row in self._entities(kind)
            if as_utc(row["created_at"]) >= as_utc(since)
        ]

    async def list_users_with_trip_counts(self) -> list[Mapping[str, Any]]:
        self._record("list_users_with_trip_counts")
        trips_per_owner = Counter(trip["owner_id"] for trip in self.trips)
        users = sorted(self.users, key=lambda u: as_utc(u["created_at"]), reverse=True)
        return [{**user, "trip_count": trips_per_owner[user["id"]]} for user in users]
