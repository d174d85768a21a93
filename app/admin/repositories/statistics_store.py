"""SQLAlchemy implementation of the statistics store."""

import asyncio
from collections.abc import Callable, Collection, Hashable, Mapping
from datetime import datetime
from typing import Any, TypeVar

import structlog
from sqlalchemy import func, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.admin.services.statistics.store import (
    EntityKind,
    RankedKey,
    ReferenceTable,
    UsageTable,
)
from app.auth.models.user import User
from app.catalog.models.activity import Activity
from app.catalog.models.city import City
from app.core.constants import DEFAULT_STORE_QUERY_TIMEOUT_SECONDS
from app.core.datetime_utils import as_utc
from app.core.exceptions import StoreUnavailableError, ValidationError
from app.core.repository import ReadRepository
from app.trips.models.trip import Trip, TripActivity, TripStop

logger = structlog.get_logger(__name__)

T = TypeVar("T")

ENTITY_MODELS: dict[EntityKind, type[Any]] = {
    EntityKind.USER: User,
    EntityKind.TRIP: Trip,
    EntityKind.CITY: City,
    EntityKind.ACTIVITY: Activity,
}

USAGE_MODELS: dict[UsageTable, type[Any]] = {
    UsageTable.TRIP_STOPS: TripStop,
    UsageTable.TRIP_ACTIVITIES: TripActivity,
}

REFERENCE_MODELS: dict[ReferenceTable, type[Any]] = {
    ReferenceTable.CITIES: City,
    ReferenceTable.ACTIVITIES: Activity,
}


def _as_mapping(row: Any) -> dict[str, Any]:
    return {attr.key: getattr(row, attr.key) for attr in inspect(row).mapper.column_attrs}


class SqlAlchemyStatisticsStore:
    """Statistics store backed by a relational database.

    Each primitive runs in a worker thread with its own session, so several
    primitives can be awaited concurrently. Every call is bounded by
    ``timeout_seconds``. The store only issues SELECTs.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        timeout_seconds: float = DEFAULT_STORE_QUERY_TIMEOUT_SECONDS,
    ):
        self.session_factory = session_factory
        self.timeout_seconds = timeout_seconds

    async def _run(self, operation: str, query: Callable[[Session], T]) -> T:
        def work() -> T:
            with self.session_factory() as db:
                return query(db)

        try:
            async with asyncio.timeout(self.timeout_seconds):
                return await asyncio.to_thread(work)
        except TimeoutError as e:
            logger.warning(
                "statistics_store_unavailable",
                operation=operation,
                reason="timeout",
                timeout_seconds=self.timeout_seconds,
            )
            raise StoreUnavailableError(
                f"Statistics store timed out after {self.timeout_seconds}s during {operation}",
                operation=operation,
            ) from e
        except SQLAlchemyError as e:
            reason = str(getattr(e, "orig", None) or e.__class__.__name__)
            logger.warning("statistics_store_unavailable", operation=operation, reason=reason)
            raise StoreUnavailableError(
                f"Statistics store unavailable during {operation}: {reason}",
                operation=operation,
            ) from e

    async def count(self, kind: EntityKind) -> int:
        model = ENTITY_MODELS[kind]
        return await self._run(f"count({kind.value})", lambda db: ReadRepository(db, model).count())

    async def grouped_counts(
        self, usage: UsageTable, group_key: str, limit: int
    ) -> list[RankedKey]:
        model = USAGE_MODELS[usage]
        if group_key not in model.__table__.c:
            raise ValidationError(
                f"{usage.value} has no column {group_key!r}", field="group_key"
            )
        if limit <= 0:
            return []
        key_column = getattr(model, group_key)
        occurrences = func.count().label("occurrences")
        # Equal counts fall back to key order so repeated reports are identical
        stmt = (
            select(key_column, occurrences)
            .group_by(key_column)
            .order_by(occurrences.desc(), key_column.asc())
            .limit(limit)
        )

        def query(db: Session) -> list[RankedKey]:
            return [RankedKey(key, count) for key, count in db.execute(stmt).all()]

        return await self._run(f"grouped_counts({usage.value}.{group_key})", query)

    async def fetch_by_ids(
        self, reference: ReferenceTable, ids: Collection[Hashable]
    ) -> list[Mapping[str, Any]]:
        if not ids:
            return []
        model = REFERENCE_MODELS[reference]

        def query(db: Session) -> list[Mapping[str, Any]]:
            return [_as_mapping(row) for row in ReadRepository(db, model).get_by_ids(ids)]

        return await self._run(f"fetch_by_ids({reference.value})", query)

    async def fetch_created_since(self, kind: EntityKind, since: datetime) -> list[datetime]:
        model = ENTITY_MODELS[kind]
        if not hasattr(model, "created_at"):
            raise ValidationError(f"{kind.value} records are not timestamped", field="kind")
        # Timestamps are stored as naive UTC
        since_utc = as_utc(since).replace(tzinfo=None)
        stmt = (
            select(model.created_at)
            .where(model.created_at >= since_utc)
            .order_by(model.created_at.desc())
        )

        def query(db: Session) -> list[datetime]:
            return list(db.execute(stmt).scalars().all())

        return await self._run(f"fetch_created_since({kind.value})", query)

    async def list_users_with_trip_counts(self) -> list[Mapping[str, Any]]:
        trip_count = func.count(Trip.id).label("trip_count")
        stmt = (
            select(User.id, User.email, User.name, User.role, User.created_at, trip_count)
            .outerjoin(Trip, Trip.owner_id == User.id)
            .group_by(User.id, User.email, User.name, User.role, User.created_at)
            .order_by(User.created_at.desc())
        )

        def query(db: Session) -> list[Mapping[str, Any]]:
            return [dict(row._mapping) for row in db.execute(stmt).all()]

        return await self._run("list_users_with_trip_counts", query)
