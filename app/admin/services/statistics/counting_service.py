"""Platform-wide entity counts."""

from app.admin.services.statistics.store import EntityKind, StatisticsStore


class CountingService:
    """Service for scalar entity counts."""

    @staticmethod
    async def count(store: StatisticsStore, kind: EntityKind) -> int:
        """Count every row of ``kind`` in the current snapshot.

        Args:
            store: Statistics store.
            kind: Entity to count.

        Returns:
            Non-negative row count.
        """
        return await store.count(kind)
