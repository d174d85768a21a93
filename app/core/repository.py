"""Read-only repository pattern implementation.

The statistics code only ever reads, so the repository exposes queries
and no mutating operations.
"""

from collections.abc import Collection, Hashable
from typing import Generic, TypeVar, cast

from sqlalchemy import func, select
from sqlalchemy.orm import Session

ModelType = TypeVar("ModelType")


class ReadRepository(Generic[ModelType]):
    """Generic read-only repository over a single mapped model.

    Example:
        ```python
        cities = ReadRepository(db, City)
        cities.count()
        cities.get_by_ids(["paris", "rome"])
        ```
    """

    def __init__(self, db: Session, model: type[ModelType]):
        """Initialize repository with database session and model class.

        Args:
            db: SQLAlchemy session.
            model: The model class this repository reads.
        """
        self.db = db
        self.model = model

    def count(self) -> int:
        """Count total number of rows.

        Returns:
            Total count of rows.
        """
        result = self.db.execute(select(func.count()).select_from(self.model)).scalar()
        return int(result or 0)

    def get_by_ids(self, ids: Collection[Hashable]) -> list[ModelType]:
        """Fetch every row whose primary key is in ``ids`` with a single query.

        Args:
            ids: Primary key values to look up.

        Returns:
            Matching rows in the database's native order. Missing ids are
            simply absent from the result.
        """
        if not ids:
            return []
        stmt = select(self.model).where(self.model.id.in_(list(ids)))  # type: ignore[attr-defined]
        return cast(list[ModelType], list(self.db.execute(stmt).scalars().all()))
