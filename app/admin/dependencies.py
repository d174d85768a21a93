from app.admin.repositories.statistics_store import SqlAlchemyStatisticsStore
from app.admin.services.statistics.store import StatisticsStore
from app.core.config import settings
from app.db.session import SessionLocal


def get_statistics_store() -> StatisticsStore:
    """Statistics store backed by the application database."""
    return SqlAlchemyStatisticsStore(
        SessionLocal, timeout_seconds=settings.STORE_QUERY_TIMEOUT_SECONDS
    )
