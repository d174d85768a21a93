from datetime import UTC, datetime
from typing import Annotated

from pydantic.functional_serializers import PlainSerializer

from app.core.constants import DAY_BUCKET_FORMAT


def as_utc(v: datetime) -> datetime:
    """Return ``v`` as an aware UTC datetime; naive values are taken to be UTC."""
    if v.tzinfo is None:
        return v.replace(tzinfo=UTC)
    return v.astimezone(UTC)


def utc_day(v: datetime) -> str:
    """Truncate a timestamp to its UTC calendar day (``YYYY-MM-DD``)."""
    return as_utc(v).strftime(DAY_BUCKET_FORMAT)


def _serialize_utc_datetime(v: datetime | None) -> str | None:
    if v is None:
        return None
    return as_utc(v).isoformat()


UTCDatetime = Annotated[datetime, PlainSerializer(_serialize_utc_datetime)]
