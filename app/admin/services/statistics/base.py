"""Base utilities and helpers for statistics services."""

from datetime import UTC, datetime, timedelta

from app.core.datetime_utils import as_utc
from app.core.exceptions import ValidationError


def get_window_start(window_days: int, now: datetime | None = None) -> datetime:
    """Get the start of a trailing window of ``window_days`` days.

    Args:
        window_days: Window length in days, at least 1.
        now: Reference instant. Defaults to the current UTC time.

    Returns:
        ``now - window_days`` as an aware UTC datetime. The window is measured
        from the reference instant, not from the start of its day.

    Raises:
        ValidationError: If ``window_days`` is less than 1.
    """
    if window_days < 1:
        raise ValidationError("Window must be at least one day", field="window_days")
    current = as_utc(now) if now is not None else datetime.now(UTC)
    return current - timedelta(days=window_days)
