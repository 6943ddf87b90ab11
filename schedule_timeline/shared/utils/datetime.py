"""Timezone helpers. Timeline instants are always timezone-aware."""

from datetime import UTC, datetime, timedelta

# Upper bound of the representable instant range
LATEST_INSTANT = datetime.max.replace(tzinfo=UTC)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC, leave aware ones untouched"""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def shift(moment: datetime, delta: timedelta) -> datetime | None:
    """moment + delta, or None when the result leaves the datetime range"""
    try:
        return moment + delta
    except OverflowError:
        return None


def add_days(moment: datetime, days: float) -> datetime | None:
    """
    moment + days (fractional days allowed).

    Returns None when ``days`` is not representable as a timedelta or the
    result leaves the datetime range.
    """
    try:
        delta = timedelta(days=days)
    except (OverflowError, ValueError):
        return None
    return shift(moment, delta)
