"""
Day and second counts relative to the Unix epoch (1970-01-01).
"""

from datetime import date, datetime, timedelta, timezone
from typing import Any

from ..constants import EPOCH_DATE, EPOCH_DATETIME
from ..exceptions import InvalidArgumentError
from ..logging import logged
from ..utils.vectors import ensure_int, map_vector


def _as_date(value: Any, name: str) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidArgumentError(name, value, "a date or datetime")


@logged()
def julian(value: Any, origin: date = EPOCH_DATE):
    """Days elapsed from ``origin`` to ``value`` (negative before it).

    Aware datetimes are counted by their UTC calendar date.
    """
    origin = _as_date(origin, "origin")
    return map_vector(
        lambda item: None if item is None else (_as_date(item, "value") - origin).days,
        value,
    )


@logged()
def day_offset(value: Any):
    """Days since the epoch.

    >>> day_offset(date(1970, 1, 2))
    1
    """
    return julian(value, EPOCH_DATE)


@logged()
def from_day_offset(days: Any):
    """The date ``days`` after the epoch."""
    return map_vector(
        lambda item: None if item is None else EPOCH_DATE + timedelta(days=ensure_int("days", item)),
        days,
    )


@logged()
def epoch_seconds(value: Any):
    """Seconds since 1970-01-01T00:00:00Z; naive datetimes are taken as UTC."""
    def seconds(item):
        if item is None:
            return None
        if not isinstance(item, datetime):
            raise InvalidArgumentError("value", item, "a datetime")
        if item.tzinfo is None:
            item = item.replace(tzinfo=timezone.utc)
        return (item - EPOCH_DATETIME).total_seconds()

    return map_vector(seconds, value)
