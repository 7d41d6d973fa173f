"""
Building dates from year, month and day fields.

Calendar-invalid combinations (April 31, February 29 of a common year)
yield None rather than raising or rolling over into the next month.
"""

import logging
from datetime import date, datetime
from typing import Any, List, Optional

from ..constants import DEFAULT_COMPOSE_HOUR, DEFAULT_TIMEZONE
from ..logging import logged
from ..utils.vectors import ensure_int, recycle
from .clock import TimeZone, resolve_timezone

logger = logging.getLogger(__name__)


@logged()
def compose_date(year: Any, month: Any, day: Any) -> Optional[date]:
    """The date for the given fields, or None if that day does not exist.

    >>> compose_date(2020, 2, 29)
    datetime.date(2020, 2, 29)
    >>> compose_date(2013, 2, 29) is None
    True
    """
    if year is None or month is None or day is None:
        return None
    year = ensure_int("year", year)
    month = ensure_int("month", month)
    day = ensure_int("day", day)
    try:
        return date(year, month, day)
    except (ValueError, OverflowError):
        logger.debug(f"No calendar date for year={year} month={month} day={day}")
        return None


@logged()
def compose_datetime(
    year: Any,
    month: Any,
    day: Any,
    hour: Any = DEFAULT_COMPOSE_HOUR,
    minute: Any = 0,
    second: Any = 0,
    tz: TimeZone = DEFAULT_TIMEZONE,
) -> Optional[datetime]:
    """An aware datetime for the given fields, or None if they are out of range.

    The hour defaults to noon so that the calendar date is the same in most
    time zones.
    """
    fields = (year, month, day, hour, minute, second)
    if any(field is None for field in fields):
        return None
    names = ("year", "month", "day", "hour", "minute", "second")
    values = [ensure_int(name, field) for name, field in zip(names, fields)]
    zone = resolve_timezone(tz)
    try:
        naive = datetime(*values)
    except (ValueError, OverflowError):
        logger.debug(f"No calendar instant for fields {values}")
        return None
    if hasattr(zone, "localize"):
        return zone.localize(naive)
    return naive.replace(tzinfo=zone)


@logged()
def compose_dates(years: Any, months: Any, days: Any) -> List[Optional[date]]:
    """Element-wise compose_date over vectors, recycled to the longest one.

    >>> compose_dates(2012, 1, [1, 15])
    [datetime.date(2012, 1, 1), datetime.date(2012, 1, 15)]
    """
    return [compose_date(*row) for row in zip(*recycle(years, months, days))]
