"""
Wall-clock queries: the current date and instant in a time zone.
"""

from datetime import date, datetime, tzinfo
from typing import Union

import pytz

from ..constants import DEFAULT_TIMEZONE
from ..exceptions import InvalidArgumentError
from ..logging import logged

TimeZone = Union[str, tzinfo, None]


def resolve_timezone(tz: TimeZone) -> tzinfo:
    """Turn a time zone name (or None for UTC) into a tzinfo."""
    if tz is None:
        return pytz.timezone(DEFAULT_TIMEZONE)
    if isinstance(tz, tzinfo):
        return tz
    try:
        return pytz.timezone(tz)
    except pytz.UnknownTimeZoneError:
        raise InvalidArgumentError("tz", tz, "a time zone name such as 'UTC' or 'US/Eastern'")


@logged()
def now(tz: TimeZone = None) -> datetime:
    """The current instant as an aware datetime in ``tz`` (UTC by default)."""
    return datetime.now(resolve_timezone(tz))


@logged()
def now_date(tz: TimeZone = None) -> date:
    """Today's calendar date in ``tz``, without a time component."""
    return now(tz).date()
