"""
Splitting dates into calendar fields.
"""

from datetime import date, datetime
from typing import Any, Iterable, Optional

import pandas as pd

from ..exceptions import InvalidArgumentError
from ..logging import logged
from ..models.parts import CalendarParts, LegacyCalendarParts
from ..utils.vectors import map_vector


def _decompose_one(value: Any) -> Optional[CalendarParts]:
    if value is None:
        return None
    if not isinstance(value, date):
        raise InvalidArgumentError("value", value, "a date or datetime")

    is_instant = isinstance(value, datetime)
    return CalendarParts(
        year=value.year,
        month=value.month,
        day=value.day,
        hour=value.hour if is_instant else 0,
        minute=value.minute if is_instant else 0,
        second=value.second if is_instant else 0,
        weekday=value.isoweekday() % 7,
        yearday=value.timetuple().tm_yday,
    )


@logged()
def decompose_date(value: Any):
    """Calendar fields of a date or datetime.

    Years are absolute, months and day of year start at one, and the
    weekday counts from 0 = Sunday.

    >>> parts = decompose_date(date(2010, 12, 1))
    >>> parts.year, parts.month, parts.weekday, parts.yearday
    (2010, 12, 3, 335)
    """
    return map_vector(_decompose_one, value)


@logged()
def decompose_date_legacy(value: Any):
    """Calendar fields in the ``struct tm`` convention.

    >>> parts = decompose_date_legacy(date(2010, 12, 1))
    >>> parts.year, parts.mon, parts.yday
    (110, 11, 334)
    """
    def legacy(item) -> Optional[LegacyCalendarParts]:
        parts = _decompose_one(item)
        return parts.to_legacy() if parts is not None else None

    return map_vector(legacy, value)


@logged()
def decompose_frame(values: Iterable[Any]) -> pd.DataFrame:
    """One row of calendar fields per date; missing dates give a row of NA."""
    columns = list(CalendarParts.__dataclass_fields__)
    rows = []
    for value in values:
        parts = _decompose_one(value)
        rows.append(parts.to_dict() if parts is not None else dict.fromkeys(columns))
    return pd.DataFrame(rows, columns=columns).astype("Int64")
