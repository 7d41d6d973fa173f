"""
Decomposed calendar representations.

CalendarParts is the primary form: absolute four-digit years, one-based
months and one-based day of year. LegacyCalendarParts keeps the C
``struct tm`` convention (years since 1900, zero-based month and day of
year) for callers that exchange fields with code using it.
"""

from dataclasses import asdict, dataclass
from datetime import date, datetime, tzinfo
from typing import Any, Dict, Optional

from textcal.constants import LEGACY_YEAR_OFFSET


@dataclass(frozen=True)
class CalendarParts:
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    weekday: int = 0  # 0 = Sunday
    yearday: int = 1

    def to_date(self) -> Optional[date]:
        """Recompose the calendar date, or None if the fields name no real day."""
        try:
            return date(self.year, self.month, self.day)
        except (ValueError, OverflowError):
            return None

    def to_datetime(self, tz: Optional[tzinfo] = None) -> Optional[datetime]:
        try:
            return datetime(
                self.year, self.month, self.day,
                self.hour, self.minute, self.second, tzinfo=tz,
            )
        except (ValueError, OverflowError):
            return None

    def to_legacy(self) -> "LegacyCalendarParts":
        return LegacyCalendarParts(
            year=self.year - LEGACY_YEAR_OFFSET,
            mon=self.month - 1,
            mday=self.day,
            hour=self.hour,
            min=self.minute,
            sec=self.second,
            wday=self.weekday,
            yday=self.yearday - 1,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LegacyCalendarParts:
    """Fields named and numbered after C's ``struct tm``.

    ``year`` counts years since 1900 and ``mon``/``yday`` start at zero, so
    2010-12-01 has ``year == 110`` and ``mon == 11``.
    """

    year: int
    mon: int
    mday: int
    hour: int = 0
    min: int = 0
    sec: int = 0
    wday: int = 0
    yday: int = 0

    def to_calendar_parts(self) -> CalendarParts:
        return CalendarParts(
            year=self.year + LEGACY_YEAR_OFFSET,
            month=self.mon + 1,
            day=self.mday,
            hour=self.hour,
            minute=self.min,
            second=self.sec,
            weekday=self.wday,
            yearday=self.yday + 1,
        )

    def to_date(self) -> Optional[date]:
        return self.to_calendar_parts().to_date()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
