"""
Regular sequences of dates.

A sequence steps from a start date by a fixed number of days (``day``,
``week``) or by calendar units (``month``, ``quarter``, ``year``). Every
element is computed from the start date, never from the previous element,
so the n-th month step always keeps the start's day of month.

When that day does not exist in the target month, the ``roll`` policy
carries the surplus days into the following month (2019-01-29 plus one
month is 2019-03-01) and the ``clamp`` policy stops at the month's last
day (2019-02-28).
"""

import logging
from datetime import date, datetime, timedelta
from typing import Any, Iterator, List, Optional, Union

import pandas as pd
from dateutil.relativedelta import relativedelta

from ..constants import MONTHS_IN_YEAR, OVERFLOW_CLAMP, OVERFLOW_POLICIES, OVERFLOW_ROLL
from ..exceptions import InvalidArgumentError, InvalidStepError
from ..logging import logged
from ..models.step import Step, StepUnit
from ..utils.vectors import ensure_int
from .parsing import parse_date

logger = logging.getLogger(__name__)

StepLike = Union[Step, StepUnit, int, str]


def _coerce_date(value: Any, name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    parsed = parse_date(value) if isinstance(value, str) else None
    if parsed is None:
        raise InvalidArgumentError(name, value, "a date or 'YYYY-MM-DD' text")
    return parsed


class DateSequence:
    """A finite, lazily generated and restartable sequence of dates."""

    def __init__(self, start: date, step: Step, count: int, overflow: str = OVERFLOW_ROLL):
        if overflow not in OVERFLOW_POLICIES:
            raise InvalidArgumentError("overflow", overflow, f"one of {', '.join(OVERFLOW_POLICIES)}")
        if count < 0:
            raise InvalidArgumentError("count", count, "a non-negative integer")
        self.start = start
        self.step = step
        self.count = count
        self.overflow = overflow

    def nth(self, k: int) -> date:
        """The k-th element, counting the start date as element 0."""
        if not self.step.unit.is_calendar_unit():
            return self.start + timedelta(days=k * self.step.days)

        months = k * self.step.months
        if self.overflow == OVERFLOW_CLAMP:
            return self.start + relativedelta(months=months)

        total = self.start.month - 1 + months
        first_of_month = date(self.start.year + total // MONTHS_IN_YEAR, total % MONTHS_IN_YEAR + 1, 1)
        return first_of_month + timedelta(days=self.start.day - 1)

    def __iter__(self) -> Iterator[date]:
        for k in range(self.count):
            yield self.nth(k)

    def __len__(self) -> int:
        return self.count

    def __getitem__(self, index: Union[int, slice]) -> Union[date, List[date]]:
        if isinstance(index, slice):
            return [self.nth(k) for k in range(*index.indices(self.count))]
        if index < 0:
            index += self.count
        if not 0 <= index < self.count:
            raise IndexError("date sequence index out of range")
        return self.nth(index)

    def __repr__(self) -> str:
        return (
            f"DateSequence(start={self.start.isoformat()}, step='{self.step}', "
            f"count={self.count}, overflow='{self.overflow}')"
        )

    def to_list(self) -> List[date]:
        return list(self)

    def to_index(self) -> pd.DatetimeIndex:
        """The sequence as a pandas DatetimeIndex."""
        return pd.DatetimeIndex(pd.to_datetime(self.to_list()), name="date")


def _count_until(sequence: DateSequence, end: date) -> int:
    """Number of elements from the start that do not pass ``end``."""
    forward = sequence.step.count > 0

    def within(k: int) -> bool:
        try:
            value = sequence.nth(k)
        except (OverflowError, ValueError):
            # Past date.min/date.max, so also past any representable end
            return False
        return value <= end if forward else value >= end

    if sequence.step.unit.is_calendar_unit():
        months_apart = (end.year - sequence.start.year) * MONTHS_IN_YEAR + end.month - sequence.start.month
        k = max(int(months_apart / sequence.step.months), 0)
    else:
        k = max((end - sequence.start).days // sequence.step.days, 0)

    # The estimate can be off by one around month ends
    while k > 0 and not within(k):
        k -= 1
    while within(k + 1):
        k += 1
    return k + 1


@logged()
def date_sequence(
    start: Any,
    end: Any = None,
    step: StepLike = 1,
    count: Optional[int] = None,
    overflow: str = OVERFLOW_ROLL,
) -> DateSequence:
    """Build a sequence of dates from ``start``.

    Give exactly one of ``end`` (inclusive bound) or ``count``. ``step`` is a
    number of days, a StepUnit, or text such as ``"month"``, ``"2 weeks"``
    or ``"-1 year"``.

    >>> list(date_sequence("2019-01-29", step="month", count=3))
    [datetime.date(2019, 1, 29), datetime.date(2019, 3, 1), datetime.date(2019, 3, 29)]
    """
    start_date = _coerce_date(start, "start")
    parsed_step = Step.parse(step)

    if (end is None) == (count is None):
        raise InvalidArgumentError("end/count", (end, count), "exactly one of 'end' or 'count'")

    if count is not None:
        count = ensure_int("count", count)
        sequence = DateSequence(start_date, parsed_step, count, overflow)
    else:
        end_date = _coerce_date(end, "end")
        if end_date != start_date and (end_date > start_date) != (parsed_step.count > 0):
            raise InvalidStepError(step, f"moving from {start_date} never reaches {end_date}")
        sequence = DateSequence(start_date, parsed_step, 0, overflow)
        sequence.count = _count_until(sequence, end_date)

    logger.debug(f"Built {sequence!r}")
    return sequence
