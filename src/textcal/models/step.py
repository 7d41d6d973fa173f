import enum
import re
from dataclasses import dataclass
from typing import Union

from textcal.constants import DAYS_IN_WEEK, MONTHS_IN_QUARTER, MONTHS_IN_YEAR
from textcal.exceptions import InvalidStepError


class StepUnit(enum.Enum):
    Day = "day"
    Week = "week"
    Month = "month"
    Quarter = "quarter"
    Year = "year"

    def __str__(self):
        return self.value

    def is_calendar_unit(self) -> bool:
        """Units measured in months, whose length in days varies."""
        return self in (StepUnit.Month, StepUnit.Quarter, StepUnit.Year)

    def get_size(self) -> int:
        """Size of one unit in days (fixed units) or months (calendar units)."""
        sizes = {
            StepUnit.Day: 1,
            StepUnit.Week: DAYS_IN_WEEK,
            StepUnit.Month: 1,
            StepUnit.Quarter: MONTHS_IN_QUARTER,
            StepUnit.Year: MONTHS_IN_YEAR,
        }
        return sizes[self]


_STEP_PATTERN = re.compile(r"^\s*([+-]?\d+)?\s*(day|week|month|quarter|year)s?\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class Step:
    count: int
    unit: StepUnit

    def __str__(self):
        suffix = "" if abs(self.count) == 1 else "s"
        return f"{self.count} {self.unit}{suffix}"

    @property
    def days(self) -> int:
        """Step length in days, for fixed units only."""
        if self.unit.is_calendar_unit():
            raise InvalidStepError(str(self), "calendar units have no fixed length in days")
        return self.count * self.unit.get_size()

    @property
    def months(self) -> int:
        """Step length in months, for calendar units only."""
        if not self.unit.is_calendar_unit():
            raise InvalidStepError(str(self), "fixed units are not measured in months")
        return self.count * self.unit.get_size()

    @staticmethod
    def parse(value: Union["Step", StepUnit, int, str]) -> "Step":
        """Build a Step from an int day count, a unit, or text like ``"-2 weeks"``."""
        if isinstance(value, Step):
            step = value
        elif isinstance(value, StepUnit):
            step = Step(1, value)
        elif isinstance(value, bool):
            raise InvalidStepError(value, "expected a day count, a unit or a step string")
        elif isinstance(value, int):
            step = Step(value, StepUnit.Day)
        elif isinstance(value, str):
            match = _STEP_PATTERN.match(value)
            if not match:
                raise InvalidStepError(value, "expected '[-]N day|week|month|quarter|year[s]'")
            count = int(match.group(1)) if match.group(1) else 1
            step = Step(count, StepUnit(match.group(2).lower()))
        else:
            raise InvalidStepError(value, "expected a day count, a unit or a step string")

        if step.count == 0:
            raise InvalidStepError(value, "step must not be zero")
        return step
