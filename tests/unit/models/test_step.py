"""
Unit tests for sequence steps.
"""

import pytest

from textcal.exceptions import InvalidStepError
from textcal.models import Step, StepUnit


@pytest.mark.unit
class TestStepUnit:
    """Test StepUnit."""

    @pytest.mark.parametrize("unit,calendar,size", [
        (StepUnit.Day, False, 1),
        (StepUnit.Week, False, 7),
        (StepUnit.Month, True, 1),
        (StepUnit.Quarter, True, 3),
        (StepUnit.Year, True, 12),
    ])
    def test_sizes(self, unit, calendar, size):
        assert unit.is_calendar_unit() is calendar
        assert unit.get_size() == size

    def test_str(self):
        assert str(StepUnit.Quarter) == "quarter"


@pytest.mark.unit
class TestStepParse:
    """Test Step.parse."""

    @pytest.mark.parametrize("value,expected", [
        (1, Step(1, StepUnit.Day)),
        (-7, Step(-7, StepUnit.Day)),
        ("day", Step(1, StepUnit.Day)),
        ("2 weeks", Step(2, StepUnit.Week)),
        ("-1 month", Step(-1, StepUnit.Month)),
        ("+3 Months", Step(3, StepUnit.Month)),
        ("quarter", Step(1, StepUnit.Quarter)),
        (" 10 years ", Step(10, StepUnit.Year)),
        (StepUnit.Week, Step(1, StepUnit.Week)),
    ])
    def test_valid(self, value, expected):
        assert Step.parse(value) == expected

    def test_step_passes_through(self):
        step = Step(2, StepUnit.Month)
        assert Step.parse(step) is step

    @pytest.mark.parametrize("value", [0, "0 days", "fortnight", "2.5 days", True, None, 1.5])
    def test_invalid(self, value):
        with pytest.raises(InvalidStepError):
            Step.parse(value)


@pytest.mark.unit
class TestStepLengths:
    """Test the days and months properties."""

    def test_days(self):
        assert Step(2, StepUnit.Week).days == 14

    def test_months(self):
        assert Step(-2, StepUnit.Quarter).months == -6

    def test_days_of_calendar_unit_raises(self):
        with pytest.raises(InvalidStepError):
            Step(1, StepUnit.Month).days

    def test_months_of_fixed_unit_raises(self):
        with pytest.raises(InvalidStepError):
            Step(1, StepUnit.Day).months

    def test_str(self):
        assert str(Step(1, StepUnit.Month)) == "1 month"
        assert str(Step(-2, StepUnit.Week)) == "-2 weeks"
