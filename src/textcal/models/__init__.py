from .parts import CalendarParts, LegacyCalendarParts
from .step import Step, StepUnit

__all__ = ["CalendarParts", "LegacyCalendarParts", "Step", "StepUnit"]
