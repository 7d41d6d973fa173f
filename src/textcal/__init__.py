"""
textcal: string and calendar-date recipes.

A library of small, stateless helpers for everyday text and date handling:

- text: length, join, slice_text, split, replace_first/replace_all and
  pairwise combinations of string sets
- dates: current date, parsing, formatting, composing and decomposing
  dates, day offsets from the epoch and date sequences
- models: decomposed calendar fields and sequence steps
- core.config / logging: configuration and logging used by the CLI
"""

__version__ = "0.1.0"

from .constants import EPOCH_DATE
from .dates import (
    DateSequence,
    compose_date,
    compose_dates,
    compose_datetime,
    date_sequence,
    day_offset,
    decompose_date,
    decompose_date_legacy,
    decompose_frame,
    epoch_seconds,
    format_date,
    format_datetime,
    from_day_offset,
    julian,
    now,
    now_date,
    parse_date,
    parse_datetime,
)
from .exceptions import TextcalError
from .models import CalendarParts, LegacyCalendarParts, Step, StepUnit
from .text import (
    byte_length,
    cartesian_frame,
    cartesian_join,
    join,
    length,
    replace_all,
    replace_first,
    slice_text,
    split,
)

__all__ = [
    "__version__",
    "EPOCH_DATE",
    # Text
    "length",
    "byte_length",
    "join",
    "slice_text",
    "split",
    "replace_first",
    "replace_all",
    "cartesian_join",
    "cartesian_frame",
    # Dates
    "now",
    "now_date",
    "parse_date",
    "parse_datetime",
    "format_date",
    "format_datetime",
    "compose_date",
    "compose_dates",
    "compose_datetime",
    "decompose_date",
    "decompose_date_legacy",
    "decompose_frame",
    "day_offset",
    "julian",
    "from_day_offset",
    "epoch_seconds",
    "date_sequence",
    "DateSequence",
    # Models
    "CalendarParts",
    "LegacyCalendarParts",
    "Step",
    "StepUnit",
    # Errors
    "TextcalError",
]
