"""Date recipes."""

from .clock import now, now_date, resolve_timezone
from .compose import compose_date, compose_dates, compose_datetime
from .decompose import decompose_date, decompose_date_legacy, decompose_frame
from .formatting import compile_format, format_date, format_datetime
from .offsets import day_offset, epoch_seconds, from_day_offset, julian
from .parsing import parse_date, parse_datetime
from .sequences import DateSequence, date_sequence

__all__ = [
    "now",
    "now_date",
    "resolve_timezone",
    "parse_date",
    "parse_datetime",
    "format_date",
    "format_datetime",
    "compile_format",
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
    "DateSequence",
    "date_sequence",
]
