"""CLI commands for textcal."""

from .config import config
from .dates import compose, format_command, julian, now, parse, parts, seq, today
from .text import combine, join, length, replace, slice_command, split

__all__ = [
    "config",
    "length",
    "join",
    "slice_command",
    "split",
    "replace",
    "combine",
    "today",
    "now",
    "parse",
    "format_command",
    "compose",
    "parts",
    "julian",
    "seq",
]
