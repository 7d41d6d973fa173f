"""
Log formatters.

Records made through TextcalLogger carry an ``operation`` (the library
function or CLI command being run) and, for failures, the ``argument`` that
was rejected. Both formatters put that location up front: the JSON formatter
as top-level keys, the console formatter as an ``op(arg)`` suffix.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler

# Context keys lifted out of the free-form context into their own columns
LOCATION_KEYS = ("operation", "argument")


def _location(context: Dict[str, Any]) -> Optional[str]:
    operation = context.get("operation")
    argument = context.get("argument")
    if operation and argument:
        return f"{operation}({argument})"
    return operation or argument


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, keyed on operation and argument."""

    def __init__(self, program: str = "textcal", version: str = "unknown"):
        super().__init__()
        self.program = f"{program}/{version}"

    def format(self, record: logging.LogRecord) -> str:
        context = dict(getattr(record, "extra_context", {}))
        entry = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "program": self.program,
            "logger": record.name,
            "operation": context.pop("operation", None),
            "argument": context.pop("argument", None),
            "message": record.getMessage(),
        }
        if hasattr(record, "correlation_id"):
            entry["run"] = record.correlation_id
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["error"] = {
                "type": record.exc_info[0].__name__,
                "traceback": self.formatException(record.exc_info),
            }
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Plain text lines with the operation and argument appended."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        location = _location(getattr(record, "extra_context", {}))
        if not location:
            return line
        # Keep a traceback, if any, below the location
        first, sep, rest = line.partition("\n")
        return f"{first} [{location}]{sep}{rest}"


class RichLocationHandler(RichHandler):
    """RichHandler for terminals, showing the location like ConsoleFormatter."""

    def __init__(self):
        super().__init__(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        self.setFormatter(logging.Formatter("%(message)s"))

    def render_message(self, record: logging.LogRecord, message: str):
        location = _location(getattr(record, "extra_context", {}))
        if location:
            message = f"{message} [{location}]"
        return super().render_message(record, message)


def create_formatter(format_type: str, program: str = "textcal", version: str = "unknown") -> logging.Formatter:
    """Formatter for a stream or file handler; ``rich`` falls back to console text."""
    if format_type == "json":
        return StructuredFormatter(program, version)
    return ConsoleFormatter()
