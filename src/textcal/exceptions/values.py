"""
Value-related exceptions.

Raised for caller mistakes in the text and date functions. Unparseable date
text and calendar-invalid dates are not errors: they yield None instead.
"""

from typing import Any

from .base import ExceptionContext, TextcalError


class TextcalValueError(TextcalError):
    """Base class for invalid arguments passed to textcal functions."""

    default_code = "INVALID_VALUE"


class InvalidArgumentError(TextcalValueError):
    """Raised when an argument has an unusable value."""

    default_code = "INVALID_ARGUMENT"

    def __init__(self, argument: str, value: Any, expected: str):
        self.value = value
        self.expected = expected
        message = f"Invalid value for '{argument}': got {repr(value)}, expected {expected}"
        context = ExceptionContext(
            argument=argument,
            help_text=f"Pass {expected} for '{argument}'",
            details={"value": value},
        )
        super().__init__(message, context)


class InvalidFormatError(TextcalValueError):
    """Raised when a date format string cannot be interpreted."""

    default_code = "INVALID_FORMAT"

    def __init__(self, format_string: Any, reason: str):
        self.format_string = format_string
        self.reason = reason
        message = f"Invalid date format {repr(format_string)}: {reason}"
        context = ExceptionContext(
            argument="format",
            help_text="Supported codes: %d %e %m %b %B %y %Y %a %A %j %H %M %S %%",
            details={"format": format_string},
        )
        super().__init__(message, context)


class InvalidStepError(TextcalValueError):
    """Raised when a date sequence step is zero, malformed or never reaches the end."""

    default_code = "INVALID_STEP"

    def __init__(self, step: Any, reason: str):
        self.step = step
        self.reason = reason
        message = f"Invalid sequence step {repr(step)}: {reason}"
        context = ExceptionContext(
            argument="step",
            help_text="Use a non-zero day count or '[-]N day|week|month|quarter|year[s]'",
            details={"step": step},
        )
        super().__init__(message, context)
