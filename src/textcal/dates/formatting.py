"""
Date to text conversion with a percent-code format language.

Supported codes:

    %d  day of month, 2 digits          %e  day of month, space padded
    %m  month number, 2 digits          %j  day of year, 3 digits
    %b  abbreviated month name          %B  full month name
    %a  abbreviated weekday name        %A  full weekday name
    %y  2-digit year                    %Y  4-digit year
    %H  hour, 2 digits                  %M  minute, 2 digits
    %S  second, 2 digits                %%  a literal percent sign

Names are always English. Any other character passes through unchanged.
"""

from datetime import date
from typing import Any, Callable, Dict, List, Tuple, Union

from ..constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_DATETIME_FORMAT,
    MONTH_ABBREVIATIONS,
    MONTH_NAMES,
    WEEKDAY_ABBREVIATIONS,
    WEEKDAY_NAMES,
)
from ..exceptions import InvalidArgumentError, InvalidFormatError
from ..logging import logged
from ..utils.vectors import map_vector


def _weekday(value: date) -> int:
    return value.isoweekday() % 7


def _time_field(name: str) -> Callable[[date], str]:
    return lambda value: f"{getattr(value, name, 0):02d}"


_CODES: Dict[str, Callable[[date], str]] = {
    "d": lambda value: f"{value.day:02d}",
    "e": lambda value: f"{value.day:2d}",
    "m": lambda value: f"{value.month:02d}",
    "j": lambda value: f"{value.timetuple().tm_yday:03d}",
    "b": lambda value: MONTH_ABBREVIATIONS[value.month - 1],
    "B": lambda value: MONTH_NAMES[value.month - 1],
    "a": lambda value: WEEKDAY_ABBREVIATIONS[_weekday(value)],
    "A": lambda value: WEEKDAY_NAMES[_weekday(value)],
    "y": lambda value: f"{value.year % 100:02d}",
    "Y": lambda value: f"{value.year:04d}",
    "H": _time_field("hour"),
    "M": _time_field("minute"),
    "S": _time_field("second"),
    "%": lambda value: "%",
}

Token = Tuple[bool, str]


def compile_format(format: str) -> List[Token]:
    """Split a format string into (is_code, text) tokens, validating every code."""
    if not isinstance(format, str):
        raise InvalidFormatError(format, "format must be a string")

    tokens: List[Token] = []
    literal = []
    index = 0
    while index < len(format):
        char = format[index]
        if char != "%":
            literal.append(char)
            index += 1
            continue
        if index + 1 == len(format):
            raise InvalidFormatError(format, "format ends with a lone '%'")
        code = format[index + 1]
        if code not in _CODES:
            raise InvalidFormatError(format, f"unsupported code '%{code}'")
        if literal:
            tokens.append((False, "".join(literal)))
            literal = []
        tokens.append((True, code))
        index += 2

    if literal:
        tokens.append((False, "".join(literal)))
    return tokens


def _format_one(value: Any, tokens: List[Token]):
    if value is None:
        return None
    if not isinstance(value, date):
        raise InvalidArgumentError("value", value, "a date or datetime")
    return "".join(_CODES[text](value) if is_code else text for is_code, text in tokens)


@logged()
def format_date(value: Any, format: str = DEFAULT_DATE_FORMAT) -> Union[str, None, List]:
    """Render a date (or each date of a vector) as text.

    >>> format_date(date(2012, 5, 8), "%d %B %Y")
    '08 May 2012'
    >>> format_date(date(2012, 5, 8), "%b/%d/%y")
    'May/08/12'
    """
    tokens = compile_format(format)
    return map_vector(lambda item: _format_one(item, tokens), value)


@logged()
def format_datetime(value: Any, format: str = DEFAULT_DATETIME_FORMAT):
    """format_date with a date-and-time default format."""
    return format_date(value, format)


__all__ = ["compile_format", "format_date", "format_datetime"]
