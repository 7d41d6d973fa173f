"""
Text to date conversion.

Unparseable text is not an error: it yields None, the missing-value
marker, so that vectors of mixed good and bad values convert element-wise.
"""

import logging
from datetime import date, datetime
from typing import Any, Iterable, Optional, Sequence

from dateutil import parser

from ..constants import DEFAULT_TRY_FORMATS
from ..exceptions import InvalidFormatError
from ..logging import logged
from ..utils.vectors import map_vector
from .formatting import compile_format

logger = logging.getLogger(__name__)

# Space-padded day has no strptime counterpart
_OUTPUT_ONLY_CODES = {"e"}


def _check_format(format: Any) -> None:
    if not isinstance(format, str) or not format:
        raise InvalidFormatError(format, "format must be a non-empty string")
    for is_code, code in compile_format(format):
        if is_code and code in _OUTPUT_ONLY_CODES:
            raise InvalidFormatError(format, f"'%{code}' can only be used to format dates")


def _strptime(text: str, format: str) -> Optional[datetime]:
    try:
        return datetime.strptime(text, format)
    except ValueError:
        return None


def _parse_one(value: Any, format: Optional[str], try_formats: Sequence[str]) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    formats = [format] if format is not None else try_formats
    for candidate in formats:
        parsed = _strptime(text, candidate)
        if parsed is not None:
            return parsed.date()

    logger.debug(f"Unable to convert {text!r} to a date with formats {list(formats)}")
    return None


@logged()
def parse_date(
    text: Any,
    format: Optional[str] = None,
    try_formats: Iterable[str] = DEFAULT_TRY_FORMATS,
):
    """Convert text to a calendar date.

    Formats use the percent codes of format_date (except the output-only
    ``%e``); an unknown code raises InvalidFormatError. With ``format`` the
    text must match it exactly; otherwise each of
    ``try_formats`` is attempted in order (``%Y-%m-%d`` then ``%Y/%m/%d`` by
    default). Returns None when nothing matches. Vectors give lists.

    >>> parse_date("2010-12-31")
    datetime.date(2010, 12, 31)
    >>> parse_date("12/31/2010", "%m/%d/%Y")
    datetime.date(2010, 12, 31)
    >>> parse_date("12/31/2010") is None
    True
    """
    if format is not None:
        _check_format(format)
    formats = list(try_formats)
    for candidate in formats:
        _check_format(candidate)

    return map_vector(lambda item: _parse_one(item, format, formats), text)


def _parse_datetime_one(value: Any, format: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    text = str(value).strip()
    if format is not None:
        parsed = _strptime(text, format)
    else:
        try:
            parsed = parser.isoparse(text)
        except ValueError:
            parsed = None

    if parsed is None:
        logger.debug(f"Unable to convert {text!r} to a datetime")
    return parsed


@logged()
def parse_datetime(text: Any, format: Optional[str] = None):
    """Convert text to a datetime, or None when it does not parse.

    Without ``format`` the text is read as ISO 8601, including offsets such
    as ``2010-12-31T23:59:59+01:00``.
    """
    if format is not None:
        _check_format(format)
    return map_vector(lambda item: _parse_datetime_one(item, format), text)
