"""
Library-wide constants for textcal.

This module contains calendar constants, default formats and configuration
limits that are shared between the text/date functions, the configuration
models and the CLI.
"""

from datetime import date, datetime, timezone

# Unix epoch constants
UNIX_EPOCH_YEAR = 1970
UNIX_EPOCH_MONTH = 1
UNIX_EPOCH_DAY = 1
EPOCH_DATE = date(UNIX_EPOCH_YEAR, UNIX_EPOCH_MONTH, UNIX_EPOCH_DAY)
EPOCH_DATETIME = datetime(UNIX_EPOCH_YEAR, UNIX_EPOCH_MONTH, UNIX_EPOCH_DAY, tzinfo=timezone.utc)

# struct tm conventions
LEGACY_YEAR_OFFSET = 1900

# Calendar constants
MONTHS_IN_YEAR = 12
MONTHS_IN_QUARTER = 3
DAYS_IN_WEEK = 7

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)

# Sunday first, matching the 0 = Sunday weekday numbering
WEEKDAY_NAMES = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)
WEEKDAY_ABBREVIATIONS = tuple(name[:3] for name in WEEKDAY_NAMES)

# Date format defaults
DEFAULT_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_TRY_FORMATS = ("%Y-%m-%d", "%Y/%m/%d")
DEFAULT_TIMEZONE = "UTC"

# ISOdatetime-style composition defaults to noon
DEFAULT_COMPOSE_HOUR = 12

# Month overflow policies for calendar-unit date sequences
OVERFLOW_ROLL = "roll"
OVERFLOW_CLAMP = "clamp"
OVERFLOW_POLICIES = (OVERFLOW_ROLL, OVERFLOW_CLAMP)

# Text defaults
DEFAULT_JOIN_SEPARATOR = " "
DEFAULT_ENCODING = "utf-8"

# CLI display of the missing-value marker
MISSING_DISPLAY = "NA"

# Logging and file constants
BYTES_PER_KB = 1024
BYTES_PER_MB = 1024 * 1024
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * BYTES_PER_MB
MIN_LOG_FILE_SIZE_BYTES = BYTES_PER_KB
DEFAULT_LOG_BACKUP_COUNT = 5
