"""
Configuration models for textcal.

Pydantic-based models that provide validation and documentation for the
library defaults used by the CLI: date formats, time zone, month overflow
policy, text matching mode and logging.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

import pytz
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from textcal.constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    DEFAULT_TIMEZONE,
    DEFAULT_TRY_FORMATS,
    MIN_LOG_FILE_SIZE_BYTES,
    OVERFLOW_POLICIES,
    OVERFLOW_ROLL,
)


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=20,
        description="Number of backup log files to keep",
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json", "rich"]:
            raise ValueError("format must be one of: console, json, rich")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        valid_outputs = {"console", "file"}
        for output in v:
            if output not in valid_outputs:
                raise ValueError(
                    f"output must contain only: {', '.join(sorted(valid_outputs))}"
                )
        return v


class DateSettings(BaseModel):
    """Defaults for the date functions."""

    date_format: str = Field(DEFAULT_DATE_FORMAT, description="Output format for dates")
    try_formats: List[str] = Field(
        list(DEFAULT_TRY_FORMATS),
        min_length=1,
        description="Formats tried in order when parsing without an explicit format",
    )
    timezone: str = Field(DEFAULT_TIMEZONE, description="Time zone used for today/now")
    month_overflow: str = Field(
        OVERFLOW_ROLL,
        description="How month steps past a month end behave: roll or clamp",
    )
    legacy_parts: bool = Field(
        False, description="Show struct tm style fields when decomposing dates"
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        if v not in pytz.all_timezones_set:
            raise ValueError(f"unknown time zone: {v}")
        return v

    @field_validator("month_overflow")
    @classmethod
    def validate_month_overflow(cls, v: str) -> str:
        if v not in OVERFLOW_POLICIES:
            raise ValueError(f"month_overflow must be one of: {', '.join(OVERFLOW_POLICIES)}")
        return v


class TextSettings(BaseModel):
    """Defaults for the text functions."""

    split_regex: bool = Field(True, description="Treat split delimiters as regular expressions")
    replace_regex: bool = Field(True, description="Treat replace patterns as regular expressions")


class GeneralConfig(BaseModel):
    """General application configuration."""

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging configuration"
    )


class TextcalConfig(BaseModel):
    """Root textcal configuration model."""

    general: GeneralConfig = Field(default_factory=GeneralConfig)
    dates: DateSettings = Field(default_factory=DateSettings)
    text: TextSettings = Field(default_factory=TextSettings)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class TextcalSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    textcal_log_level: Optional[str] = Field(None, alias="TEXTCAL_LOG_LEVEL")
    textcal_log_format: Optional[str] = Field(None, alias="TEXTCAL_LOG_FORMAT")
    textcal_log_output: Optional[str] = Field(None, alias="TEXTCAL_LOG_OUTPUT")
    textcal_log_file: Optional[str] = Field(None, alias="TEXTCAL_LOG_FILE")

    textcal_date_format: Optional[str] = Field(None, alias="TEXTCAL_DATE_FORMAT")
    textcal_timezone: Optional[str] = Field(None, alias="TEXTCAL_TIMEZONE")
    textcal_month_overflow: Optional[str] = Field(None, alias="TEXTCAL_MONTH_OVERFLOW")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
