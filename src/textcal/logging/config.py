"""
Logging configuration.

LoggingConfig is the resolved form of the ``[general.logging]`` settings:
levels are numeric, outputs are a tuple and the log file path is always set.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from textcal.constants import DEFAULT_LOG_BACKUP_COUNT, DEFAULT_LOG_FILE_SIZE_BYTES
from textcal.exceptions import InvalidConfigurationError

LOG_FORMATS = ("console", "json", "rich")
LOG_OUTPUTS = ("console", "file")
DEFAULT_LOG_FILE = Path("logs/textcal.log")


@dataclass
class LoggingConfig:
    """Configuration for the logging system."""

    level: Union[str, int] = logging.WARNING
    format_type: str = "console"
    outputs: Union[str, Tuple[str, ...]] = ("console",)
    file_path: Optional[Path] = None
    max_file_size: int = DEFAULT_LOG_FILE_SIZE_BYTES
    backup_count: int = DEFAULT_LOG_BACKUP_COUNT
    program: str = "textcal"
    version: str = "unknown"

    def __post_init__(self):
        if isinstance(self.level, str):
            level = logging.getLevelName(self.level.upper())
            if not isinstance(level, int):
                raise InvalidConfigurationError("general.logging.level", self.level, "DEBUG, INFO, WARNING or ERROR")
            self.level = level

        if self.format_type not in LOG_FORMATS:
            raise InvalidConfigurationError("general.logging.format", self.format_type, f"one of {', '.join(LOG_FORMATS)}")

        self.outputs = (self.outputs,) if isinstance(self.outputs, str) else tuple(self.outputs)
        unknown = [output for output in self.outputs if output not in LOG_OUTPUTS]
        if unknown:
            raise InvalidConfigurationError("general.logging.output", unknown, f"outputs from {', '.join(LOG_OUTPUTS)}")

        self.file_path = Path(self.file_path) if self.file_path else DEFAULT_LOG_FILE

    @classmethod
    def from_settings(cls, settings, program: str = "textcal", version: str = "unknown") -> "LoggingConfig":
        """Build from a ``LoggingSettings`` model of the configuration file."""
        return cls(
            level=settings.level.value,
            format_type=settings.format,
            outputs=tuple(settings.output),
            file_path=settings.file_path,
            max_file_size=settings.max_file_size,
            backup_count=settings.backup_count,
            program=program,
            version=version,
        )
