"""
textcal logging package.

- formatters: JSON, console and rich output keyed on operation and argument
- loggers: Logger wrapper with correlation IDs and context
- config: Resolved logging configuration
- manager: Centralized handler setup
- context: Operation logging decorator
"""

from .config import LoggingConfig
from .context import logged
from .formatters import ConsoleFormatter, StructuredFormatter
from .loggers import TextcalLogger
from .manager import LoggingManager, configure_logging, logging_manager

get_logger = logging_manager.get_logger

__all__ = [
    "LoggingConfig",
    "LoggingManager",
    "configure_logging",
    "TextcalLogger",
    "get_logger",
    "logged",
    "ConsoleFormatter",
    "StructuredFormatter",
]
