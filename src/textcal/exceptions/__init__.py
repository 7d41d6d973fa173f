"""
textcal exception hierarchy.

Exception Hierarchy:
    TextcalError (base)
    ├── ConfigurationError
    │   ├── InvalidConfigurationError
    │   ├── ConfigurationFileError
    │   └── ConfigurationValidationError
    ├── TextcalValueError
    │   ├── InvalidArgumentError
    │   ├── InvalidFormatError
    │   └── InvalidStepError
    └── CLIError
        ├── InvalidCommandError
        └── MissingArgumentError
"""

from .base import ExceptionContext, TextcalError
from .cli import CLIError, InvalidCommandError, MissingArgumentError
from .config import (
    ConfigurationError,
    ConfigurationFileError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .values import (
    InvalidArgumentError,
    InvalidFormatError,
    InvalidStepError,
    TextcalValueError,
)

__all__ = [
    # Base
    "TextcalError",
    "ExceptionContext",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationFileError",
    "ConfigurationValidationError",
    # Values
    "TextcalValueError",
    "InvalidArgumentError",
    "InvalidFormatError",
    "InvalidStepError",
    # CLI
    "CLIError",
    "InvalidCommandError",
    "MissingArgumentError",
]
