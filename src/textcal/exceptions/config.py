"""
Configuration-related exceptions.

``argument`` holds the dotted configuration field (``dates.timezone``) where
one is known, so that the CLI and the logs point at the setting to fix.
"""

from pathlib import Path
from typing import Any, List, Optional, Union

from .base import ExceptionContext, TextcalError


class ConfigurationError(TextcalError):
    """Base class for configuration-related errors."""

    default_code = "CONFIG_ERROR"


class InvalidConfigurationError(ConfigurationError):
    """Raised when a single setting has an unusable value."""

    default_code = "CONFIG_INVALID"

    def __init__(self, field: str, value: Any, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        message = f"Invalid configuration for '{field}': got {repr(value)}, expected {expected}"
        context = ExceptionContext(
            argument=field,
            help_text=f"Set '{field}' to {expected}",
            user_action="Run 'textcal config --show' to inspect the active configuration",
            details={"value": value},
        )
        super().__init__(message, context)


class ConfigurationFileError(ConfigurationError):
    """Raised when a TOML configuration file cannot be read, parsed or written."""

    default_code = "CONFIG_FILE"

    HELP = {
        "read": "Check that the file exists and is readable",
        "parse": "Fix the TOML syntax in the file",
        "write": "Check that the directory exists and is writable",
    }

    def __init__(self, path: Union[str, Path], action: str, reason: str):
        self.path = Path(path)
        self.action = action
        self.reason = reason
        message = f"Cannot {action} configuration file {self.path}: {reason}"
        context = ExceptionContext(
            help_text=self.HELP.get(action),
            user_action="Run 'textcal config --reset' to write a fresh default file" if action == "parse" else None,
            details={"path": str(self.path), "action": action},
        )
        super().__init__(message, context)


class ConfigurationValidationError(ConfigurationError):
    """Raised when configuration values fail model validation."""

    default_code = "CONFIG_VALIDATION"

    def __init__(self, errors: List[str], fields: Optional[List[str]] = None):
        self.errors = errors
        self.fields = fields or []
        message = "Configuration validation failed:"
        for error in errors:
            message += f"\n  - {error}"

        context = ExceptionContext(
            # Only a single failing field can be pointed at
            argument=self.fields[0] if len(self.fields) == 1 else None,
            help_text="Fix the settings listed above in the configuration file or TEXTCAL_* variables",
            user_action="Run 'textcal config --reset' to restore the defaults",
        )
        super().__init__(message, context)

    @classmethod
    def from_pydantic(cls, error) -> "ConfigurationValidationError":
        """Build from a pydantic ``ValidationError``, one line per failing field."""
        fields = []
        errors = []
        for item in error.errors():
            name = ".".join(str(part) for part in item["loc"])
            fields.append(name)
            errors.append(f"{name}: {item['msg']}")
        return cls(errors, fields)
