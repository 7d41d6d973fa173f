"""
Configuration management for textcal.

Usage:
    from textcal.core.config import ConfigManager

    config = ConfigManager().load_config()
    config.dates.month_overflow
"""

from ...exceptions.config import (
    ConfigurationError,
    ConfigurationFileError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .manager import ConfigManager
from .models import (
    DateSettings,
    GeneralConfig,
    LoggingSettings,
    LogLevel,
    TextcalConfig,
    TextcalSettings,
    TextSettings,
)


def get_config_manager(config_file=None):
    """Get a config manager instance."""
    return ConfigManager(config_file)


__all__ = [
    "TextcalConfig",
    "GeneralConfig",
    "LoggingSettings",
    "DateSettings",
    "TextSettings",
    "LogLevel",
    "TextcalSettings",
    "ConfigManager",
    "get_config_manager",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationFileError",
    "ConfigurationValidationError",
]
