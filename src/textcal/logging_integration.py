"""
Integration between the textcal configuration system and logging.
"""

import inspect
from typing import Optional

from .core.config import ConfigManager, TextcalConfig
from .logging import (
    LoggingConfig as LogConfig,
    TextcalLogger,
    configure_logging,
    get_logger as _get_logger,
    logging_manager,
)


def configure_logging_from_config(config: TextcalConfig, program: str = "textcal", version: str = "unknown"):
    """Configure logging system from a textcal configuration."""
    configure_logging(LogConfig.from_settings(config.general.logging, program=program, version=version))


def configure_logging_from_manager(config_manager: ConfigManager, program: str = "textcal", version: str = "unknown"):
    """Configure logging system from ConfigManager."""
    configure_logging_from_config(config_manager.load_config(), program, version)


def ensure_logging_configured():
    """Configure logging with defaults if nothing has configured it yet."""
    if not logging_manager.is_configured:
        configure_logging(LogConfig())


def get_logger(name: str, correlation_id: Optional[str] = None) -> TextcalLogger:
    """Get a textcal logger instance, ensuring logging is configured."""
    ensure_logging_configured()
    return _get_logger(name, correlation_id)


def get_module_logger(correlation_id: Optional[str] = None) -> TextcalLogger:
    """Get a logger named after the calling module."""
    frame = inspect.currentframe().f_back
    module_name = frame.f_globals.get("__name__", "textcal")
    return get_logger(module_name, correlation_id)
