"""
CLI setup: logging configuration for a command invocation.
"""

from textcal.core.config import LogLevel, TextcalConfig
from textcal.logging_integration import configure_logging_from_config, get_module_logger

from . import __version__


def setup_logging(config: TextcalConfig, verbose: int = 0) -> None:
    """Configure logging from the loaded configuration; -v/-vv raise the level."""
    if verbose:
        config = config.model_copy(deep=True)
        config.general.logging.level = LogLevel.DEBUG if verbose > 1 else LogLevel.INFO

    configure_logging_from_config(config, program="textcal-cli", version=__version__)

    logger = get_module_logger()
    logger.info("textcal CLI started", version=__version__, verbose_level=verbose)
