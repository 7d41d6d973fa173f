"""
Centralized logging setup.

The LoggingManager singleton installs one root handler per configured output
and remembers them, so that reconfiguring (each CLI invocation does) or
resetting never touches handlers installed by anyone else.
"""

import logging
import logging.handlers
import sys
from typing import List, Optional

from .config import LoggingConfig
from .formatters import RichLocationHandler, create_formatter
from .loggers import TextcalLogger


class LoggingManager:
    """Owns the handlers textcal installs on the root logger."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.config = None
            instance.handlers = []
            cls._instance = instance
        return cls._instance

    @property
    def is_configured(self) -> bool:
        return self.config is not None

    def configure(self, config: LoggingConfig):
        """Replace the installed handlers with ones built from ``config``."""
        self.reset()
        self.config = config

        root_logger = logging.getLogger()
        root_logger.setLevel(config.level)
        for output in config.outputs:
            handler = self._build_handler(output, config)
            handler.setLevel(config.level)
            root_logger.addHandler(handler)
            self.handlers.append(handler)

        self._set_textcal_levels(config.level)

    def reset(self):
        """Remove the handlers this manager installed and forget the configuration."""
        root_logger = logging.getLogger()
        for handler in self.handlers:
            root_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()
        self.config = None

    def _build_handler(self, output: str, config: LoggingConfig) -> logging.Handler:
        if output == "file":
            config.file_path.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.handlers.RotatingFileHandler(
                config.file_path,
                maxBytes=config.max_file_size,
                backupCount=config.backup_count,
                encoding="utf-8",
            )
        elif config.format_type == "rich":
            return RichLocationHandler()
        else:
            handler = logging.StreamHandler(sys.stderr)

        handler.setFormatter(create_formatter(config.format_type, config.program, config.version))
        return handler

    def _set_textcal_levels(self, level: int):
        # Loggers created before configuration would otherwise keep NOTSET or a stale level
        for name in self._textcal_logger_names():
            logging.getLogger(name).setLevel(level)

    @staticmethod
    def _textcal_logger_names() -> List[str]:
        return [name for name in logging.Logger.manager.loggerDict if name.split(".")[0] == "textcal"]

    def get_logger(self, name: str, correlation_id: Optional[str] = None) -> TextcalLogger:
        return TextcalLogger(name, correlation_id)


# Global logging manager instance
logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig):
    """Configure the global logging system."""
    logging_manager.configure(config)
