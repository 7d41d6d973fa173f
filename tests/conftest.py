"""
Shared pytest fixtures for the textcal test suite.
"""

import logging
import tempfile
from datetime import date
from pathlib import Path

import pytest

from textcal.core.config import ConfigManager
from textcal.logging.manager import logging_manager

try:
    from freezegun import freeze_time
except ImportError:
    freeze_time = None


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def config_file(temp_dir):
    """A small TOML configuration file."""
    path = temp_dir / "config.toml"
    path.write_text(
        '[general.logging]\n'
        'level = "WARNING"\n'
        '\n'
        '[dates]\n'
        'date_format = "%d/%m/%Y"\n'
        'timezone = "US/Eastern"\n'
        'month_overflow = "clamp"\n'
        '\n'
        '[text]\n'
        'split_regex = false\n'
    )
    return path


@pytest.fixture
def config_manager(temp_dir):
    """A ConfigManager pointed at a config file that does not exist yet."""
    return ConfigManager(temp_dir / "textcal" / "config.toml")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep TEXTCAL_* variables and the user's config file out of every test."""
    for var in (
        "TEXTCAL_LOG_LEVEL",
        "TEXTCAL_LOG_FORMAT",
        "TEXTCAL_LOG_OUTPUT",
        "TEXTCAL_LOG_FILE",
        "TEXTCAL_DATE_FORMAT",
        "TEXTCAL_TIMEZONE",
        "TEXTCAL_MONTH_OVERFLOW",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers installed by LoggingManager during a test."""
    yield
    logging_manager.reset()
    logging.getLogger().setLevel(logging.WARNING)
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith("textcal"):
            logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def sample_dates():
    """Dates around month ends and leap days."""
    return [
        date(2010, 12, 1),
        date(2012, 2, 29),
        date(2019, 1, 29),
        date(1969, 12, 31),
    ]


if freeze_time:
    @pytest.fixture
    def frozen_time():
        """Freeze time for deterministic testing."""
        with freeze_time("2024-01-15 12:00:00") as frozen:
            yield frozen
else:
    @pytest.fixture
    def frozen_time():
        """Placeholder when freezegun not available."""
        pytest.skip("freezegun not installed")
