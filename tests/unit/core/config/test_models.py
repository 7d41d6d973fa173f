"""
Unit tests for the configuration models.
"""

import pytest
from pydantic import ValidationError

from textcal.core.config import (
    DateSettings,
    LoggingSettings,
    LogLevel,
    TextcalConfig,
    TextcalSettings,
    TextSettings,
)


@pytest.mark.unit
class TestLoggingSettings:
    """Test logging settings validation."""

    def test_defaults(self):
        settings = LoggingSettings()
        assert settings.level == LogLevel.WARNING
        assert settings.format == "console"
        assert settings.output == ["console"]

    def test_invalid_format(self):
        with pytest.raises(ValidationError):
            LoggingSettings(format="xml")

    def test_invalid_output(self):
        with pytest.raises(ValidationError):
            LoggingSettings(output=["console", "syslog"])

    def test_backup_count_bounds(self):
        with pytest.raises(ValidationError):
            LoggingSettings(backup_count=0)


@pytest.mark.unit
class TestDateSettings:
    """Test date settings validation."""

    def test_defaults(self):
        settings = DateSettings()
        assert settings.date_format == "%Y-%m-%d"
        assert settings.try_formats == ["%Y-%m-%d", "%Y/%m/%d"]
        assert settings.timezone == "UTC"
        assert settings.month_overflow == "roll"
        assert settings.legacy_parts is False

    def test_valid_timezone(self):
        assert DateSettings(timezone="Europe/Paris").timezone == "Europe/Paris"

    def test_unknown_timezone(self):
        with pytest.raises(ValidationError):
            DateSettings(timezone="Mars/Olympus_Mons")

    def test_invalid_overflow(self):
        with pytest.raises(ValidationError):
            DateSettings(month_overflow="wrap")

    def test_try_formats_not_empty(self):
        with pytest.raises(ValidationError):
            DateSettings(try_formats=[])


@pytest.mark.unit
class TestTextcalConfig:
    """Test the root configuration model."""

    def test_defaults(self):
        config = TextcalConfig()
        assert config.general.logging.level == LogLevel.WARNING
        assert config.text == TextSettings()

    def test_extra_sections_forbidden(self):
        with pytest.raises(ValidationError):
            TextcalConfig(unknown={})

    def test_validate_assignment(self):
        config = TextcalConfig()
        with pytest.raises(ValidationError):
            config.dates = {"timezone": "Nowhere"}

    def test_nested_dicts(self):
        config = TextcalConfig(dates={"month_overflow": "clamp"}, text={"split_regex": False})
        assert config.dates.month_overflow == "clamp"
        assert config.text.split_regex is False


@pytest.mark.unit
class TestTextcalSettings:
    """Test environment variable settings."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("TEXTCAL_TIMEZONE", "Asia/Tokyo")
        monkeypatch.setenv("TEXTCAL_LOG_LEVEL", "DEBUG")
        settings = TextcalSettings()
        assert settings.textcal_timezone == "Asia/Tokyo"
        assert settings.textcal_log_level == "DEBUG"

    def test_unset_is_none(self):
        assert TextcalSettings().textcal_month_overflow is None
