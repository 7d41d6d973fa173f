"""
Configuration manager for textcal.

Loads defaults, then the TOML configuration file, then TEXTCAL_* environment
overrides, and validates the result into a TextcalConfig.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ...exceptions.config import ConfigurationValidationError
from ...logging import logged
from .files import read_toml, write_toml
from .models import TextcalConfig, TextcalSettings


@dataclass
class EnvironmentOverride:
    """Helper for applying environment variable overrides."""
    config_section: Dict[str, Any]
    settings: TextcalSettings

    def apply_if_set(self, setting_name: str, config_key: str) -> None:
        value = getattr(self.settings, setting_name, None)
        if value is not None:
            self.config_section[config_key] = value

    def apply_string_if_set(self, setting_name: str, config_key: str) -> None:
        value = getattr(self.settings, setting_name, None)
        if value:
            self.config_section[config_key] = value


class ConfigManager:
    """Loads, validates and persists the textcal configuration."""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_file: Path to custom config file. If None, uses
                ~/.config/textcal/config.toml.
        """
        if config_file:
            self.config_file = Path(config_file)
        else:
            self.config_file = Path.home() / ".config" / "textcal" / "config.toml"

        self._config: Optional[TextcalConfig] = None

    @property
    def config_directory(self) -> Path:
        return self.config_file.parent

    def load_config(self) -> TextcalConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}

        if self.config_file.exists():
            config_data = read_toml(self.config_file)

        config_data = self._apply_env_overrides(config_data)

        self._config = self._validate(config_data)
        return self._config

    def _validate(self, config_data: Dict[str, Any]) -> TextcalConfig:
        try:
            return TextcalConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationValidationError.from_pydantic(e)
        except TypeError as e:
            raise ConfigurationValidationError([f"Configuration validation failed: {e}"])

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        settings = TextcalSettings()

        self._initialize_config_sections(config_data)
        self._apply_logging_env_overrides(config_data, settings)
        self._apply_date_env_overrides(config_data, settings)

        return config_data

    def _initialize_config_sections(self, config_data: Dict[str, Any]) -> None:
        config_data.setdefault("general", {})
        config_data["general"].setdefault("logging", {})
        config_data.setdefault("dates", {})

    def _apply_logging_env_overrides(self, config_data: Dict[str, Any], settings: TextcalSettings) -> None:
        logging_config = config_data["general"]["logging"]
        override = EnvironmentOverride(logging_config, settings)

        override.apply_string_if_set("textcal_log_level", "level")
        override.apply_string_if_set("textcal_log_format", "format")
        override.apply_string_if_set("textcal_log_file", "file_path")
        if settings.textcal_log_output:
            # Comma-separated outputs
            logging_config["output"] = [o.strip() for o in settings.textcal_log_output.split(",")]

    def _apply_date_env_overrides(self, config_data: Dict[str, Any], settings: TextcalSettings) -> None:
        override = EnvironmentOverride(config_data["dates"], settings)

        override.apply_string_if_set("textcal_date_format", "date_format")
        override.apply_string_if_set("textcal_timezone", "timezone")
        override.apply_string_if_set("textcal_month_overflow", "month_overflow")

    def _filter_none_values(self, data: Any) -> Any:
        """Recursively drop None values, which TOML cannot represent."""
        if isinstance(data, dict):
            return {k: self._filter_none_values(v) for k, v in data.items() if v is not None}
        elif isinstance(data, list):
            return [self._filter_none_values(item) for item in data if item is not None]
        return data

    def to_toml_dict(self, config: Optional[TextcalConfig] = None) -> Dict[str, Any]:
        """The configuration as a TOML-serialisable dictionary."""
        config = config or self.load_config()
        return self._filter_none_values(config.model_dump(mode="json"))

    def save_config(self, config: Optional[TextcalConfig] = None) -> None:
        """Save configuration to the TOML file."""
        if config is None:
            config = self.load_config()
        write_toml(self.config_file, self.to_toml_dict(config))
        self._config = config

    def export_config(self, file_path: Path) -> None:
        """Export current configuration to a TOML file."""
        write_toml(Path(file_path), self.to_toml_dict())

    @logged("info")
    def import_config(self, file_path: Path) -> TextcalConfig:
        """Import configuration from another TOML file and make it the active one."""
        imported_config = self._validate(read_toml(Path(file_path)))
        self.save_config(imported_config)
        return imported_config

    @logged("info")
    def reset_config(self) -> None:
        """Reset configuration to defaults."""
        self.save_config(TextcalConfig())
