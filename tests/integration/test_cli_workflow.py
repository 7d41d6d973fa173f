"""
Integration tests: configuration file, environment and CLI together.
"""

import json

import pytest
from click.testing import CliRunner

from textcal.cli.main import cli


@pytest.mark.integration
class TestConfiguredWorkflow:
    """Settings flow from TOML and the environment into command output."""

    def test_environment_beats_file(self, config_file, monkeypatch):
        monkeypatch.setenv("TEXTCAL_DATE_FORMAT", "%b %d %Y")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config_file), "format", "2012-05-08"])
        assert result.output == "May 08 2012\n"

    def test_reset_then_defaults_apply(self, config_file):
        runner = CliRunner()
        runner.invoke(cli, ["--config", str(config_file), "config", "--reset", "--yes"])
        result = runner.invoke(
            cli, ["--config", str(config_file), "seq", "2019-01-29", "--step", "month", "--count", "2"]
        )
        assert result.output == "2019-01-29\n2019-03-01\n"

    def test_json_log_file(self, temp_dir, monkeypatch):
        log_file = temp_dir / "textcal.log"
        config_path = temp_dir / "config.toml"
        config_path.write_text(
            "[general.logging]\n"
            'level = "DEBUG"\n'
            'format = "json"\n'
            'output = ["file"]\n'
            f'file_path = "{log_file.as_posix()}"\n'
        )

        result = CliRunner().invoke(cli, ["--config", str(config_path), "parse", "garbage"])

        assert result.output == "NA\n"
        entries = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert any(entry["message"] == "textcal CLI started" for entry in entries)
        assert any("Unable to convert 'garbage'" in entry["message"] for entry in entries)
        calls = [entry for entry in entries if entry["operation"] == "parse_date"]
        assert [entry["message"] for entry in calls] == ["Calling parse_date", "Completed parse_date"]
