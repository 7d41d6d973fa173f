"""
Unit tests for the textcal CLI commands.
"""

import pytest
from click.testing import CliRunner

from textcal import __version__
from textcal.cli.main import cli
from textcal.exceptions import (
    InvalidArgumentError,
    InvalidCommandError,
    InvalidFormatError,
    InvalidStepError,
    MissingArgumentError,
)

try:
    import tomllib
except ImportError:
    import tomli as tomllib


@pytest.fixture
def runner():
    return CliRunner()


@pytest.mark.unit
class TestMainGroup:
    """Test the command group itself."""

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("length", "split", "combine", "seq", "parts", "config"):
            assert command in result.output

    def test_missing_config_file_is_usage_error(self, runner, temp_dir):
        result = runner.invoke(cli, ["--config", str(temp_dir / "nope.toml"), "length", "a"])
        assert result.exit_code == 2

    def test_verbose(self, runner):
        result = runner.invoke(cli, ["-vv", "compose", "2020", "2", "29"])
        assert result.exit_code == 0
        assert "2020-02-29" in result.output


@pytest.mark.unit
class TestTextCommands:
    """Test length, join, slice, split, replace and combine."""

    def test_length(self, runner):
        result = runner.invoke(cli, ["length", "Moe", "Larry", "Curly"])
        assert result.exit_code == 0
        assert result.output == "3\n5\n5\n"

    def test_length_bytes(self, runner):
        result = runner.invoke(cli, ["length", "--bytes", "café"])
        assert result.output == "5\n"

    def test_join(self, runner):
        result = runner.invoke(cli, ["join", "Everybody", "loves", "stats."])
        assert result.output == "Everybody loves stats.\n"

    def test_join_lists(self, runner):
        result = runner.invoke(cli, ["join", "--lists", "--sep", "-", "pre", "a,b,c"])
        assert result.output == "pre-a\npre-b\npre-c\n"

    def test_join_collapse(self, runner):
        result = runner.invoke(cli, ["join", "--lists", "--sep", "", "--collapse", "+", "x", "1,2"])
        assert result.output == "x1+x2\n"

    def test_slice(self, runner):
        result = runner.invoke(cli, ["slice", "Statistics", "1", "4"])
        assert result.output == "Stat\n"

    def test_split(self, runner):
        result = runner.invoke(cli, ["split", "/home/mike/data/trials.csv", "/"])
        assert result.output == "\nhome\nmike\ndata\ntrials.csv\n"

    def test_split_regex_by_default(self, runner):
        result = runner.invoke(cli, ["split", "a1b22c", "[0-9]+"])
        assert result.output == "a\nb\nc\n"

    def test_split_fixed_from_config(self, runner, config_file):
        result = runner.invoke(cli, ["--config", str(config_file), "split", "a.b.c", "."])
        assert result.output == "a\nb\nc\n"

    def test_split_regex_flag_overrides_config(self, runner, config_file):
        result = runner.invoke(cli, ["--config", str(config_file), "split", "a1b", "[0-9]", "--regex"])
        assert result.output == "a\nb\n"

    def test_replace_first(self, runner):
        text = "Curly is the smart one. Curly is funny, too."
        result = runner.invoke(cli, ["replace", text, "Curly", "Moe"])
        assert result.output == "Moe is the smart one. Curly is funny, too.\n"

    def test_replace_all(self, runner):
        text = "Curly is the smart one. Curly is funny, too."
        result = runner.invoke(cli, ["replace", "--all", text, "Curly", "Moe"])
        assert result.output == "Moe is the smart one. Moe is funny, too.\n"

    def test_replace_empty_pattern(self, runner):
        result = runner.invoke(cli, ["replace", "abc", "", "x"])
        assert isinstance(result.exception, InvalidArgumentError)

    def test_combine_unique(self, runner):
        result = runner.invoke(cli, ["combine", "--unique", "--no-diagonal", "a,b,c"])
        assert result.output == "a b\na c\nb c\n"

    def test_combine_table(self, runner):
        result = runner.invoke(cli, ["combine", "NY,LA", "T1,T2"])
        assert result.exit_code == 0
        assert "Combinations" in result.output
        assert "LA T2" in result.output

    def test_combine_unique_needs_equal_sets(self, runner):
        result = runner.invoke(cli, ["combine", "--unique", "a,b", "a,c"])
        assert isinstance(result.exception, InvalidArgumentError)


@pytest.mark.unit
class TestDateCommands:
    """Test the date commands."""

    def test_today(self, runner, frozen_time):
        result = runner.invoke(cli, ["today"])
        assert result.output == "2024-01-15\n"

    def test_today_with_config(self, runner, config_file, frozen_time):
        result = runner.invoke(cli, ["--config", str(config_file), "today"])
        assert result.output == "15/01/2024\n"

    def test_today_in_other_zone(self, runner, frozen_time):
        result = runner.invoke(cli, ["today", "--tz", "Pacific/Kiritimati", "--format", "%A"])
        assert result.output == "Tuesday\n"

    def test_now(self, runner, frozen_time):
        result = runner.invoke(cli, ["now"])
        assert result.output == "2024-01-15 12:00:00\n"

    def test_unknown_time_zone(self, runner):
        result = runner.invoke(cli, ["today", "--tz", "Mars/Base"])
        assert isinstance(result.exception, InvalidArgumentError)

    def test_parse(self, runner):
        result = runner.invoke(cli, ["parse", "2010-12-31", "2010/12/31", "12/31/2010"])
        assert result.output == "2010-12-31\n2010-12-31\nNA\n"

    def test_parse_with_format(self, runner):
        result = runner.invoke(cli, ["parse", "--format", "%m/%d/%Y", "12/31/2010"])
        assert result.output == "2010-12-31\n"

    def test_format(self, runner):
        result = runner.invoke(cli, ["format", "2012-05-08", "%d %B %Y"])
        assert result.output == "08 May 2012\n"

    def test_format_default_from_config(self, runner, config_file):
        result = runner.invoke(cli, ["--config", str(config_file), "format", "2012-05-08"])
        assert result.output == "08/05/2012\n"

    def test_format_unknown_code(self, runner):
        result = runner.invoke(cli, ["format", "2012-05-08", "%Q"])
        assert isinstance(result.exception, InvalidFormatError)

    def test_format_unparseable_date(self, runner):
        result = runner.invoke(cli, ["format", "May 8th"])
        assert isinstance(result.exception, InvalidArgumentError)

    def test_compose(self, runner):
        assert runner.invoke(cli, ["compose", "2020", "2", "29"]).output == "2020-02-29\n"
        assert runner.invoke(cli, ["compose", "2013", "2", "29"]).output == "NA\n"

    def test_parts(self, runner):
        result = runner.invoke(cli, ["parts", "2010-12-01"])
        assert result.exit_code == 0
        assert "yearday" in result.output
        assert "335" in result.output

    def test_parts_legacy(self, runner):
        result = runner.invoke(cli, ["parts", "--legacy", "2010-12-01"])
        assert "yday" in result.output
        assert "334" in result.output
        assert "110" in result.output

    def test_julian(self, runner):
        assert runner.invoke(cli, ["julian", "1970-01-02"]).output == "1\n"
        assert runner.invoke(cli, ["julian", "2010-03-15", "--origin", "2010-01-01"]).output == "73\n"

    def test_julian_reverse(self, runner):
        assert runner.invoke(cli, ["julian", "--reverse", "14700"]).output == "2010-04-01\n"

    def test_julian_reverse_with_origin(self, runner):
        result = runner.invoke(cli, ["julian", "--reverse", "--origin", "2010-01-01", "5"])
        assert isinstance(result.exception, InvalidCommandError)

    def test_julian_reverse_needs_integer(self, runner):
        result = runner.invoke(cli, ["julian", "--reverse", "soon"])
        assert isinstance(result.exception, InvalidArgumentError)

    def test_seq_months(self, runner):
        result = runner.invoke(cli, ["seq", "2019-01-29", "--step", "month", "--count", "3"])
        assert result.output == "2019-01-29\n2019-03-01\n2019-03-29\n"

    def test_seq_clamp(self, runner):
        result = runner.invoke(
            cli, ["seq", "2019-01-29", "--step", "month", "--count", "3", "--overflow", "clamp"]
        )
        assert result.output == "2019-01-29\n2019-02-28\n2019-03-29\n"

    def test_seq_overflow_from_config(self, runner, config_file):
        result = runner.invoke(
            cli, ["--config", str(config_file), "seq", "2019-01-29", "--step", "month", "--count", "2"]
        )
        assert result.output == "29/01/2019\n28/02/2019\n"

    def test_seq_end_with_day_count(self, runner):
        result = runner.invoke(cli, ["seq", "2010-01-01", "--end", "2010-01-10", "--step", "3"])
        assert result.output == "2010-01-01\n2010-01-04\n2010-01-07\n2010-01-10\n"

    def test_seq_table(self, runner):
        result = runner.invoke(cli, ["seq", "2019-01-29", "--count", "2", "--step", "week", "--table"])
        assert result.exit_code == 0
        assert "Tuesday" in result.output
        assert "17925" in result.output

    def test_seq_wrong_direction(self, runner):
        result = runner.invoke(cli, ["seq", "2010-01-10", "--end", "2010-01-01"])
        assert isinstance(result.exception, InvalidStepError)
        assert result.exception.operation == "date_sequence"
        assert result.exception.argument == "step"

    def test_seq_needs_end_or_count(self, runner):
        result = runner.invoke(cli, ["seq", "2010-01-01"])
        assert isinstance(result.exception, MissingArgumentError)
        assert result.exception.operation == "seq"
        assert result.exception.argument == "--end or --count"

    def test_seq_end_and_count_conflict(self, runner):
        result = runner.invoke(cli, ["seq", "2010-01-01", "--end", "2010-01-05", "--count", "3"])
        assert isinstance(result.exception, InvalidCommandError)
        assert "cannot be combined" in result.exception.message


@pytest.mark.unit
class TestConfigCommand:
    """Test the config command."""

    def test_show(self, runner, config_file):
        result = runner.invoke(cli, ["--config", str(config_file), "config", "--show"])
        assert result.exit_code == 0
        assert "[dates]" in result.output
        assert 'timezone = "US/Eastern"' in result.output

    def test_export(self, runner, config_file, temp_dir):
        export_path = temp_dir / "exported.toml"
        result = runner.invoke(cli, ["--config", str(config_file), "config", "--export", str(export_path)])
        assert result.exit_code == 0
        with open(export_path, "rb") as f:
            assert tomllib.load(f)["dates"]["month_overflow"] == "clamp"

    def test_import(self, runner, config_file, temp_dir):
        target = temp_dir / "target.toml"
        target.write_text("")
        result = runner.invoke(cli, ["--config", str(target), "config", "--import", str(config_file)])
        assert result.exit_code == 0
        with open(target, "rb") as f:
            assert tomllib.load(f)["dates"]["timezone"] == "US/Eastern"

    def test_reset_with_yes(self, runner, config_file):
        result = runner.invoke(cli, ["--config", str(config_file), "config", "--reset", "--yes"])
        assert result.exit_code == 0
        assert "reset to defaults" in result.output
        with open(config_file, "rb") as f:
            assert tomllib.load(f)["dates"]["timezone"] == "UTC"

    def test_reset_declined(self, runner, config_file):
        before = config_file.read_text()
        result = runner.invoke(cli, ["--config", str(config_file), "config", "--reset"], input="n\n")
        assert result.exit_code == 0
        assert config_file.read_text() == before
