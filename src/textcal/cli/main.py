"""textcal CLI main entry point."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from textcal.core.config import ConfigManager

from . import __version__
from .commands import (
    combine,
    compose,
    config,
    format_command,
    join,
    julian,
    length,
    now,
    parse,
    parts,
    replace,
    seq,
    slice_command,
    split,
    today,
)
from .error_handler import create_error_handler, handle_cli_exceptions
from .setup import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="textcal")
@click.option(
    "--config", "-c",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Configuration file path",
)
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG)",
)
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[Path], verbose: int) -> None:
    """textcal: string and calendar-date recipes.

    \b
    Examples:
        textcal length Moe Larry Curly
        textcal split /home/mike/data/trials.csv /
        textcal compose 2013 2 29
        textcal seq 2019-01-29 --step month --count 3
    """
    config_manager = ConfigManager(config_file)
    loaded = config_manager.load_config()
    setup_logging(loaded, verbose)

    ctx.ensure_object(dict)
    ctx.obj["config_manager"] = config_manager
    ctx.obj["config"] = loaded
    ctx.obj["verbose"] = verbose


for command in (
    length,
    join,
    slice_command,
    split,
    replace,
    combine,
    today,
    now,
    parse,
    format_command,
    compose,
    parts,
    julian,
    seq,
    config,
):
    cli.add_command(command)


def main() -> None:
    """Main entry point for the CLI."""
    error_handler = create_error_handler(Console(stderr=True))
    handle_cli_exceptions(error_handler, cli)


if __name__ == "__main__":
    main()
