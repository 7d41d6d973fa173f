"""Configuration management command."""

from pathlib import Path
from typing import Optional

import click
import tomli_w
from rich.prompt import Confirm

from ..output import console


@click.command()
@click.option("--show", is_flag=True, help="Show current configuration")
@click.option("--export", type=click.Path(path_type=Path), help="Export configuration to file")
@click.option(
    "--import",
    "import_file",
    type=click.Path(exists=True, path_type=Path),
    help="Import configuration from file",
)
@click.option("--reset", is_flag=True, help="Reset configuration to defaults")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def config(
    ctx: click.Context,
    show: bool,
    export: Optional[Path],
    import_file: Optional[Path],
    reset: bool,
    yes: bool,
) -> None:
    """Manage the textcal configuration.

    \b
    Examples:
        textcal config --show
        textcal config --export textcal.toml
        textcal config --import textcal.toml
        textcal config --reset --yes
    """
    config_manager = ctx.obj["config_manager"]

    if reset:
        if yes or Confirm.ask("Are you sure you want to reset all configuration?"):
            config_manager.reset_config()
            console.print("[green]Configuration reset to defaults[/green]")
        return

    if import_file:
        config_manager.import_config(import_file)
        console.print(f"[green]Configuration imported from {import_file}[/green]", highlight=False)
        return

    if export:
        config_manager.export_config(export)
        console.print(f"[green]Configuration exported to {export}[/green]", highlight=False)
        return

    console.print(f"[bold]Configuration file:[/bold] {config_manager.config_file}", highlight=False)
    click.echo(tomli_w.dumps(config_manager.to_toml_dict()))
