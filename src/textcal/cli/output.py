"""
Rendering helpers shared by the CLI commands.
"""

from datetime import date
from typing import Any, Iterable, Sequence

import click
from rich.console import Console
from rich.table import Table

from textcal.constants import MISSING_DISPLAY

console = Console()


def display(value: Any) -> str:
    """Text for one value: NA for missing values, ISO format for dates."""
    if value is None:
        return MISSING_DISPLAY
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def echo_values(values: Iterable[Any]) -> None:
    for value in values:
        click.echo(display(value))


def print_table(title: str, headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> None:
    table = Table(title=title)
    for header in headers:
        table.add_column(str(header))
    for row in rows:
        table.add_row(*(display(value) for value in row))
    console.print(table)
