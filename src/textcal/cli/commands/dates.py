"""Date commands: today, now, parse, format, compose, parts, julian and seq."""

from typing import Optional, Tuple

import click

from textcal.dates import (
    compose_date,
    date_sequence,
    day_offset,
    decompose_date,
    decompose_date_legacy,
    format_date,
    from_day_offset,
    julian as julian_days,
    now as current_instant,
    now_date,
    parse_date,
)
from textcal.constants import DEFAULT_DATETIME_FORMAT, OVERFLOW_POLICIES
from textcal.exceptions import InvalidArgumentError, InvalidCommandError, MissingArgumentError

from ..output import display, echo_values, print_table


def _date_settings(ctx: click.Context):
    return ctx.obj["config"].dates


def _require_date(ctx: click.Context, value: str, name: str):
    parsed = parse_date(value, try_formats=_date_settings(ctx).try_formats)
    if parsed is None:
        raise InvalidArgumentError(name, value, "a date matching the configured try formats")
    return parsed


@click.command()
@click.option("--tz", default=None, help="Time zone name (defaults to the configured one)")
@click.option("--format", "date_format", default=None, help="Output format")
@click.pass_context
def today(ctx: click.Context, tz: Optional[str], date_format: Optional[str]) -> None:
    """Print today's date."""
    settings = _date_settings(ctx)
    click.echo(format_date(now_date(tz or settings.timezone), date_format or settings.date_format))


@click.command()
@click.option("--tz", default=None, help="Time zone name (defaults to the configured one)")
@click.option("--format", "date_format", default=DEFAULT_DATETIME_FORMAT, show_default=True, help="Output format")
@click.pass_context
def now(ctx: click.Context, tz: Optional[str], date_format: str) -> None:
    """Print the current date and time."""
    click.echo(format_date(current_instant(tz or _date_settings(ctx).timezone), date_format))


@click.command()
@click.argument("texts", nargs=-1, required=True)
@click.option("--format", "date_format", default=None, help="Format the texts must match")
@click.pass_context
def parse(ctx: click.Context, texts: Tuple[str, ...], date_format: Optional[str]) -> None:
    """Convert each TEXT to an ISO date, printing NA when it does not parse.

    \b
    Examples:
        textcal parse 2010-12-31 2010/12/31
        textcal parse --format %m/%d/%Y 12/31/2010
    """
    echo_values(parse_date(list(texts), date_format, try_formats=_date_settings(ctx).try_formats))


@click.command(name="format")
@click.argument("value")
@click.argument("date_format", required=False)
@click.pass_context
def format_command(ctx: click.Context, value: str, date_format: Optional[str]) -> None:
    """Render the date VALUE with DATE_FORMAT.

    \b
    Examples:
        textcal format 2012-05-08 "%d %B %Y"
        textcal format 2012-05-08 %b/%d/%y
    """
    fmt = date_format or _date_settings(ctx).date_format
    click.echo(format_date(_require_date(ctx, value, "value"), fmt))


@click.command()
@click.argument("year", type=int)
@click.argument("month", type=int)
@click.argument("day", type=int)
def compose(year: int, month: int, day: int) -> None:
    """Build a date from YEAR, MONTH and DAY, printing NA if it does not exist."""
    click.echo(display(compose_date(year, month, day)))


@click.command()
@click.argument("value")
@click.option("--legacy/--absolute", default=None, help="Use struct tm numbering (years since 1900, zero-based month)")
@click.pass_context
def parts(ctx: click.Context, value: str, legacy: Optional[bool]) -> None:
    """Show the calendar fields of the date VALUE."""
    if legacy is None:
        legacy = _date_settings(ctx).legacy_parts
    day = _require_date(ctx, value, "value")
    fields = decompose_date_legacy(day) if legacy else decompose_date(day)
    print_table(f"Calendar parts of {day.isoformat()}", ["field", "value"], fields.to_dict().items())


@click.command()
@click.argument("value")
@click.option("--origin", default=None, help="Origin date (defaults to 1970-01-01)")
@click.option("--reverse", is_flag=True, help="Treat VALUE as a day count since the epoch and print its date")
@click.pass_context
def julian(ctx: click.Context, value: str, origin: Optional[str], reverse: bool) -> None:
    """Print the days between the origin and the date VALUE.

    \b
    Examples:
        textcal julian 1970-01-02
        textcal julian 2010-03-15 --origin 2010-01-01
        textcal julian --reverse 14700
    """
    if reverse:
        if origin:
            raise InvalidCommandError("julian", "--origin cannot be combined with --reverse")
        try:
            days = int(value)
        except ValueError:
            raise InvalidArgumentError("value", value, "an integer day count")
        click.echo(display(from_day_offset(days)))
        return

    day = _require_date(ctx, value, "value")
    if origin:
        click.echo(julian_days(day, _require_date(ctx, origin, "origin")))
    else:
        click.echo(day_offset(day))


@click.command()
@click.argument("start")
@click.option("--end", default=None, help="Last date (inclusive bound)")
@click.option("--count", type=int, default=None, help="Number of dates")
@click.option("--step", default="1 day", show_default=True, help="Day count or '[-]N day|week|month|quarter|year[s]'")
@click.option("--overflow", type=click.Choice(OVERFLOW_POLICIES), default=None, help="Month-end policy for calendar steps")
@click.option("--format", "date_format", default=None, help="Output format")
@click.option("--table", is_flag=True, help="Show dates with weekday and day offset in a table")
@click.pass_context
def seq(
    ctx: click.Context,
    start: str,
    end: Optional[str],
    count: Optional[int],
    step: str,
    overflow: Optional[str],
    date_format: Optional[str],
    table: bool,
) -> None:
    """Print a sequence of dates beginning at START.

    \b
    Examples:
        textcal seq 2019-01-29 --step month --count 3
        textcal seq 2010-01-01 --end 2010-12-31 --step quarter
        textcal seq 2010-01-01 --count 5 --step "2 weeks" --table
    """
    if end is None and count is None:
        raise MissingArgumentError("seq", "--end or --count")
    if end is not None and count is not None:
        raise InvalidCommandError("seq", "--end and --count cannot be combined")

    settings = _date_settings(ctx)
    step_value = int(step) if step.lstrip("+-").isdigit() else step
    sequence = date_sequence(
        _require_date(ctx, start, "start"),
        end=_require_date(ctx, end, "end") if end else None,
        step=step_value,
        count=count,
        overflow=overflow or settings.month_overflow,
    )
    fmt = date_format or settings.date_format

    if table:
        print_table(
            f"{len(sequence)} dates, step {sequence.step}",
            ["date", "weekday", "day offset"],
            ([format_date(day, fmt), format_date(day, "%A"), day_offset(day)] for day in sequence),
        )
        return
    echo_values(format_date(sequence.to_list(), fmt))
