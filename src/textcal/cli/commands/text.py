"""Text commands: length, join, slice, split, replace and combine."""

from typing import List, Optional, Tuple

import click

from textcal.text import (
    byte_length,
    cartesian_join,
    join as join_texts,
    length as text_length,
    replace_all,
    replace_first,
    slice_text,
    split as split_text,
)

from ..output import echo_values, print_table


def _list_argument(value: str) -> List[str]:
    return value.split(",")


@click.command()
@click.argument("texts", nargs=-1, required=True)
@click.option("--bytes", "count_bytes", is_flag=True, help="Count encoded bytes instead of characters")
@click.option("--encoding", default="utf-8", show_default=True, help="Encoding used with --bytes")
def length(texts: Tuple[str, ...], count_bytes: bool, encoding: str) -> None:
    """Print the length of each TEXT.

    \b
    Examples:
        textcal length Moe Larry Curly
        textcal length --bytes café
    """
    counts = byte_length(list(texts), encoding) if count_bytes else text_length(list(texts))
    echo_values(counts)


@click.command()
@click.argument("texts", nargs=-1, required=True)
@click.option("--sep", default=" ", show_default=True, help="Separator between joined items")
@click.option("--collapse", default=None, help="Flatten the result into one line with this separator")
@click.option("--lists", is_flag=True, help="Treat comma-separated TEXTS as vectors to recycle")
def join(texts: Tuple[str, ...], sep: str, collapse: Optional[str], lists: bool) -> None:
    """Concatenate TEXTS.

    \b
    Examples:
        textcal join Everybody loves stats.
        textcal join --sep "" Everybody loves stats.
        textcal join --lists --sep - pre a,b,c
    """
    items = [_list_argument(text) if lists and "," in text else text for text in texts]
    result = join_texts(items, sep=sep, collapse=collapse)
    echo_values([result] if isinstance(result, str) else result)


@click.command(name="slice")
@click.argument("text")
@click.argument("start", type=int)
@click.argument("end", type=int)
def slice_command(text: str, start: int, end: int) -> None:
    """Print the characters of TEXT from START to END (1-indexed, inclusive)."""
    click.echo(slice_text(text, start, end))


@click.command()
@click.argument("text")
@click.argument("pattern")
@click.option("--fixed/--regex", default=None, help="Match PATTERN literally or as a regular expression")
@click.pass_context
def split(ctx: click.Context, text: str, pattern: str, fixed: Optional[bool]) -> None:
    """Split TEXT at every match of PATTERN, one piece per line.

    \b
    Examples:
        textcal split /home/mike/data/trials.csv /
        textcal split "a.b.c" . --fixed
    """
    if fixed is None:
        fixed = not ctx.obj["config"].text.split_regex
    echo_values(split_text(text, pattern, fixed=fixed))


@click.command()
@click.argument("text")
@click.argument("pattern")
@click.argument("replacement")
@click.option("--all", "replace_every", is_flag=True, help="Replace every match instead of the first")
@click.option("--fixed/--regex", default=None, help="Match PATTERN literally or as a regular expression")
@click.pass_context
def replace(
    ctx: click.Context,
    text: str,
    pattern: str,
    replacement: str,
    replace_every: bool,
    fixed: Optional[bool],
) -> None:
    """Replace PATTERN in TEXT with REPLACEMENT.

    \b
    Examples:
        textcal replace "Curly is the smart one. Curly is funny, too." Curly Moe
        textcal replace --all "Curly is the smart one. Curly is funny, too." Curly Moe
    """
    if fixed is None:
        fixed = not ctx.obj["config"].text.replace_regex
    substitute = replace_all if replace_every else replace_first
    click.echo(substitute(text, pattern, replacement, fixed=fixed))


@click.command()
@click.argument("first")
@click.argument("second", required=False)
@click.option("--sep", default=" ", show_default=True, help="Separator between the two elements of a pair")
@click.option("--unique", is_flag=True, help="List each unordered pair of FIRST with itself once")
@click.option("--no-diagonal", is_flag=True, help="With --unique, leave out self-pairs")
def combine(first: str, second: Optional[str], sep: str, unique: bool, no_diagonal: bool) -> None:
    """Combine each element of FIRST with each element of SECOND.

    FIRST and SECOND are comma-separated lists; SECOND defaults to FIRST.

    \b
    Examples:
        textcal combine NY,LA,CHI T1,T2
        textcal combine --unique --no-diagonal NY,LA,CHI
    """
    left = _list_argument(first)
    right = _list_argument(second) if second else left

    if unique:
        echo_values(
            cartesian_join(left, right, sep=sep, unique_pairs=True, include_diagonal=not no_diagonal)
        )
        return

    matrix = cartesian_join(left, right, sep=sep)
    print_table(
        "Combinations",
        [""] + right,
        ([row_name] + row for row_name, row in zip(left, matrix)),
    )
