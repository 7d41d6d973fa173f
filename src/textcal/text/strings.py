"""
String recipes: length, join, substring extraction, splitting and substitution.

Every function accepts a single text or a vector of texts (any non-string
iterable, including a pandas Series). Scalars give scalars back, vectors
give lists. ``None`` stands for a missing text and passes through as
``None``.
"""

import logging
import re
from functools import lru_cache
from typing import Any, Iterable, List, Optional, Pattern, Union

from ..constants import DEFAULT_ENCODING, DEFAULT_JOIN_SEPARATOR, MISSING_DISPLAY
from ..exceptions import InvalidArgumentError
from ..logging import logged
from ..utils.vectors import all_scalars, ensure_int, map_vector, recycle

logger = logging.getLogger(__name__)

Text = Optional[str]
TextOrVector = Union[str, Iterable[Text], None]


def _as_text(value: Any) -> str:
    if value is None:
        return MISSING_DISPLAY
    return value if isinstance(value, str) else str(value)


@lru_cache(maxsize=128)
def _compile(pattern: str) -> Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidArgumentError("pattern", pattern, f"a valid regular expression ({e})")


@logged()
def length(text: TextOrVector) -> Union[Optional[int], List[Optional[int]]]:
    """Number of characters in a text, or per element of a vector of texts.

    >>> length("Moe")
    3
    >>> length(["Moe", "Larry", "Curly"])
    [3, 5, 5]
    """
    return map_vector(lambda item: None if item is None else len(_as_text(item)), text)


@logged()
def byte_length(text: TextOrVector, encoding: str = DEFAULT_ENCODING):
    """Encoded size of a text (or of each element of a vector) in bytes."""
    return map_vector(
        lambda item: None if item is None else len(_as_text(item).encode(encoding)), text
    )


@logged()
def join(
    texts: Iterable[Any],
    sep: str = DEFAULT_JOIN_SEPARATOR,
    collapse: Optional[str] = None,
) -> Union[str, List[str]]:
    """Concatenate texts.

    Each item of ``texts`` is a scalar or a vector. Vectors are recycled to
    the longest one and the items at each position are joined with ``sep``.
    With ``collapse`` the resulting vector is flattened into one string.

    >>> join(["Everybody", "loves", "stats."])
    'Everybody loves stats.'
    >>> join(["pre", ["a", "b"]], sep="-")
    ['pre-a', 'pre-b']
    >>> join([["a", "b", "c"]], collapse="")
    'abc'
    """
    if isinstance(texts, str):
        texts = [texts]
    items = list(texts)

    columns = recycle(*items)
    joined = [sep.join(_as_text(value) for value in row) for row in zip(*columns)]

    if collapse is not None:
        return collapse.join(joined)
    if all_scalars(items):
        return joined[0] if joined else ""
    return joined


@logged()
def slice_text(text: TextOrVector, start: Any, end: Any):
    """Extract the substring from ``start`` to ``end``, 1-indexed and inclusive.

    ``text``, ``start`` and ``end`` may each be vectors; they are recycled to
    the longest. Bounds outside the text are clipped, and ``start > end``
    gives an empty string.

    >>> slice_text("Statistics", 1, 4)
    'Stat'
    >>> slice_text(["Moe", "Larry", "Curly"], 1, 2)
    ['Mo', 'La', 'Cu']
    """
    def extract(value, first, last):
        if value is None:
            return None
        first = ensure_int("start", first)
        last = ensure_int("end", last)
        return _as_text(value)[max(first, 1) - 1:max(last, 0)]

    if all_scalars((text, start, end)):
        return extract(text, start, end)
    return [extract(*row) for row in zip(*recycle(text, start, end))]


def _split_one(text: Text, pattern: str, fixed: bool) -> Optional[List[str]]:
    if text is None:
        return None
    text = _as_text(text)
    if pattern == "":
        return list(text)

    if fixed:
        pieces = text.split(pattern)
    else:
        pieces = []
        position = 0
        for match in _compile(pattern).finditer(text):
            if match.start() == match.end():
                continue
            pieces.append(text[position:match.start()])
            position = match.end()
        pieces.append(text[position:])

    # A trailing delimiter does not produce a trailing empty piece
    if len(pieces) > 1 and pieces[-1] == "":
        pieces.pop()
    return pieces


@logged()
def split(text: TextOrVector, pattern: str, fixed: bool = False):
    """Split a text at every match of ``pattern``.

    The pattern is a regular expression unless ``fixed`` is set. A leading
    delimiter yields a leading empty string. Vectors give a list of lists.

    >>> split("/home/mike/data/trials.csv", "/")
    ['', 'home', 'mike', 'data', 'trials.csv']
    """
    if not isinstance(pattern, str):
        raise InvalidArgumentError("pattern", pattern, "a string")
    return map_vector(lambda item: _split_one(item, pattern, fixed), text)


def _replace(text: TextOrVector, pattern: str, replacement: str, fixed: bool, count: int):
    if not isinstance(pattern, str) or pattern == "":
        raise InvalidArgumentError("pattern", pattern, "a non-empty string")

    def substitute(item):
        if item is None:
            return None
        item = _as_text(item)
        if fixed:
            return item.replace(pattern, replacement, count if count else -1)
        return _compile(pattern).sub(replacement, item, count=count)

    return map_vector(substitute, text)


@logged()
def replace_first(text: TextOrVector, pattern: str, replacement: str, fixed: bool = False):
    """Replace the first match of ``pattern`` in a text (or in each element).

    >>> replace_first("Curly is the smart one. Curly is funny, too.", "Curly", "Moe")
    'Moe is the smart one. Curly is funny, too.'
    """
    return _replace(text, pattern, replacement, fixed, count=1)


@logged()
def replace_all(text: TextOrVector, pattern: str, replacement: str, fixed: bool = False):
    """Replace every match of ``pattern`` in a text (or in each element)."""
    return _replace(text, pattern, replacement, fixed, count=0)
