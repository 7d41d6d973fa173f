"""
Helpers for the vectorised text and date functions.

A "vector" is any non-string iterable (list, tuple, pandas Series, generator).
Vectors of different lengths are recycled to the longest one.
"""

from itertools import cycle, islice
from typing import Any, Iterable, List, Sequence

from ..exceptions import InvalidArgumentError


def is_vector(value: Any) -> bool:
    """True for non-string iterables."""
    if isinstance(value, (str, bytes)):
        return False
    try:
        iter(value)
    except TypeError:
        return False
    return True


def as_list(value: Any) -> List[Any]:
    """Wrap a scalar in a list, materialise a vector."""
    return list(value) if is_vector(value) else [value]


def recycle(*values: Any) -> List[Sequence[Any]]:
    """Recycle scalars and vectors to the length of the longest vector.

    Returns one list per argument, all of equal length. An empty vector
    makes every result empty.
    """
    columns = [as_list(value) for value in values]
    if not columns:
        return []
    if any(len(column) == 0 for column in columns):
        return [[] for _ in columns]

    size = max(len(column) for column in columns)
    return [list(islice(cycle(column), size)) for column in columns]


def ensure_int(name: str, value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if not isinstance(value, bool):
        try:
            if int(value) == value:
                return int(value)
        except (TypeError, ValueError, OverflowError):
            pass
    raise InvalidArgumentError(name, value, "an integer")


def map_vector(func, value: Any) -> Any:
    """Apply ``func`` to a scalar, or element-wise to a vector (returning a list)."""
    if is_vector(value):
        return [func(item) for item in value]
    return func(value)


def all_scalars(values: Iterable[Any]) -> bool:
    return not any(is_vector(value) for value in values)
