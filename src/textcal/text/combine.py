"""
Pairwise combinations of two sets of strings.
"""

import logging
from typing import Any, Callable, Iterable, List, Optional

import pandas as pd

from ..constants import DEFAULT_JOIN_SEPARATOR
from ..exceptions import InvalidArgumentError
from ..logging import logged
from .strings import join

logger = logging.getLogger(__name__)

Combiner = Callable[[Any, Any], Any]


def _default_combiner(sep: str) -> Combiner:
    return lambda left, right: join([left, right], sep=sep)


@logged()
def cartesian_join(
    a: Iterable[Any],
    b: Iterable[Any],
    combiner: Optional[Combiner] = None,
    sep: str = DEFAULT_JOIN_SEPARATOR,
    unique_pairs: bool = False,
    include_diagonal: bool = True,
) -> List[Any]:
    """Combine every element of ``a`` with every element of ``b``.

    Returns a matrix as a list of rows: row ``i`` holds ``a[i]`` combined with
    each element of ``b``. The default combiner joins the pair with ``sep``.

    With ``unique_pairs`` the two sets must be equal and only the upper
    triangle is returned, flattened row by row, so ``(x, y)`` and ``(y, x)``
    appear once. ``include_diagonal=False`` also drops self-pairs.
    """
    left = list(a)
    right = list(b)
    combine = combiner or _default_combiner(sep)

    if not unique_pairs:
        return [[combine(x, y) for y in right] for x in left]

    if left != right:
        raise InvalidArgumentError(
            "b", right, "the same elements as 'a' when unique_pairs is set"
        )

    offset = 0 if include_diagonal else 1
    pairs = [
        combine(left[i], right[j])
        for i in range(len(left))
        for j in range(i + offset, len(right))
    ]
    logger.debug(f"Built {len(pairs)} unique pairs from {len(left)} elements")
    return pairs


@logged()
def cartesian_frame(
    a: Iterable[Any],
    b: Iterable[Any],
    combiner: Optional[Combiner] = None,
    sep: str = DEFAULT_JOIN_SEPARATOR,
) -> pd.DataFrame:
    """The full combination matrix as a DataFrame indexed by ``a`` with columns ``b``."""
    left = list(a)
    right = list(b)
    matrix = cartesian_join(left, right, combiner=combiner, sep=sep)
    return pd.DataFrame(matrix, index=left, columns=right)
