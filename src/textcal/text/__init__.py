"""Text recipes."""

from .combine import cartesian_frame, cartesian_join
from .strings import (
    byte_length,
    join,
    length,
    replace_all,
    replace_first,
    slice_text,
    split,
)

__all__ = [
    "length",
    "byte_length",
    "join",
    "slice_text",
    "split",
    "replace_first",
    "replace_all",
    "cartesian_join",
    "cartesian_frame",
]
