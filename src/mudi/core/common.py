from __future__ import annotations

import functools
import numbers
import operator
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, TypeGuard

import numpy as np

from mudi.errors import NegativeIndexError

if TYPE_CHECKING:
    from mudi.abc.dimension import Dimension

# a coordinate is an integer for a leaf dimension, or a tuple of coordinates for a composite
Coordinate = int | tuple["Coordinate", ...]


def product(tup: Iterable[int]) -> int:
    return functools.reduce(operator.mul, tup, 1)


def is_integer(x: Any) -> TypeGuard[int]:
    """True if x is an integer (both pure Python or NumPy)."""
    return isinstance(x, numbers.Integral) and not is_bool(x)


def is_bool(x: Any) -> TypeGuard[bool | np.bool_]:
    """True if x is a boolean (both pure Python or NumPy)."""
    return type(x) in [bool, np.bool_]


def ensure_tuple(v: Any) -> tuple[Any, ...]:
    if isinstance(v, tuple):
        return v
    if isinstance(v, list):
        return tuple(v)
    return (v,)


def parse_index(index: Any, dimension: Dimension, *, signed: bool) -> int:
    """
    Normalize a single coordinate component to a Python int.

    Unsigned axes refuse negative values outright, as there is no wraparound.
    """
    if not is_integer(index):
        raise TypeError(f"Expected an integer index, got {index!r} of type {type(index)}.")
    index = int(index)
    if not signed and index < 0:
        raise NegativeIndexError(index, dimension)
    return index


def parse_extent(data: Any, name: str) -> int:
    if not is_integer(data):
        raise TypeError(f"Expected an integer for '{name}', got {data!r} instead.")
    return int(data)
