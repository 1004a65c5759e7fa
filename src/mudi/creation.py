from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mudi.core.array import Array

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mudi.core.dimensions import DimensionLike

__all__ = ["array", "full", "ones", "zeros"]


def array(values: Iterable[Any], dims: DimensionLike, **kwargs: Any) -> Array:
    """Create an array containing ``values``, like a list literal laid out over ``dims``.

    Parameters
    ----------
    values : Iterable
        The elements of the array, in row-major order.
    dims : DimensionLike
        The dimensions of the array, e.g. ``(2, 3)`` or ``(range(-3, 3), 2)``.
    **kwargs
        Passed on to ``Array.from_values``.

    Examples
    --------
    >>> a = array([3, 4, 5,
    ...            6, 7, 8], (2, 3))
    >>> int(a[0, 1]), int(a[1, 2])
    (4, 8)
    """
    return Array.from_values(values, dims, **kwargs)


def full(dims: DimensionLike, fill_value: Any, **kwargs: Any) -> Array:
    """Create an array where every element is ``fill_value``.

    Examples
    --------
    >>> a = full((range(-3, 3), 2), 0.0)
    >>> float(a[-1, 0])
    0.0
    """
    return Array.from_element(fill_value, dims, **kwargs)


def zeros(dims: DimensionLike, **kwargs: Any) -> Array:
    """Create an array filled with zeros."""
    return full(dims, 0, **kwargs)


def ones(dims: DimensionLike, **kwargs: Any) -> Array:
    """Create an array filled with ones."""
    return full(dims, 1, **kwargs)
