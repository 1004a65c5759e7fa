from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

from mudi.abc.dimension import Dimension
from mudi.core.common import ensure_tuple, is_integer, parse_extent, parse_index, product
from mudi.errors import CoordinateShapeError, IndexOutOfBoundsError, InvalidDimensionError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from mudi.core.common import Coordinate

__all__ = [
    "Composite",
    "DimensionLike",
    "FixedExtent",
    "SignedRange",
    "ZeroBasedRange",
    "parse_dimension",
]

DimensionLike: TypeAlias = "Dimension | int | range | Sequence[DimensionLike]"


@dataclass(frozen=True)
class FixedExtent(Dimension):
    """
    An axis of ``length`` elements, indexed from 0 to ``length - 1``.

    This is the dimension built from a plain integer, e.g. the ``4`` in ``(4, 5)``.
    """

    length: int

    def __init__(self, length: int) -> None:
        length_parsed = parse_extent(length, "length")
        if length_parsed < 1:
            raise InvalidDimensionError(length_parsed, "length must be at least 1")
        object.__setattr__(self, "length", length_parsed)

    def size(self) -> int:
        return self.length

    def offset(self, index: Any) -> int:
        index = parse_index(index, self, signed=False)
        if index >= self.length:
            raise IndexOutOfBoundsError(index, self)
        return index

    def indices(self) -> range:
        return range(self.length)

    def unravel(self, offset: int) -> int:
        return self._check_linear_offset(parse_index(offset, self, signed=True))

    def describe(self) -> str:
        return f"dimension with length {self.length}"

    def __index__(self) -> int:
        return self.length


@dataclass(frozen=True)
class _RangeDimension(Dimension):
    """Half-open ``[start, end)`` axis. Offsets are measured from ``start``."""

    start: int
    end: int

    _signed = False

    def __init__(self, start: int, end: int) -> None:
        start_parsed = parse_extent(start, "start")
        end_parsed = parse_extent(end, "end")
        if not self._signed and start_parsed < 0:
            raise InvalidDimensionError(
                range(start_parsed, end_parsed),
                f"{type(self).__name__} cannot start below 0, use SignedRange instead",
            )
        if end_parsed <= start_parsed:
            raise InvalidDimensionError(
                range(start_parsed, end_parsed), "end must be greater than start"
            )
        object.__setattr__(self, "start", start_parsed)
        object.__setattr__(self, "end", end_parsed)

    def size(self) -> int:
        return self.end - self.start

    def offset(self, index: Any) -> int:
        index = parse_index(index, self, signed=self._signed)
        if not self.start <= index < self.end:
            raise IndexOutOfBoundsError(index, self)
        return index - self.start

    def indices(self) -> range:
        return range(self.start, self.end)

    def unravel(self, offset: int) -> int:
        return self.start + self._check_linear_offset(parse_index(offset, self, signed=True))

    def describe(self) -> str:
        return f"range {self.start}..{self.end}"


@dataclass(frozen=True, init=False)
class ZeroBasedRange(_RangeDimension):
    """
    An axis covering ``start..end`` with ``start >= 0``.

    Negative coordinates are never valid on this axis.
    """


@dataclass(frozen=True, init=False)
class SignedRange(_RangeDimension):
    """
    An axis covering ``start..end`` where ``start`` may be negative.

    Negative coordinates address the coordinate itself, there is no indexing
    from the end: on ``SignedRange(-4, 10)``, coordinate ``-3`` is at offset 1.
    """

    _signed = True


@dataclass(frozen=True)
class Composite(Dimension):
    """
    A row-major combination of dimensions, one per axis.

    The last axis varies fastest. Children can be any dimension, including
    other composites, in which case the matching coordinate component is itself
    a tuple.

    Examples
    --------
    >>> dims = Composite(2, 3)
    >>> [dims.offset(c) for c in [(0, 0), (0, 1), (0, 2), (1, 0)]]
    [0, 1, 2, 3]
    """

    children: tuple[Dimension, ...]

    def __init__(self, *children: DimensionLike) -> None:
        if len(children) == 0:
            raise InvalidDimensionError(children, "a composite needs at least one axis")
        object.__setattr__(self, "children", tuple(parse_dimension(c) for c in children))

    @property
    def ndim(self) -> int:
        return len(self.children)

    def size(self) -> int:
        return product(child.size() for child in self.children)

    def offset(self, index: Any) -> int:
        coords = ensure_tuple(index)
        if len(coords) != len(self.children):
            raise CoordinateShapeError(coords, len(self.children))
        result = 0
        for axis, (child, coord) in enumerate(zip(self.children, coords, strict=True)):
            try:
                child_offset = child.offset(coord)
            except IndexOutOfBoundsError as e:
                e.axis = (axis, *e.axis)
                raise
            result = result * child.size() + child_offset
        return result

    def indices(self) -> Iterator[tuple[Coordinate, ...]]:
        return itertools.product(*(child.indices() for child in self.children))

    def unravel(self, offset: int) -> tuple[Coordinate, ...]:
        remainder = self._check_linear_offset(parse_index(offset, self, signed=True))
        coords: list[Coordinate] = []
        for child in reversed(self.children):
            remainder, child_offset = divmod(remainder, child.size())
            coords.append(child.unravel(child_offset))
        return tuple(reversed(coords))

    def describe(self) -> str:
        return f"dimensions ({', '.join(c.describe() for c in self.children)})"

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Dimension]:
        return iter(self.children)

    def __getitem__(self, axis: int) -> Dimension:
        return self.children[axis]


def parse_dimension(data: DimensionLike) -> Dimension:
    """
    Convert a dimension-like value to a ``Dimension``.

    - ``Dimension`` instances are returned as-is
    - integers become a ``FixedExtent``
    - ranges with a step of 1 become a ``ZeroBasedRange``, or a ``SignedRange``
      when they start below zero
    - tuples and lists become a ``Composite`` of their parsed items
    """
    if isinstance(data, Dimension):
        return data
    if is_integer(data):
        return FixedExtent(data)
    if isinstance(data, range):
        if data.step != 1:
            raise InvalidDimensionError(data, "only ranges with a step of 1 are supported")
        if data.start < 0:
            return SignedRange(data.start, data.stop)
        return ZeroBasedRange(data.start, data.stop)
    if isinstance(data, (tuple | list)):
        return Composite(*data)
    raise TypeError(
        f"Expected a Dimension, an integer, a range or a sequence of those. Got {data!r} instead."
    )
