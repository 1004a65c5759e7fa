from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mudi.abc.dimension import Dimension

__all__ = [
    "BaseMudiError",
    "CoordinateShapeError",
    "IndexOutOfBoundsError",
    "InvalidDimensionError",
    "NegativeIndexError",
    "ShapeMismatchError",
]


class BaseMudiError(ValueError):
    """
    Base error which all mudi value errors are sub-classed from.
    """

    _msg: str = "{}"

    def __init__(self, *args: object) -> None:
        """
        If a single argument is passed, treat it as a pre-formatted message.

        If multiple arguments are passed, they are used as arguments for a template string class
        variable.
        """
        if len(args) == 1:
            super().__init__(args[0])
        else:
            super().__init__(self._msg.format(*args))


class ShapeMismatchError(BaseMudiError):
    """Raised when the number of elements does not match the size of the dimensions."""

    _msg = "Data length {} does not match the size {} of the dimensions."


class InvalidDimensionError(BaseMudiError):
    """Raised when a dimension would be empty, inverted or otherwise malformed."""

    _msg = "Invalid dimension {!r}: {}"


class IndexOutOfBoundsError(IndexError):
    """
    Raised when a coordinate falls outside the valid range of an axis.

    Attributes
    ----------
    index
        The offending coordinate, as supplied.
    dimension
        The leaf dimension which rejected the coordinate.
    axis
        Position of the failing axis within the enclosing composite dimensions,
        outermost first. Empty when the dimension was indexed directly.
    """

    def __init__(self, index: Any, dimension: Dimension) -> None:
        super().__init__(index, dimension)
        self.index = index
        self.dimension = dimension
        self.axis: tuple[int, ...] = ()

    def __str__(self) -> str:
        msg = f"index {self.index} is out of bounds for {self.dimension.describe()}"
        if self.axis:
            msg += f" (axis {', '.join(str(a) for a in self.axis)})"
        return msg


class NegativeIndexError(IndexOutOfBoundsError):
    """Raised when a negative coordinate is used on an axis without negative indices."""

    def __str__(self) -> str:
        return "negative " + super().__str__()


class CoordinateShapeError(IndexError):
    """Raised when a coordinate has a different number of components than the dimension."""

    def __init__(self, coordinate: Any, ndim: int) -> None:
        super().__init__(
            f"coordinate {coordinate!r} does not match the dimensions; "
            f"expected {ndim} components, got {len(coordinate)}"
        )
