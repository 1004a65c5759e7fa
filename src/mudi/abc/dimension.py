from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from mudi.errors import IndexOutOfBoundsError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from mudi.core.common import Coordinate

__all__ = ["Dimension"]


class Dimension(ABC):
    """
    A (set of) dimensions in an array.

    A dimension knows how many elements it spans, and how to convert a coordinate
    to a zero-based linear offset. Leaf dimensions describe a single axis; a
    composite combines several dimensions into a row-major layout.

    Subclasses implement ``size``, ``offset``, ``indices`` and ``unravel``; everything
    else is derived from those.
    """

    @property
    def ndim(self) -> int:
        """Number of coordinate components at the top level."""
        return 1

    @abstractmethod
    def size(self) -> int:
        """Get the number of elements in this dimension."""
        ...

    @abstractmethod
    def offset(self, index: Any) -> int:
        """
        Convert a coordinate to a linear offset for this dimension.

        Parameters
        ----------
        index : Coordinate
            An integer for a leaf dimension, or a tuple with one component per axis.

        Returns
        -------
        int
            A position in ``range(self.size())``.

        Raises
        ------
        IndexOutOfBoundsError
            If the coordinate falls outside the dimension.
        """
        ...

    @abstractmethod
    def indices(self) -> Iterator[Coordinate]:
        """Iterate over every valid coordinate, in the order of increasing offsets."""
        ...

    @abstractmethod
    def unravel(self, offset: int) -> Coordinate:
        """Convert a linear offset back to the coordinate it addresses."""
        ...

    @abstractmethod
    def describe(self) -> str:
        """Human readable description, used in error messages."""
        ...

    def contains(self, index: Any) -> bool:
        """True if ``index`` is a valid coordinate for this dimension."""
        try:
            self.offset(index)
        except (IndexError, TypeError):
            return False
        return True

    def _check_linear_offset(self, offset: int) -> int:
        if not 0 <= offset < self.size():
            raise IndexOutOfBoundsError(offset, self)
        return offset
