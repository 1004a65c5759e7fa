from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mudi.core.common import is_integer
from mudi.core.config import parse_dtype
from mudi.core.dimensions import parse_dimension
from mudi.errors import ShapeMismatchError
from mudi.registry import get_storage_class

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from typing import Self

    from mudi.abc.dimension import Dimension
    from mudi.abc.storage import Storage
    from mudi.core.common import Coordinate
    from mudi.core.dimensions import DimensionLike

__all__ = ["Array", "FlatView"]

logger = logging.getLogger(__name__)


def _parse_storage_class(storage: type[Storage] | None) -> type[Storage]:
    if storage is None:
        return get_storage_class()
    return storage


class Array:
    """
    A multi-dimensional array with owned storage.

    An array pairs a flat storage with a single dimension value. The dimension
    converts every coordinate to a linear offset in the storage, so the array
    itself never does any index arithmetic. The shape of an array is fixed at
    construction.

    Use ``Array.from_values`` or ``Array.from_element`` to create arrays.

    Examples
    --------
    >>> a = Array.from_values([1, 2, 3, 4], (2, 2))
    >>> int(a[1, 0])
    3
    >>> b = Array.from_element(0.0, range(-42, 42))
    >>> float(b[-12])
    0.0
    """

    _storage: Storage
    _dims: Dimension

    def __init__(self, storage: Storage, dims: DimensionLike) -> None:
        dims_parsed = parse_dimension(dims)
        if len(storage) != dims_parsed.size():
            raise ShapeMismatchError(len(storage), dims_parsed.size())
        self._storage = storage
        self._dims = dims_parsed

    @classmethod
    def from_values(
        cls,
        values: Iterable[Any],
        dims: DimensionLike,
        *,
        dtype: Any = None,
        storage: type[Storage] | None = None,
    ) -> Self:
        """
        Create a new array using a copy of ``values``, in row-major order.

        Parameters
        ----------
        values : Iterable
            The elements of the array. Multi-dimensional numpy arrays are flattened in C order.
        dims : DimensionLike
            The dimensions of the array.
        dtype : optional
            Element type, passed on to the storage. Defaults to the ``array.dtype`` config value.
        storage : type[Storage], optional
            Storage class. Defaults to the class selected by the ``storage`` config value.

        Raises
        ------
        ShapeMismatchError
            If the number of values does not match the size of the dimensions.
        """
        storage_cls = _parse_storage_class(storage)
        data = storage_cls.from_sequence(values, dtype=parse_dtype(dtype))
        logger.debug("Creating array of %d values using %s", len(data), storage_cls.__name__)
        return cls(data, dims)

    @classmethod
    def from_element(
        cls,
        element: Any,
        dims: DimensionLike,
        *,
        dtype: Any = None,
        storage: type[Storage] | None = None,
    ) -> Self:
        """
        Create a new array holding a copy of ``element`` at every coordinate.

        Parameters
        ----------
        element
            The fill value.
        dims : DimensionLike
            The dimensions of the array.
        dtype : optional
            Element type, passed on to the storage. Defaults to the ``array.dtype`` config value.
        storage : type[Storage], optional
            Storage class. Defaults to the class selected by the ``storage`` config value.
        """
        dims_parsed = parse_dimension(dims)
        storage_cls = _parse_storage_class(storage)
        logger.debug(
            "Filling array of %d elements with %r using %s",
            dims_parsed.size(),
            element,
            storage_cls.__name__,
        )
        data = storage_cls.filled(element, dims_parsed.size(), dtype=parse_dtype(dtype))
        return cls(data, dims_parsed)

    def shape(self) -> Dimension:
        """Get the dimensions of the array."""
        return self._dims

    @property
    def ndim(self) -> int:
        return self._dims.ndim

    @property
    def dtype(self) -> Any:
        return self._storage.dtype

    @property
    def storage(self) -> Storage:
        return self._storage

    def __len__(self) -> int:
        return len(self._storage)

    def __getitem__(self, coordinate: Coordinate) -> Any:
        return self._storage[self._dims.offset(coordinate)]

    def __setitem__(self, coordinate: Coordinate, value: Any) -> None:
        self._storage[self._dims.offset(coordinate)] = value

    def flat_iter(self) -> Iterator[Any]:
        """Iterate over the elements in storage order, which is row-major order."""
        return iter(self._storage)

    @property
    def flat(self) -> FlatView:
        """A view of the elements by linear offset, which can also be written to."""
        return FlatView(self._storage)

    def items(self) -> Iterator[tuple[Coordinate, Any]]:
        """Iterate over ``(coordinate, value)`` pairs in row-major order."""
        return zip(self._dims.indices(), self._storage, strict=True)

    def copy(self) -> Self:
        return self.__class__(self._storage.copy(), self._dims)

    def to_list(self) -> list[Any]:
        """The elements in row-major order, as a flat list."""
        return self._storage.to_list()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self._dims == other._dims and self._storage == other._storage

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<Array {self._dims!r} {self._storage!r}>"


class FlatView:
    """
    Linear access to the storage of an array.

    Iterating a view always starts from the first element, so a view can be
    traversed any number of times.
    """

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._storage)

    def _check_offset(self, offset: Any) -> int:
        if not is_integer(offset):
            raise TypeError(f"Expected an integer offset, got {offset!r}.")
        # linear offsets never wrap around
        if not 0 <= offset < len(self._storage):
            raise IndexError(
                f"offset {offset} is out of bounds for storage of length {len(self._storage)}"
            )
        return int(offset)

    def __getitem__(self, offset: int) -> Any:
        return self._storage[self._check_offset(offset)]

    def __setitem__(self, offset: int, value: Any) -> None:
        self._storage[self._check_offset(offset)] = value
