from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

import numpy as np
import numpy.typing as npt

from mudi.abc.storage import Storage
from mudi.core.common import is_integer

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from typing import Self


def _object_array(items: list[Any]) -> npt.NDArray[Any]:
    data = np.empty(len(items), dtype=object)
    for i, item in enumerate(items):
        data[i] = item
    return data


def _as_flat_array(values: Iterable[Any], dtype: Any) -> npt.NDArray[Any]:
    # n-dimensional numpy input is taken in C order
    if isinstance(values, np.ndarray):
        data = np.array(values, dtype=dtype).ravel(order="C")
        if dtype is None and data.dtype.kind in "US":
            # fixed width strings would cut longer values written later
            data = data.astype(object)
        return data
    items = list(values)
    if dtype is None and any(isinstance(item, (str, bytes)) for item in items):
        return _object_array(items)
    try:
        data = np.array(items, dtype=dtype)
    except ValueError:
        # ragged input, e.g. tuples of different lengths
        data = None
    if data is not None and data.ndim == 1:
        return data
    if dtype is not None and np.dtype(dtype) != np.dtype(object):
        raise ValueError(f"Cannot store {items!r} as a flat array of dtype {np.dtype(dtype)}.")
    # elements numpy would turn into extra axes are kept as objects
    return _object_array(items)


def _holds(dtype: np.dtype[Any], value: Any) -> bool:
    """True if ``value`` can be written into an array of ``dtype`` without changing it."""
    if dtype == np.dtype(object):
        return True
    if not np.isscalar(value):
        return False
    if is_integer(value) and dtype.kind in "iu":
        info = np.iinfo(dtype)
        return bool(info.min <= int(value) <= info.max)
    return bool(np.can_cast(np.min_scalar_type(value), dtype, "safe"))


class NumpyStorage(Storage):
    """
    Storage backed by a one-dimensional NumPy array.

    Parameters
    ----------
    array
        A one-dimensional numpy array. It is used as-is, without a copy.
    """

    _data: npt.NDArray[Any]

    def __init__(self, array: npt.NDArray[Any]) -> None:
        if array.ndim != 1:
            raise ValueError(f"Expected a one-dimensional array, got {array.ndim} dimensions.")
        self._data = array

    @classmethod
    def from_sequence(cls, values: Iterable[Any], *, dtype: Any = None) -> Self:
        return cls(_as_flat_array(values, dtype))

    @classmethod
    def filled(cls, element: Any, size: int, *, dtype: Any = None) -> Self:
        # strings go in an object array, so longer ones can be written later
        if dtype is None and (not np.isscalar(element) or isinstance(element, (str, bytes))):
            data = np.empty(size, dtype=object)
            for i in range(size):
                data[i] = copy.copy(element)
            return cls(data)
        return cls(np.full(size, element, dtype=dtype))

    @property
    def dtype(self) -> np.dtype[Any]:
        return self._data.dtype

    def as_numpy_array(self) -> npt.NDArray[Any]:
        """Returns the underlying numpy array. Changes to it are visible in the storage."""
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, offset: int) -> Any:
        return self._data[offset]

    def __setitem__(self, offset: int, value: Any) -> None:
        if not _holds(self._data.dtype, value):
            raise TypeError(
                f"Cannot store {value!r} in storage of dtype {self._data.dtype} without changing its value."
            )
        self._data[offset] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def copy(self) -> Self:
        return self.__class__(self._data.copy())

    def to_list(self) -> list[Any]:
        return self._data.tolist()

    def __repr__(self) -> str:
        return f"<NumpyStorage {self._data!r}>"
