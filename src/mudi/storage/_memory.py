from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from mudi.abc.storage import Storage

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from typing import Self


class ListStorage(Storage):
    """
    Storage backed by a plain Python list.

    Elements are stored exactly as given, without any conversion. ``dtype``
    is accepted for compatibility with other storages and ignored.
    """

    _data: list[Any]

    def __init__(self, data: list[Any]) -> None:
        self._data = data

    @classmethod
    def from_sequence(cls, values: Iterable[Any], *, dtype: Any = None) -> Self:
        return cls(list(values))

    @classmethod
    def filled(cls, element: Any, size: int, *, dtype: Any = None) -> Self:
        return cls([copy.copy(element) for _ in range(size)])

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, offset: int) -> Any:
        return self._data[offset]

    def __setitem__(self, offset: int, value: Any) -> None:
        self._data[offset] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def copy(self) -> Self:
        return self.__class__(list(self._data))

    def __repr__(self) -> str:
        return f"<ListStorage {self._data!r}>"
