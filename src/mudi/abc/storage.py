from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from typing import Self

__all__ = ["Storage"]


class Storage(ABC):
    """
    Flat storage of the data of an array.

    A storage holds ``len(storage)`` elements, addressed by their linear offset.
    It knows nothing about dimensions: arrays convert coordinates to offsets
    before reaching the storage.
    """

    @classmethod
    @abstractmethod
    def from_sequence(cls, values: Iterable[Any], *, dtype: Any = None) -> Self:
        """Create a storage holding a copy of ``values``, in order."""
        ...

    @classmethod
    @abstractmethod
    def filled(cls, element: Any, size: int, *, dtype: Any = None) -> Self:
        """Create a storage of ``size`` copies of ``element``."""
        ...

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def __getitem__(self, offset: int) -> Any: ...

    @abstractmethod
    def __setitem__(self, offset: int, value: Any) -> None: ...

    @abstractmethod
    def __iter__(self) -> Iterator[Any]: ...

    @abstractmethod
    def copy(self) -> Self: ...

    @property
    def dtype(self) -> Any:
        """Type of the stored elements, if the storage has one."""
        return None

    def to_list(self) -> list[Any]:
        return list(self)

    def __eq__(self, other: object) -> bool:
        """Element-wise equality, in linear order. The storage classes may differ."""
        if not isinstance(other, Storage):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(bool(a == b) for a, b in zip(self, other, strict=True))

    __hash__ = None  # type: ignore[assignment]
