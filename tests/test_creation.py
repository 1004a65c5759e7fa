from collections.abc import Callable

import numpy as np
import pytest

import mudi
from mudi import Array
from mudi.errors import ShapeMismatchError


def test_array() -> None:
    a = mudi.array([3, 4, 5,
                    6, 7, 8], (2, 3))
    assert a[0, 1] == 4
    assert a[1, 2] == 8


def test_array_equals_from_values() -> None:
    a = mudi.array([0.0, 1.0, 2.0, 3.0], (2, 2))
    assert a == Array.from_values([0.0, 1.0, 2.0, 3.0], (2, 2))


def test_array_mismatch() -> None:
    with pytest.raises(ShapeMismatchError):
        mudi.array([1, 2, 3], (2, 2))


def test_full() -> None:
    a = mudi.full((range(-3, 3), 2), 0.0)
    assert a[-1, 0] == 0.0
    assert a[2, 1] == 0.0
    assert all(v == 0.0 for v in a.flat_iter())
    assert len(a) == 12


def test_full_three_axes() -> None:
    a = mudi.full((4, 5, 6), 0.0)
    assert list(a.flat_iter()) == [0.0] * 120


@pytest.mark.parametrize(("func", "value"), [(mudi.zeros, 0), (mudi.ones, 1)])
def test_zeros_ones(func: Callable[..., Array], value: int) -> None:
    a = func((2, 3), dtype="float32")
    assert a.dtype == np.dtype("float32")
    assert a.to_list() == [value] * 6


def test_kwargs_forwarded() -> None:
    a = mudi.array("xyz", 3, storage=mudi.ListStorage)
    assert a.to_list() == ["x", "y", "z"]
