from typing import Any
from unittest import mock

import pytest

import mudi
from mudi import config
from mudi.core.config import BadConfigError, parse_dtype
from mudi.registry import fully_qualified_name, get_storage_class, register_storage
from mudi.storage import ListStorage, NumpyStorage


def test_config_defaults_set() -> None:
    # regression test for available defaults
    assert config.defaults == [
        {
            "storage": "mudi.storage.NumpyStorage",
            "array": {"dtype": None},
        }
    ]
    assert config.get("storage") == "mudi.storage.NumpyStorage"
    assert config.get("array.dtype") is None


def test_config_set_scoped() -> None:
    with config.set({"array.dtype": "float16"}):
        assert config.get("array.dtype") == "float16"
    assert config.get("array.dtype") is None


@mock.patch.dict("os.environ", {"MUDI_STORAGE": "mudi.storage.ListStorage"})
def test_config_from_environment() -> None:
    config.refresh()
    assert config.get("storage") == "mudi.storage.ListStorage"
    assert get_storage_class() is ListStorage


def test_get_storage_class_default() -> None:
    assert get_storage_class() is NumpyStorage


def test_bad_storage_config() -> None:
    with config.set({"storage": "not.a.Storage"}):
        with pytest.raises(BadConfigError, match="Storage class 'not.a.Storage' not found"):
            get_storage_class()
        with pytest.raises(BadConfigError):
            mudi.zeros(3)


def test_register_storage() -> None:
    class ReversedListStorage(ListStorage):
        def to_list(self) -> list[Any]:
            return list(reversed(self._data))

    register_storage(ReversedListStorage)
    with config.set({"storage": fully_qualified_name(ReversedListStorage)}):
        assert get_storage_class() is ReversedListStorage
        a = mudi.array([1, 2, 3], 3)
    assert isinstance(a.storage, ReversedListStorage)
    assert a.to_list() == [3, 2, 1]


@pytest.mark.parametrize(("data", "expected"), [(None, None), ("int32", "int32")])
def test_parse_dtype(data: Any, expected: Any) -> None:
    assert parse_dtype(data) == expected


def test_get_storage_class_reload_config() -> None:
    assert get_storage_class() is NumpyStorage
    with mock.patch.dict("os.environ", {"MUDI_STORAGE": "mudi.storage.ListStorage"}):
        # the environment is only read again on reload
        assert get_storage_class() is NumpyStorage
        assert get_storage_class(reload_config=True) is ListStorage
