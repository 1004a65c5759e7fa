"""
The registry module is responsible for managing storage implementations and
collecting them from entrypoints. The implementation used is determined by the config.
"""

from __future__ import annotations

import logging
from importlib.metadata import entry_points as get_entry_points
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from mudi.core.config import BadConfigError, config

if TYPE_CHECKING:
    from importlib.metadata import EntryPoint

    from mudi.abc.storage import Storage

__all__ = [
    "Registry",
    "fully_qualified_name",
    "get_storage_class",
    "register_storage",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Registry(dict[str, type[T]], Generic[T]):
    def __init__(self) -> None:
        super().__init__()
        self.lazy_load_list: list[EntryPoint] = []

    def lazy_load(self) -> None:
        for e in self.lazy_load_list:
            logger.debug("Loading storage '%s' from entrypoint %s", e.name, e.value)
            self.register(e.load())

        self.lazy_load_list.clear()

    def register(self, cls: type[T], qualname: str | None = None) -> None:
        if qualname is None:
            qualname = fully_qualified_name(cls)
        self[qualname] = cls


__storage_registry: Registry[Storage] = Registry()


def _collect_entrypoints() -> list[Registry[Any]]:
    """
    Collects storages from entrypoints.
    Entry points can either be single items or groups of items.
    Allowed syntax for entry_points.txt is e.g.

        [mudi.storage]
        shared = package.module:SharedMemoryStorage

    or

        [mudi]
        storage = package.module:SharedMemoryStorage
    """
    entry_points = get_entry_points()

    __storage_registry.lazy_load_list.extend(entry_points.select(group="mudi.storage"))
    __storage_registry.lazy_load_list.extend(
        entry_points.select(group="mudi", name="storage")
    )
    return [__storage_registry]


def _reload_config() -> None:
    config.refresh()


def fully_qualified_name(cls: type) -> str:
    module = cls.__module__
    return module + "." + cls.__qualname__


def register_storage(cls: type[Storage], qualname: str | None = None) -> None:
    __storage_registry.register(cls, qualname)


def get_storage_class(reload_config: bool = False) -> type[Storage]:
    """
    Get the storage class selected by the ``storage`` config value.

    Raises
    ------
    BadConfigError
        If no storage is registered under the configured name.
    """
    if reload_config:
        _reload_config()
    __storage_registry.lazy_load()

    path = config.get("storage")
    storage_class = __storage_registry.get(path)
    if storage_class:
        return storage_class
    raise BadConfigError(
        f"Storage class '{path}' not found in registered storages: {list(__storage_registry)}."
    )


_collect_entrypoints()
