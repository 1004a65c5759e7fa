from mudi.registry import register_storage
from mudi.storage._memory import ListStorage
from mudi.storage._numpy import NumpyStorage

register_storage(NumpyStorage, qualname="mudi.storage.NumpyStorage")
register_storage(ListStorage, qualname="mudi.storage.ListStorage")

__all__ = [
    "ListStorage",
    "NumpyStorage",
]
