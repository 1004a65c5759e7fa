"""
The config module is responsible for managing the configuration of mudi and is based on the Donfig python library.
For selecting a custom storage implementation, first register it in the registry and then select it in the config.

Example:
    A storage implemented in a class ``your.module.SharedMemoryStorage`` requires the value of ``storage``
    to be ``your.module.SharedMemoryStorage``. Donfig can be configured programmatically, by environment
    variables, or from YAML files in standard locations.

    ```python
    from your.module import SharedMemoryStorage
    from mudi.registry import register_storage
    from mudi.core.config import config

    register_storage(SharedMemoryStorage)
    config.set({"storage": "your.module.SharedMemoryStorage"})
    ```

    Instead of setting the value programmatically with ``config.set``, you can also set the value with an
    environment variable. The environment variable ``MUDI_STORAGE`` can be set to
    ``your.module.SharedMemoryStorage``. The double underscore ``__`` is used to indicate nested access,
    as in ``MUDI_ARRAY__DTYPE=float64``.

For more information, see the Donfig documentation at https://github.com/pytroll/donfig.
"""

from __future__ import annotations

from typing import Any

from donfig import Config as DConfig


class BadConfigError(ValueError):
    """Raised when the config selects something that is not available."""


class Config(DConfig):  # type: ignore[misc]
    """The Config will collect configuration from config files and environment variables

    Example environment variables:
    Grabs environment variables of the form "MUDI_FOO__BAR_BAZ=123" and
    turns these into config variables of the form ``{"foo": {"bar-baz": 123}}``
    It transforms the key and value in the following way:

    -  Lower-cases the key text
    -  Treats ``__`` (double-underscore) as nested access
    -  Calls ``ast.literal_eval`` on the value

    """

    def reset(self) -> None:
        self.clear()
        self.refresh()


# The default configuration for mudi
config = Config(
    "mudi",
    defaults=[
        {
            "storage": "mudi.storage.NumpyStorage",
            "array": {"dtype": None},
        }
    ],
)


def parse_dtype(data: Any) -> Any:
    """Return ``data``, or the configured default element type when it is None."""
    if data is None:
        return config.get("array.dtype", None)
    return data
