import logging
from typing import Literal

from mudi._version import version as __version__
from mudi.core.array import Array, FlatView
from mudi.core.config import config
from mudi.core.dimensions import (
    Composite,
    FixedExtent,
    SignedRange,
    ZeroBasedRange,
    parse_dimension,
)
from mudi.creation import array, full, ones, zeros
from mudi.errors import (
    CoordinateShapeError,
    IndexOutOfBoundsError,
    InvalidDimensionError,
    NegativeIndexError,
    ShapeMismatchError,
)
from mudi.storage import ListStorage, NumpyStorage


def print_debug_info() -> None:
    """
    Print version info for use in bug reports.
    """
    import platform
    from importlib.metadata import PackageNotFoundError, version

    def print_packages(packages: list[str]) -> None:
        not_installed = []
        for package in packages:
            try:
                print(f"{package}: {version(package)}")
            except PackageNotFoundError:
                not_installed.append(package)
        if not_installed:
            print("\n**Not Installed:**")
            for package in not_installed:
                print(package)

    required = [
        "numpy",
        "donfig",
    ]
    optional = [
        "typer",
        "hypothesis",
    ]

    print(f"platform: {platform.platform()}")
    print(f"python: {platform.python_version()}")
    print(f"mudi: {__version__}\n")
    print("**Required dependencies:**")
    print_packages(required)
    print("\n**Optional dependencies:**")
    print_packages(optional)


def set_log_level(
    level: Literal["NOTSET", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
) -> None:
    """Set the logging level for mudi.

    Parameters
    ----------
    level : str
        The logging level to set.
    """
    logging.getLogger("mudi").setLevel(level)


def set_format(log_format: str) -> None:
    """Set the format of mudi log records.

    Parameters
    ----------
    log_format : str
        A ``logging.Formatter`` format string.
    """
    logger = logging.getLogger("mudi")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=log_format))
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)


__all__ = [
    "Array",
    "Composite",
    "CoordinateShapeError",
    "FixedExtent",
    "FlatView",
    "IndexOutOfBoundsError",
    "InvalidDimensionError",
    "ListStorage",
    "NegativeIndexError",
    "NumpyStorage",
    "ShapeMismatchError",
    "SignedRange",
    "ZeroBasedRange",
    "__version__",
    "array",
    "config",
    "full",
    "ones",
    "parse_dimension",
    "print_debug_info",
    "set_format",
    "set_log_level",
    "zeros",
]
