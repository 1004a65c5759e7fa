import importlib.util
import warnings

if importlib.util.find_spec("hypothesis") is None:
    warnings.warn("hypothesis not installed, mudi.testing.strategies is unavailable", stacklevel=2)

__all__: list[str] = []
