import logging

import pytest

import mudi


@pytest.fixture
def mudi_logger():  # type: ignore[no-untyped-def]
    logger = logging.getLogger("mudi")
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers = handlers


def test_exports() -> None:
    for name in mudi.__all__:
        assert hasattr(mudi, name)


def test_version() -> None:
    assert isinstance(mudi.__version__, str)
    assert not mudi.__version__.startswith("0.0.0")


def test_print_debug_info(capsys: pytest.CaptureFixture[str]) -> None:
    mudi.print_debug_info()
    out = capsys.readouterr().out
    assert f"mudi: {mudi.__version__}" in out
    assert "numpy: " in out


def test_set_log_level(mudi_logger: logging.Logger) -> None:
    mudi.set_log_level("DEBUG")
    assert mudi_logger.level == logging.DEBUG


def test_set_format(mudi_logger: logging.Logger) -> None:
    mudi.set_format("%(levelname)s %(message)s")
    mudi.set_format("%(message)s")
    assert len(mudi_logger.handlers) == 1
    formatter = mudi_logger.handlers[0].formatter
    assert formatter is not None
    assert formatter._fmt == "%(message)s"
