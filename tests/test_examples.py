from __future__ import annotations

import runpy
from pathlib import Path

import pytest

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


def test_iterations(capsys: pytest.CaptureFixture[str]) -> None:
    runpy.run_path(str(EXAMPLES_DIR / "iterations.py"), run_name="__main__")
    values = [float(v) for v in capsys.readouterr().out.split()]
    assert len(values) == 5 * 2 * 9
    assert values[:3] == [-4.0, -3.0, -2.0]
    assert values[-1] == 4.0 + 1.0 + 4.0


def test_literals(capsys: pytest.CaptureFixture[str]) -> None:
    runpy.run_path(str(EXAMPLES_DIR / "literals.py"), run_name="__main__")
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 12
    assert lines[0] == "(0, 0) 3.0"
    assert lines[-1] == "(3, 2) 5.0"
