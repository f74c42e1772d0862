"""Smoke tests: the scripts in examples/ run to completion."""

from __future__ import annotations

import runpy
from pathlib import Path

import pytest

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


@pytest.mark.parametrize("script", ["quickstart.py", "locale_fallback.py"])
def test_example_runs(script: str, capsys: pytest.CaptureFixture[str]) -> None:
    """Each example prints its success banner."""
    runpy.run_path(str(EXAMPLES_DIR / script), run_name="__main__")

    assert "[SUCCESS] All examples completed successfully!" in capsys.readouterr().out


def test_quickstart_outputs(capsys: pytest.CaptureFixture[str]) -> None:
    """Documented outputs in the quickstart match what it prints."""
    runpy.run_path(str(EXAMPLES_DIR / "quickstart.py"), run_name="__main__")
    out = capsys.readouterr().out

    for expected in (
        "Hello, Alice!",
        "Bob Smith (Age: 30)",
        "You have 5 emails.",
        "Acme makes everything. Ask ACME!",
        "[en] nav.missing",
        "$1,234.50",
        "10/27/25",
    ):
        assert expected in out
