"""Pytest fixtures for calculagraph tests."""

import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from calculagraph import metrics  # noqa: E402


@pytest.fixture
def fake_clock(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Replace the timer's instant source with a fixed sequence of nanosecond readings."""

    def install(*readings: int) -> None:
        values: Iterator[int] = iter(readings)
        monkeypatch.setattr(metrics, "_now", lambda: next(values))

    return install


@pytest.fixture
def millis() -> Callable[[int], int]:
    """Convert milliseconds to nanoseconds."""
    return lambda ms: ms * 1_000_000
