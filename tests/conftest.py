"""Test configuration for scriptconsole."""

from __future__ import annotations

import pathlib
import sys

import pytest

# Ensure src directory is in path
PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from scriptconsole.console import ScriptConsole  # noqa: E402
from scriptconsole.sinks import MemorySink  # noqa: E402


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def console(sink: MemorySink, clock: FakeClock) -> ScriptConsole:
    return ScriptConsole(sink, clock=clock)
