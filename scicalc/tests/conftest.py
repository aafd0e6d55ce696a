"""Shared fixtures: a hand-driven clock, a recording display sink, an engine."""

import pytest

from scicalc.config import Settings
from scicalc.engine import CalculatorEngine
from scicalc.keymap import press
from scicalc.timers import DeferredQueue


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def updates():
    """List that the engine's sink appends every DisplayUpdate to."""
    return []


@pytest.fixture
def engine(clock, updates):
    """A powered-on engine with a fake clock and a recording sink."""
    eng = CalculatorEngine(
        sink=updates.append,
        scheduler=DeferredQueue(clock=clock),
        settings=Settings(error_revert_s=2.0, message_revert_s=1.0),
    )
    eng.power_on()
    return eng


@pytest.fixture
def keys(engine):
    """Press buttons by name: keys("2", "+", "3", "=")."""

    def _press(*buttons: str) -> str:
        for b in buttons:
            press(engine, b)
        return engine.display_text

    return _press
