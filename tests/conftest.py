"""Shared fixtures for uilight tests."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from uilight.engine.actions import Action
from uilight.errors import ScenarioWarning

DUMPS_DIR = Path(__file__).parent / "dumps"


def dump_line(depth: int, type_name: str = "Other", handle: int = 1, tail: str = "") -> str:
    """One element line at the given depth, in debug-description layout."""
    markers = " →" if depth == 0 else "  " * (depth + 1)
    return f"{markers}{type_name} 0x{handle:x}: {tail}".rstrip()


class FakeClock:
    """Deterministic clock: sleeping advances time instead of blocking."""

    def __init__(self, start: float = 0.0):
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class TaskLog:
    """Builds actions whose tasks record that they ran.

    State is a tuple of labels; each successful task appends its own label.
    """

    def __init__(self):
        self.calls: list[str] = []

    def ok(self, label: str, screen=None) -> Action:
        def task(state: Any) -> Any:
            self.calls.append(label)
            return (*state, label)
        return Action(label=label, task=task, screen=screen)

    def raising(self, label: str, error: Exception, screen=None) -> Action:
        def task(state: Any) -> Any:
            self.calls.append(label)
            raise error
        return Action(label=label, task=task, screen=screen)

    def warn(self, label: str, message: str, *state: Any) -> Action:
        """Action flagging a warning; an explicit state replaces the current one."""
        return self.raising(label, ScenarioWarning(message, *state))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def tasks() -> TaskLog:
    return TaskLog()


@pytest.fixture
def read_dump_file():
    def _read(name: str) -> str:
        return (DUMPS_DIR / name).read_text(encoding="utf-8")
    return _read


@pytest.fixture(name="dump_line")
def dump_line_fixture():
    return dump_line
