"""Test progress: a three-state fold of actions over an abstract test state.

A scenario starts as ``Passing(initial_state)`` and each action produces a new
outcome:

  Passing   → no problems so far
  Flagging  → recoverable problems were recorded; later actions still run
  Failing   → a fatal problem was recorded; absorbing, nothing else runs

Messages accumulate in order and are never cleared by a later success. The
outcome only turns into a test failure at ``finalize``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import reduce
from typing import TYPE_CHECKING, Any

from uilight.errors import (
    DeferredFailure,
    DeveloperError,
    ElementNotReady,
    IncorrectScreen,
    ScenarioFailure,
    ScenarioWarning,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from uilight.engine.actions import Action

logger = logging.getLogger(__name__)

# ─── Outcome values ───

class _Progress:
    """Chaining helpers shared by the three outcome types."""

    def apply(self, action: Action) -> Outcome:
        return apply(self, action)

    def blindly(self, action: Action) -> Outcome:
        return blindly(self, action)

    def finish(self, handler: Callable[[Outcome], Any] | None = None) -> None:
        finalize(self, handler)


@dataclass(frozen=True)
class Passing(_Progress):
    state: Any


@dataclass(frozen=True)
class Flagging(_Progress):
    state: Any
    messages: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "messages", tuple(self.messages))
        if not self.messages:
            raise DeveloperError("Flagging needs at least one message")


@dataclass(frozen=True)
class Failing(_Progress):
    state: Any
    messages: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "messages", tuple(self.messages))
        if not self.messages:
            raise DeveloperError("Failing needs at least one message")


Outcome = Passing | Flagging | Failing

# ─── Applying actions ───

def _decorate(action: Action, label: str, message: str) -> str:
    return f"{action.label} {label}: {message}"


def _raw(error: Exception) -> str:
    return str(error) or type(error).__name__


def _failing(action: Action, state: Any, messages: list[str], message: str) -> Failing:
    logger.warning("%s failed: %s", action.describe(), message)
    messages.append(message)
    return Failing(state, messages)


def apply_action(outcome: Outcome, action: Action, check_screen: bool = True) -> Outcome:
    """Apply one action to an outcome, returning the next outcome."""
    match outcome:
        case Failing():
            return outcome
        case Flagging(state=state, messages=previous):
            messages = list(previous)
        case Passing(state=state):
            messages = []
        case _:
            raise DeveloperError(f"Not a progress outcome: {outcome!r}")

    logger.info("Applying %s", action.describe())

    # A wrong screen here is fatal: the task assumes it
    if check_screen and action.screen is not None:
        try:
            action.screen.becomes_active()
        except IncorrectScreen as e:
            return _failing(action, state, messages, _decorate(action, "failed screen check", e.message))
        except Exception as e:
            return _failing(action, state, messages, _raw(e))

    try:
        new_state = action.task(state)
    except ScenarioWarning as e:
        message = _decorate(action, "warning", e.message)
        logger.warning("%s flagged: %s", action.describe(), message)
        messages.append(message)
        return Flagging(e.state if e.has_state else state, messages)
    except IncorrectScreen as e:
        return _failing(action, state, messages, _decorate(action, "failed screen check", e.message))
    except ElementNotReady as e:
        return _failing(action, state, messages, _decorate(action, "element not ready", e.message))
    except Exception as e:
        return _failing(action, state, messages, _raw(e))

    if not messages:
        return Passing(new_state)
    return Flagging(new_state, messages)


def apply(outcome: Outcome, action: Action) -> Outcome:
    """Apply an action after making sure its screen is active."""
    return apply_action(outcome, action, check_screen=True)


def blindly(outcome: Outcome, action: Action) -> Outcome:
    """Apply an action without checking its screen first."""
    return apply_action(outcome, action, check_screen=False)


def run_actions(actions: Iterable[Action], initial_state: Any, *, check_screen: bool = True) -> Outcome:
    return reduce(
        lambda outcome, action: apply_action(outcome, action, check_screen),
        actions,
        Passing(initial_state),
    )

# ─── Finalization ───

@dataclass(frozen=True)
class Verdict:
    status: str  # pass | deferred | fail
    message: str = ""

    @property
    def passed(self) -> bool:
        return self.status == "pass"


def verdict(outcome: Outcome) -> Verdict:
    match outcome:
        case Passing():
            return Verdict("pass")
        case Flagging(messages=messages):
            return Verdict("deferred", "; ".join(messages))
        case Failing(messages=messages):
            return Verdict("fail", "; ".join(messages))
    raise DeveloperError(f"Not a progress outcome: {outcome!r}")


def finalize(outcome: Outcome, handler: Callable[[Outcome], Any] | None = None) -> None:
    """Report the final outcome to the host test runner.

    handler (e.g. a screenshot-on-failure hook) sees the outcome first.
    Passing returns normally; Flagging and Failing raise AssertionError
    subclasses so that pytest records the test as failed.
    """
    if handler is not None:
        handler(outcome)

    result = verdict(outcome)
    if result.status == "deferred":
        raise DeferredFailure(f"Deferred Failure: {result.message}")
    if result.status == "fail":
        raise ScenarioFailure(f"Failure: {result.message}")
