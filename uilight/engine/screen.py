"""Screens: the UI context an action expects to be in before it runs.

How long a screen may take to appear is a policy chosen at construction:

- ``Immediate()``: always ready, no waiting (like a shake gesture target)
- ``Delayed(timeout)``: may need a moment of animation to appear
- ``WithTransient(soft, hard, transient)``: appearance is tied to a transient
  indicator such as a spinner; the soft timeout restarts whenever the
  transient is visible, the hard timeout never does
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from uilight.engine.actions import Action, stateless
from uilight.engine.waiting import DEFAULT_INTERVAL, wait_for_result
from uilight.errors import IncorrectScreen, VerificationFailed

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

# ─── Become-active policies ───

@dataclass(frozen=True)
class Immediate:
    pass


@dataclass(frozen=True)
class Delayed:
    timeout: float = 3.0


@dataclass(frozen=True)
class WithTransient:
    soft_timeout: float
    hard_timeout: float
    transient: Callable[[], bool]


Policy = Immediate | Delayed | WithTransient


def _always() -> bool:
    return True


# ─── Screen ───

class Screen:
    def __init__(
        self,
        label: str,
        probe: Callable[[], bool] = _always,
        policy: Policy | None = None,
        *,
        interval: float = DEFAULT_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.label = label
        self.probe = probe
        self.policy = policy or Immediate()
        self.interval = interval
        self.clock = clock
        self.sleep = sleep

    def __str__(self):
        return self.label

    def __repr__(self):
        return f"Screen({self.label!r}, policy={self.policy!r})"

    @property
    def is_active(self) -> bool:
        return bool(self.probe())

    def becomes_active(self, timeout: float | None = None) -> None:
        """Block until the screen is active or raise IncorrectScreen.

        timeout replaces the policy's timeout (the hard one for
        WithTransient) for this call only.
        """
        match self.policy:
            case Immediate():
                return
            case Delayed(timeout=default):
                seconds = default if timeout is None else timeout
                try:
                    wait_for_result(seconds, True, f"[{self} isActive]", lambda: self.is_active, **self._timing())
                except VerificationFailed as e:
                    raise IncorrectScreen(e.message) from e
            case WithTransient(soft_timeout=soft, hard_timeout=hard, transient=transient):
                hard = hard if timeout is None else timeout
                kind = self._poll_with_transient(soft, hard, transient, desired=True)
                if kind:
                    raise IncorrectScreen(f"[{self} becomesActive] failed {kind} timeout")

    # ─── Action factories ───

    def action(self, label: str, task: Callable[[Any], Any]) -> Action:
        """Action tied to this screen that reads and/or writes the test state."""
        return Action(label=label, task=task, screen=self)

    def stateless_action(self, label: str, fn: Callable[[], Any]) -> Action:
        """Action tied to this screen that leaves the test state alone."""
        return Action(label=label, task=stateless(fn), screen=self)

    def verify_is_active(self) -> Action:
        return self.stateless_action("verify_is_active", lambda: None)

    def verify_not_active(self) -> Action:
        """Action that passes once this screen has gone away.

        It is tied to a null screen so applying it never waits for self.
        """
        def task(state: Any) -> Any:
            match self.policy:
                case Immediate():
                    still_active = self.is_active
                case Delayed(timeout=seconds):
                    try:
                        wait_for_result(seconds, False, f"[{self} isActive]", lambda: self.is_active, **self._timing())
                        still_active = False
                    except VerificationFailed:
                        still_active = True
                case WithTransient(soft_timeout=soft, hard_timeout=hard, transient=transient):
                    still_active = self._poll_with_transient(soft, hard, transient, desired=False) is not None
            if still_active:
                raise IncorrectScreen(f"{self} failed to become inactive")
            return state

        return Action(label="verify_not_active", task=task, screen=Screen("null screen"))

    # ─── Private ───

    def _timing(self) -> dict[str, Any]:
        return {"interval": self.interval, "clock": self.clock, "sleep": self.sleep}

    def _poll_with_transient(
        self,
        soft: float,
        hard: float,
        transient: Callable[[], bool],
        *,
        desired: bool,
    ) -> str | None:
        """Wait for is_active == desired; return None on success or the timeout kind."""
        hard_start = soft_start = self.clock()
        while True:
            if transient():
                soft_start = self.clock()
            elif self.is_active == desired:
                return None
            now = self.clock()
            if now - hard_start >= hard:
                logger.debug("%s: hard timeout after %.1fs", self, hard)
                return "hard"
            if now - soft_start >= soft:
                logger.debug("%s: soft timeout after %.1fs", self, soft)
                return "soft"
            self.sleep(self.interval)
