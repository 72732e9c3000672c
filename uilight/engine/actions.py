"""Actions: a labelled state transformation, optionally tied to a screen."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from uilight.errors import DeveloperError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from uilight.engine.screen import Screen


@dataclass(frozen=True)
class Action:
    label: str
    task: Callable[[Any], Any]
    screen: Screen | None = None

    def describe(self) -> str:
        if self.screen is None:
            return f"<screenless> {self.label}"
        return f"{self.screen.label}.{self.label}"

    def __str__(self):
        return self.describe()


def stateless(fn: Callable[[], Any]) -> Callable[[Any], Any]:
    """Wrap a task that neither reads nor writes the test state."""
    def task(state: Any) -> Any:
        fn()
        return state
    return task


def compose(actions: Sequence[Action], label: str = "composite", screen: Screen | None = None) -> Action:
    """Chain actions into one, threading the state through each task in order.

    The composite is checked against ``screen`` (not the screens of its parts)
    when applied.
    """
    if not actions:
        raise DeveloperError("Trying to make a composite action from none")
    if len(actions) == 1:
        return actions[0]

    tasks = [a.task for a in actions]

    def task(state: Any) -> Any:
        for t in tasks:
            state = t(state)
        return state

    return Action(label=label, task=task, screen=screen)
