"""Element readiness criteria checked before an action touches an element."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from uilight.engine.waiting import DEFAULT_INTERVAL, wait_for_result
from uilight.errors import ElementNotReady, VerificationFailed

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class Readiness:
    exists: bool = True
    in_main_window: bool = False
    hittable: bool = True

    def __str__(self):
        names = [
            name
            for name, wanted in (("Exists", self.exists), ("InMainWindow", self.in_main_window), ("Hittable", self.hittable))
            if wanted
        ]
        return f"[{','.join(names)}]"


DEFAULT_READINESS = Readiness()


def check_ready(element: Any, criteria: Readiness = DEFAULT_READINESS, description: str = "Failed readiness check") -> Any:
    """Return element if it meets criteria, else raise ElementNotReady.

    element is duck-typed: ``exists``, ``in_main_window`` and ``is_hittable``
    are read only when the matching criterion is requested.
    """
    if criteria.exists and not element.exists:
        raise ElementNotReady(f"{description}; element not ready: element does not exist")
    if criteria.in_main_window and not element.in_main_window:
        raise ElementNotReady(f"{description}; element not ready: element is not within the bounds of the main window")
    if criteria.hittable and not element.is_hittable:
        raise ElementNotReady(f"{description}; element not ready: element is not hittable")
    return element


def when_ready(
    element: Any,
    criteria: Readiness = DEFAULT_READINESS,
    timeout: float = 3.0,
    *,
    interval: float = DEFAULT_INTERVAL,
    clock: Callable[[], float] | None = None,
    sleep: Callable[[float], None] | None = None,
) -> Any:
    """Wait up to timeout for element to meet criteria.

    On timeout the last readiness complaint is raised rather than the generic
    polling failure.
    """
    last_message: str | None = None

    def probe() -> bool:
        nonlocal last_message
        try:
            check_ready(element, criteria)
        except ElementNotReady as e:
            last_message = e.message
            return False
        return True

    timing: dict[str, Any] = {"interval": interval}
    if clock is not None:
        timing["clock"] = clock
    if sleep is not None:
        timing["sleep"] = sleep

    try:
        wait_for_result(timeout, True, f"[{element} whenReady {criteria}]", probe, **timing)
    except VerificationFailed as e:
        raise ElementNotReady(last_message or e.message) from e
    return element
