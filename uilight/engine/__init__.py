from uilight.engine.actions import Action, compose, stateless
from uilight.engine.progress import (
    Failing,
    Flagging,
    Outcome,
    Passing,
    Verdict,
    apply,
    apply_action,
    blindly,
    finalize,
    run_actions,
    verdict,
)
from uilight.engine.readiness import Readiness, check_ready, when_ready
from uilight.engine.screen import Delayed, Immediate, Screen, WithTransient
from uilight.engine.waiting import wait_for_result

__all__ = [
    "Action",
    "Delayed",
    "Failing",
    "Flagging",
    "Immediate",
    "Outcome",
    "Passing",
    "Readiness",
    "Screen",
    "Verdict",
    "WithTransient",
    "apply",
    "apply_action",
    "blindly",
    "check_ready",
    "compose",
    "finalize",
    "run_actions",
    "stateless",
    "verdict",
    "wait_for_result",
    "when_ready",
]
