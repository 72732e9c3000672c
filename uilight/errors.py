"""Exception taxonomy shared by the dump parser and the progress evaluator."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from uilight.dump.validator import DumpIssue


class UILightError(Exception):
    """Base class for every error raised by uilight."""


# ─── Dump parsing ───

class DumpParseError(UILightError):
    """One or more dump lines do not match the element grammar.

    Carries every offending line, not only the first.
    """

    def __init__(self, issues: list[DumpIssue]):
        self.issues = list(issues)
        count = len(self.issues)
        super().__init__(f"{count} malformed dump line(s)" if count != 1 else str(self.issues[0]))


class StructuralError(UILightError):
    """Depth inconsistencies found while assembling the tree in strict mode."""

    def __init__(self, issues: list[DumpIssue]):
        self.issues = list(issues)
        super().__init__("; ".join(str(i) for i in self.issues))


# ─── Action categories ───

class ActionError(UILightError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


_NO_STATE = object()


class ScenarioWarning(ActionError):
    """Recoverable problem: the scenario is flagged but keeps running.

    A task may hand back the state it had reached before the problem (None
    included); without one the previous state carries on.
    """

    def __init__(self, message: str, state: Any = _NO_STATE):
        super().__init__(message)
        self.state = state

    @property
    def has_state(self) -> bool:
        return self.state is not _NO_STATE


class IncorrectScreen(ActionError):
    """The expected screen did not become active."""


class ElementNotReady(ActionError):
    """An element failed its readiness criteria."""


class VerificationFailed(ActionError):
    """A polled value never reached the desired result."""


class DeveloperError(UILightError):
    """The library was used incorrectly (e.g. an empty composite action)."""


# ─── Finalization (host harness) ───

class ScenarioFailure(UILightError, AssertionError):
    """A scenario ended in the Failing state."""


class DeferredFailure(UILightError, AssertionError):
    """A scenario ran to completion but was flagged along the way."""
