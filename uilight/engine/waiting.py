"""Bounded polling used by screens and readiness checks."""
from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from uilight.errors import VerificationFailed

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 0.1


def wait_for_result(
    seconds: float,
    desired: Any,
    what: str,
    get_result: Callable[[], Any],
    *,
    interval: float = DEFAULT_INTERVAL,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Poll get_result until it equals desired, for at most `seconds`.

    The result is always checked at least once.
    """
    deadline = clock() + seconds
    while True:
        actual = get_result()
        if actual == desired:
            return
        if clock() >= deadline:
            break
        sleep(interval)

    logger.debug("%s stayed %r for %.1fs", what, actual, seconds)
    raise VerificationFailed(f"{what} failed to become {desired!r} after {seconds} seconds (was {actual!r})")
