"""
Bounded polling primitive shared by every waiter in the harness.

The application under test re-renders asynchronously and exposes no
completion event, so each wait is a bounded retry with a fixed delay.
Timeouts are soft: :func:`poll_until` reports whether the predicate was
met and leaves it to the caller to decide if that is a failure.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PollingBudget:
    """Fixed delay between checks and the maximum number of delays."""

    interval_ms: int
    max_ticks: int

    def __post_init__(self) -> None:
        if self.interval_ms < 0:
            raise ValueError("interval_ms must not be negative")
        if self.max_ticks < 0:
            raise ValueError("max_ticks must not be negative")

    @property
    def timeout_ms(self) -> int:
        """Upper bound on time spent waiting, excluding predicate cost."""
        return self.interval_ms * self.max_ticks


def poll_until(
    predicate: Callable[[], object],
    *,
    interval_ms: int,
    max_ticks: int,
    wait: Callable[[float], None],
) -> bool:
    """
    Evaluate ``predicate`` until it is truthy or the tick budget is spent.

    The predicate is checked once up front, then after every wait.

    Args:
        predicate: Zero-argument callable; any truthy result ends the poll.
        interval_ms: Delay passed to ``wait`` between checks.
        max_ticks: Maximum number of waits.
        wait: Sleep function taking milliseconds, normally
            ``page.wait_for_timeout``.

    Returns:
        True if the predicate succeeded, False if the budget ran out.
    """
    if predicate():
        return True

    for tick in range(1, max_ticks + 1):
        wait(interval_ms)
        if predicate():
            logger.debug("Poll satisfied after %d tick(s) of %dms", tick, interval_ms)
            return True

    logger.debug("Poll budget of %d x %dms exhausted", max_ticks, interval_ms)
    return False


def poll_with_budget(
    predicate: Callable[[], object],
    budget: PollingBudget,
    wait: Callable[[float], None],
) -> bool:
    """Run :func:`poll_until` with the interval and ticks from ``budget``."""
    return poll_until(
        predicate,
        interval_ms=budget.interval_ms,
        max_ticks=budget.max_ticks,
        wait=wait,
    )
