"""LoopGovernor — pace a periodic, fallible unit of work.

The governor calls the unit of work once per cycle and paces cycles
start-to-start: it never runs faster than ``min_interval_sec``, backs off
geometrically (with jitter) on generic failures, jumps to
``max_interval_sec`` on failures that carry no usable timing, and honours
explicit backoff hints. A single success resets pacing to the minimum.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from loopgov.governor.budget import IterationBudget
from loopgov.governor.errors import ConfigError
from loopgov.governor.outcome import Outcome, OutcomeKind
from loopgov.governor.pacing import PacingState

if TYPE_CHECKING:
    from loopgov.config.models import GovernorSettings

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Sleeper = Callable[[float], Any]
Rander = Callable[[], float]
UnitOfWork = Callable[[], "Outcome | None"]

DEFAULT_MIN_INTERVAL_SEC = 10.0
DEFAULT_MAX_INTERVAL_SEC = 60.0 * 60.0
DEFAULT_BACKOFF_FACTOR = 1.5


class LoopGovernor:
    """Run a unit of work repeatedly under pacing and failure backoff.

    Args:
        min_interval_sec: Shortest start-to-start interval between cycles.
        max_interval_sec: Ceiling for locally computed intervals. Server hints
            are not bound by it.
        backoff_factor: Base multiplier applied on generic failures; jitter
            widens it into ``[backoff_factor, backoff_factor + 0.5)``.
        clock: Monotonic clock returning seconds.
        sleep: Blocking sleep taking seconds.
        rand: Uniform random source in ``[0, 1)``.
        debug_logging: Emit per-cycle diagnostics at INFO instead of DEBUG.

    A single instance may be shared, but ``run`` must not be invoked
    concurrently on it.
    """

    def __init__(
        self,
        min_interval_sec: float = DEFAULT_MIN_INTERVAL_SEC,
        max_interval_sec: float = DEFAULT_MAX_INTERVAL_SEC,
        backoff_factor: float = DEFAULT_BACKOFF_FACTOR,
        *,
        clock: Clock = time.monotonic,
        sleep: Sleeper = time.sleep,
        rand: Rander = random.random,
        debug_logging: bool = False,
    ) -> None:
        if not min_interval_sec > 0:
            raise ConfigError(f"min_interval_sec must be > 0, got {min_interval_sec!r}")
        if not max_interval_sec >= min_interval_sec:
            raise ConfigError(
                f"max_interval_sec ({max_interval_sec!r}) must be >= min_interval_sec ({min_interval_sec!r})"
            )
        if not backoff_factor > 1:
            raise ConfigError(f"backoff_factor must be > 1, got {backoff_factor!r}")
        self._min_interval_sec = float(min_interval_sec)
        self._max_interval_sec = float(max_interval_sec)
        self._backoff_factor = float(backoff_factor)
        self._clock = clock
        self._sleep = sleep
        self._rand = rand
        self._log_level = logging.INFO if debug_logging else logging.DEBUG

    @classmethod
    def from_settings(cls, settings: GovernorSettings, **collaborators: Any) -> LoopGovernor:
        """Build a governor from validated settings plus optional clock/sleep/rand."""
        return cls(
            min_interval_sec=settings.min_interval_sec,
            max_interval_sec=settings.max_interval_sec,
            backoff_factor=settings.backoff_factor,
            debug_logging=settings.debug_logging,
            **collaborators,
        )

    @property
    def min_interval_sec(self) -> float:
        return self._min_interval_sec

    @property
    def max_interval_sec(self) -> float:
        return self._max_interval_sec

    @property
    def backoff_factor(self) -> float:
        return self._backoff_factor

    def next_target(self, previous_target: float, outcome: Outcome) -> float:
        """Return the clamped target interval following ``outcome``.

        Fatal outcomes have no next target and raise ``ValueError``.
        """
        if outcome.kind is OutcomeKind.SUCCESS or outcome.kind is OutcomeKind.RECOVERABLE_WITH_HINT:
            target = self._min_interval_sec
        elif outcome.kind is OutcomeKind.RECOVERABLE_NO_HINT:
            target = self._max_interval_sec
        elif outcome.kind is OutcomeKind.RECOVERABLE_GENERIC:
            target = previous_target * (self._backoff_factor + self._rand() / 2)
        else:
            raise ValueError(f"no pacing target for {outcome.kind.value} outcome")
        return max(0.0, min(target, self._max_interval_sec))

    def run(self, budget: IterationBudget | int | None, unit_of_work: UnitOfWork) -> None:
        """Invoke ``unit_of_work`` once per cycle until ``budget`` is exhausted.

        ``unit_of_work`` returns an ``Outcome`` (``None`` counts as success).
        A fatal outcome re-raises its cause; exceptions raised directly by
        ``unit_of_work`` propagate unchanged. The clock is read at the start
        of every cycle and once more before each pacing sleep.
        """
        iteration_budget = IterationBudget.coerce(budget)
        state = PacingState(target_interval_sec=self._min_interval_sec)
        while True:
            cycle_start = self._clock()
            outcome = self._invoke(unit_of_work)

            if outcome.kind is OutcomeKind.FATAL:
                logger.log(self._log_level, "Unit of work failed fatally, stopping: %r", outcome.cause)
                assert outcome.cause is not None
                raise outcome.cause

            if outcome.kind is OutcomeKind.RECOVERABLE_WITH_HINT:
                assert outcome.hint_sec is not None
                # Not clamped to max_interval_sec: the server may need more
                # than our local ceiling to spread load across many clients.
                logger.log(self._log_level, "Sleeping for %s seconds at request of server", outcome.hint_sec)
                self._sleep(outcome.hint_sec)
            elif outcome.is_recoverable:
                logger.log(
                    self._log_level,
                    "Unit of work failed (%s), will retry: %r",
                    outcome.kind.value,
                    outcome.cause,
                )

            state.target_interval_sec = self.next_target(state.target_interval_sec, outcome)
            state.completed_iterations += 1
            if iteration_budget.exhausted(state.completed_iterations):
                logger.log(
                    self._log_level,
                    "Iteration budget exhausted after %d cycles (%s)",
                    state.completed_iterations,
                    outcome.kind.value,
                )
                return

            now = self._clock()
            delay = (cycle_start + state.target_interval_sec) - now
            logger.log(
                self._log_level,
                "Cycle %d done (%s) after %.3f seconds, next cycle in %.3f seconds",
                state.completed_iterations,
                outcome.kind.value,
                now - cycle_start,
                max(delay, 0.0),
            )
            if delay > 0:
                self._sleep(delay)

    @staticmethod
    def _invoke(unit_of_work: UnitOfWork) -> Outcome:
        result = unit_of_work()
        if result is None:
            return Outcome.success()
        if not isinstance(result, Outcome):
            raise TypeError(f"unit of work must return Outcome or None, got {type(result).__name__}")
        return result
