"""Adapters that turn exception-raising callables into outcome-reporting work."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from loopgov.governor.hints import parse_backoff_hint
from loopgov.governor.outcome import Outcome

logger = logging.getLogger(__name__)

ExceptionTypes = tuple[type[BaseException], ...]


class ExceptionClassifier:
    """Maps exceptions raised by host code to governor outcomes.

    Args:
        throttle_errors: Exception types raised by the remote API client. Their
            message is searched for a ``backoff for ...`` instruction; without
            one the failure is treated as indeterminate and paced at the
            ceiling.
        fatal_errors: Exception types that must abort the run.

    Any other ``Exception`` is a generic recoverable failure. Exceptions that
    do not derive from ``Exception`` (``KeyboardInterrupt``, ``SystemExit``)
    are never caught.
    """

    def __init__(
        self,
        throttle_errors: ExceptionTypes = (),
        fatal_errors: ExceptionTypes = (),
    ) -> None:
        self._throttle_errors = tuple(throttle_errors)
        self._fatal_errors = tuple(fatal_errors)

    def classify(self, exc: BaseException) -> Outcome:
        """Return the outcome for an exception raised by a unit of work."""
        if self._fatal_errors and isinstance(exc, self._fatal_errors):
            return Outcome.fatal(exc)
        if self._throttle_errors and isinstance(exc, self._throttle_errors):
            hint = parse_backoff_hint(str(exc))
            if hint is None:
                return Outcome.no_hint(exc)
            return Outcome.with_hint(hint, exc)
        if isinstance(exc, Exception):
            return Outcome.generic(exc)
        return Outcome.fatal(exc)

    def wrap(self, fn: Callable[[], Any]) -> Callable[[], Outcome]:
        """Wrap ``fn`` so that it reports an ``Outcome`` instead of raising."""

        def unit_of_work() -> Outcome:
            try:
                fn()
            except Exception as exc:
                outcome = self.classify(exc)
                logger.debug("Unit of work raised %s, classified as %s", type(exc).__name__, outcome.kind.value)
                return outcome
            return Outcome.success()

        return unit_of_work


def guard(
    fn: Callable[[], Any],
    *,
    throttle_errors: ExceptionTypes = (),
    fatal_errors: ExceptionTypes = (),
) -> Callable[[], Outcome]:
    """Shortcut for ``ExceptionClassifier(...).wrap(fn)``."""
    return ExceptionClassifier(throttle_errors=throttle_errors, fatal_errors=fatal_errors).wrap(fn)
