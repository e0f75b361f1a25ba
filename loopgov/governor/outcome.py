"""Outcome of one unit-of-work invocation, as reported to the governor."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class OutcomeKind(str, Enum):
    """Classification tag for a cycle outcome."""

    SUCCESS = "success"
    RECOVERABLE_WITH_HINT = "recoverable_with_hint"
    RECOVERABLE_NO_HINT = "recoverable_no_hint"
    RECOVERABLE_GENERIC = "recoverable_generic"
    FATAL = "fatal"


@dataclass(frozen=True, slots=True)
class Outcome:
    """Tagged result of a unit of work.

    ``hint_sec`` is only set for ``RECOVERABLE_WITH_HINT``. ``cause`` is
    required for ``FATAL`` and optional for the recoverable kinds, where it
    is only used for diagnostics.
    """

    kind: OutcomeKind
    hint_sec: float | None = None
    cause: BaseException | None = None

    def __post_init__(self) -> None:
        if self.kind is OutcomeKind.RECOVERABLE_WITH_HINT:
            if self.hint_sec is None or not math.isfinite(self.hint_sec) or self.hint_sec < 0:
                raise ValueError(f"hint_sec must be a finite non-negative number, got {self.hint_sec!r}")
        elif self.hint_sec is not None:
            raise ValueError(f"hint_sec is not allowed for {self.kind.value} outcomes")
        if self.kind is OutcomeKind.FATAL and not isinstance(self.cause, BaseException):
            raise ValueError("fatal outcomes require an exception cause")
        if self.kind is OutcomeKind.SUCCESS and self.cause is not None:
            raise ValueError("success outcomes cannot carry a cause")

    @classmethod
    def success(cls) -> Outcome:
        return cls(OutcomeKind.SUCCESS)

    @classmethod
    def with_hint(cls, hint_sec: float, cause: BaseException | None = None) -> Outcome:
        return cls(OutcomeKind.RECOVERABLE_WITH_HINT, hint_sec=float(hint_sec), cause=cause)

    @classmethod
    def no_hint(cls, cause: BaseException | None = None) -> Outcome:
        return cls(OutcomeKind.RECOVERABLE_NO_HINT, cause=cause)

    @classmethod
    def generic(cls, cause: BaseException | None = None) -> Outcome:
        return cls(OutcomeKind.RECOVERABLE_GENERIC, cause=cause)

    @classmethod
    def fatal(cls, cause: BaseException) -> Outcome:
        return cls(OutcomeKind.FATAL, cause=cause)

    @property
    def is_recoverable(self) -> bool:
        return self.kind in {
            OutcomeKind.RECOVERABLE_WITH_HINT,
            OutcomeKind.RECOVERABLE_NO_HINT,
            OutcomeKind.RECOVERABLE_GENERIC,
        }
