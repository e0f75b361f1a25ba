"""Iteration budget for a governed run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class IterationBudget:
    """Either unbounded or exactly ``limit`` cycles."""

    limit: int | None = None

    def __post_init__(self) -> None:
        if self.limit is None:
            return
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise ValueError("iteration limit must be an integer")
        if self.limit < 1:
            raise ValueError("iteration limit must be >= 1")

    @classmethod
    def forever(cls) -> IterationBudget:
        return cls(None)

    @classmethod
    def exactly(cls, count: int) -> IterationBudget:
        return cls(count)

    @classmethod
    def coerce(cls, value: Any) -> IterationBudget:
        """Normalize ``None``/``0`` (run forever), a positive int, or a budget."""
        if isinstance(value, IterationBudget):
            return value
        if value is None or (isinstance(value, int) and not isinstance(value, bool) and value == 0):
            return cls.forever()
        return cls.exactly(value)

    @property
    def is_finite(self) -> bool:
        return self.limit is not None

    def exhausted(self, completed: int) -> bool:
        """Return whether ``completed`` cycles use up this budget."""
        return self.limit is not None and completed >= self.limit
