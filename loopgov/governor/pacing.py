"""Per-run mutable pacing state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class PacingState:
    """Target start-to-start interval and cycles completed within one run."""

    target_interval_sec: float
    completed_iterations: int = 0
