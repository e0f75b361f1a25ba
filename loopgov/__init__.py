"""loopgov — pace a periodic, potentially failing unit of work."""

from loopgov.config import GovernorSettings, load_settings
from loopgov.governor import (
    ConfigError,
    ExceptionClassifier,
    IterationBudget,
    LoopGovernor,
    Outcome,
    OutcomeKind,
    guard,
    parse_backoff_hint,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ExceptionClassifier",
    "GovernorSettings",
    "IterationBudget",
    "LoopGovernor",
    "Outcome",
    "OutcomeKind",
    "guard",
    "load_settings",
    "parse_backoff_hint",
]
