"""Iteration pacing and failure backoff for periodic work."""

from loopgov.governor.budget import IterationBudget
from loopgov.governor.classify import ExceptionClassifier, guard
from loopgov.governor.errors import ConfigError
from loopgov.governor.hints import parse_backoff_hint
from loopgov.governor.looper import LoopGovernor
from loopgov.governor.outcome import Outcome, OutcomeKind
from loopgov.governor.pacing import PacingState

__all__ = [
    "ConfigError",
    "ExceptionClassifier",
    "IterationBudget",
    "LoopGovernor",
    "Outcome",
    "OutcomeKind",
    "PacingState",
    "guard",
    "parse_backoff_hint",
]
