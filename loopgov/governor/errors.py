"""Error types raised by the loop governor."""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when governor settings are invalid."""
