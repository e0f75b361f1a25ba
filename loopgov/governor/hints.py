"""Extraction of server-provided backoff instructions from error messages.

The remote API reports throttling as an aborted request whose message ends
with something like ``action throttled, backoff for 44m0s``. The format is
not documented upstream, so parsing is deliberately lenient: anything that
does not carry the ``backoff for`` marker is treated as "no hint".
"""

from __future__ import annotations

import re

_BACKOFF_PATTERN = re.compile(r"backoff for (?:(\d+)h)?(?:(\d+)m)?(?:(\d+)s)?")


def parse_backoff_hint(message: str | None) -> float | None:
    """Return the requested backoff in seconds, or ``None`` when absent."""
    if not message:
        return None
    match = _BACKOFF_PATTERN.search(message)
    if match is None:
        return None
    hours = int(match.group(1) or 0)
    minutes = int(match.group(2) or 0)
    seconds = int(match.group(3) or 0)
    return float(seconds + minutes * 60 + hours * 60 * 60)
