"""Reading governor settings from a YAML file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from loopgov.config.models import GovernorSettings
from loopgov.governor.errors import ConfigError

DEFAULT_FILENAME = "loopgov.yaml"
SECTION = "governor"


class ConfigLoadError(ConfigError):
    """Raised when a settings file is unreadable or has an unexpected shape."""


def _parse(target: Path) -> Any:
    try:
        return yaml.safe_load(target.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        where = f"{target}:{mark.line + 1}:{mark.column + 1}" if mark is not None else str(target)
        raise ConfigLoadError(f"Invalid YAML at {where}") from exc


def read_settings_file(path: str | Path) -> dict[str, Any]:
    """Return the governor settings found in ``path``.

    The file is either a flat mapping of settings or holds them under a
    ``governor:`` key, in which case no other top-level key is allowed. A
    missing or empty file yields ``{}``. Unknown setting names are rejected
    so that typos do not silently fall back to defaults.
    """
    target = Path(path)
    if not target.exists():
        return {}
    data = _parse(target)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config root must be mapping: {target}")

    if SECTION in data:
        extra = sorted(str(key) for key in data if key != SECTION)
        if extra:
            raise ConfigLoadError(f"Unexpected top-level keys next to '{SECTION}' in {target}: {', '.join(extra)}")
        data = data[SECTION]
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigLoadError(f"'{SECTION}' section must be mapping: {target}")

    unknown = sorted(str(key) for key in data if key not in GovernorSettings.model_fields)
    if unknown:
        raise ConfigLoadError(f"Unknown governor settings in {target}: {', '.join(unknown)}")
    return data
