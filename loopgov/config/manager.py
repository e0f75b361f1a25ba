"""Layered settings resolution: defaults, YAML file, environment, overrides."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from loopgov.config.loader import DEFAULT_FILENAME, read_settings_file
from loopgov.config.models import GovernorSettings
from loopgov.governor.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "LOOPGOV_"
CONFIG_PATH_ENV = f"{ENV_PREFIX}CONFIG"


def resolve_config_path(explicit_path: str | Path | None = None) -> Path:
    """Pick the settings file: explicit path, then ``LOOPGOV_CONFIG``, then ./loopgov.yaml."""
    if explicit_path is not None and str(explicit_path).strip():
        return Path(str(explicit_path).strip())
    env_path = os.environ.get(CONFIG_PATH_ENV, "").strip()
    if env_path:
        return Path(env_path)
    return Path.cwd() / DEFAULT_FILENAME


def _env_settings(environ: Mapping[str, str]) -> dict[str, str]:
    # Raw strings; pydantic coerces them to the field types.
    values: dict[str, str] = {}
    for name in GovernorSettings.model_fields:
        raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None and raw.strip():
            values[name] = raw.strip()
    return values


def load_settings(
    config_path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> GovernorSettings:
    """Load settings; later layers win: YAML file < ``LOOPGOV_*`` env < ``overrides``."""
    target = resolve_config_path(config_path)
    values: dict[str, Any] = read_settings_file(target)
    env_values = _env_settings(os.environ)
    values.update(env_values)
    values.update(overrides or {})
    try:
        settings = GovernorSettings.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid governor settings: {exc}") from exc
    logger.debug(
        "Loaded governor settings from %s (env keys: %s) min=%s max=%s factor=%s",
        target,
        sorted(env_values),
        settings.min_interval_sec,
        settings.max_interval_sec,
        settings.backoff_factor,
    )
    return settings
