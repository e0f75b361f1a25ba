"""Configuration for the loop governor."""

from loopgov.config.loader import ConfigLoadError, read_settings_file
from loopgov.config.manager import load_settings, resolve_config_path
from loopgov.config.models import GovernorSettings

__all__ = [
    "ConfigLoadError",
    "GovernorSettings",
    "load_settings",
    "read_settings_file",
    "resolve_config_path",
]
