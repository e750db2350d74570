"""
Configuration module for the election portal.

settings.py is the single entry point for configuration values.
"""

from election_portal.infrastructure.config.sentry import init_sentry
from election_portal.infrastructure.config.settings import (
    ENV_FILE_PATH,
    Settings,
    find_env_file,
    get_settings,
    reload_settings,
)


__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "reload_settings",
    "find_env_file",
    "ENV_FILE_PATH",
    # Sentry
    "init_sentry",
]
