"""Environment variable loaders for configuration."""

from __future__ import annotations

import logging
import os

from .errors import ConfigurationError

LOG_LEVEL_ENV_VAR = "TERRAHASH_LOG_LEVEL"


def optional_env_var(name: str) -> str | None:
    """Return the environment variable, treating blank values as unset."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def get_log_level(*, default: int = logging.INFO) -> int:
    """Resolve the log level from ``TERRAHASH_LOG_LEVEL`` (e.g. ``DEBUG``)."""

    name = optional_env_var(LOG_LEVEL_ENV_VAR)
    if name is None:
        return default
    level = logging.getLevelNamesMapping().get(name.upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level in {LOG_LEVEL_ENV_VAR}: {name}")
    return level
