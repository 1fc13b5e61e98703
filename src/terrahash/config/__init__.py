"""Application configuration helpers."""

from __future__ import annotations

from .env import LOG_LEVEL_ENV_VAR, get_log_level, optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging
from .project import (
    LOCK_FILENAME,
    MANIFEST_RELPATH,
    SOURCE_ENV_VAR,
    TERRAFORM_DIRNAME,
    ProjectConfig,
    get_project_config,
    normalize_source,
)

__all__ = [
    "LOCK_FILENAME",
    "LOG_LEVEL_ENV_VAR",
    "MANIFEST_RELPATH",
    "SOURCE_ENV_VAR",
    "TERRAFORM_DIRNAME",
    "ConfigurationError",
    "ProjectConfig",
    "configure_logging",
    "get_log_level",
    "get_project_config",
    "normalize_source",
    "optional_env_var",
]
