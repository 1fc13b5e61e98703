"""Project layout configuration.

A project is the Terraform configuration directory the tool operates on. All
paths the tool reads or writes are derived from its root, so the resolved
``ProjectConfig`` is passed explicitly to every reader and store instead of
living in module-level state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var

SOURCE_ENV_VAR: Final[str] = "TERRAHASH_SOURCE"
LOCK_FILENAME: Final[str] = ".terraform.module.hcl"
TERRAFORM_DIRNAME: Final[str] = ".terraform"
MANIFEST_RELPATH: Final[str] = ".terraform/modules/modules.json"


def normalize_source(path: str | os.PathLike[str]) -> str:
    """Return ``path`` as a string that always ends with a path separator."""

    value = os.fspath(path)
    if not value.endswith((os.sep, "/")):
        value += os.sep
    return value


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    root: Path
    lock_filename: str = LOCK_FILENAME
    terraform_dirname: str = TERRAFORM_DIRNAME
    manifest_relpath: str = MANIFEST_RELPATH

    @property
    def source(self) -> str:
        return normalize_source(self.root)

    @property
    def lock_path(self) -> Path:
        return self.root / self.lock_filename

    @property
    def terraform_path(self) -> Path:
        return self.root / self.terraform_dirname

    @property
    def manifest_path(self) -> Path:
        return self.root / self.manifest_relpath

    def resolve(self, relative: str) -> Path:
        """Resolve a path taken from the host record against the project root.

        Separators may be backslashes when the record was written on Windows.
        """

        return self.root / relative.replace("\\", "/")


def get_project_config(source: str | None = None) -> ProjectConfig:
    """Build the project configuration.

    Precedence: explicit ``source`` (``--source``), then ``TERRAHASH_SOURCE``,
    then the current working directory.
    """

    chosen = source or optional_env_var(SOURCE_ENV_VAR)
    root = Path(normalize_source(chosen)) if chosen else Path.cwd()
    return ProjectConfig(root=root)
