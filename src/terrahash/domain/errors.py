"""Error kinds raised by the reconciliation workflows.

Every error names the path or module key involved so a failure can be
diagnosed from its message alone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from .reconciliation import Classification


class TerrahashError(RuntimeError):
    """Base class for expected, user-facing failures."""


class NotInitializedError(TerrahashError):
    """Terraform has not been initialised or its module record is absent."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class CorruptRecordError(TerrahashError):
    """A JSON document exists but does not have the expected shape."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class HashingError(TerrahashError):
    """The content digest of one module could not be computed."""

    def __init__(self, key: str, *, path: Path, reason: str) -> None:
        super().__init__(f"could not create hash for {key} ({path}): {reason}")
        self.key = key
        self.path = path


class LockFileNotFoundError(TerrahashError):
    """The lock file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"lock file not found: {path}")
        self.path = path


class AlreadyInitializedError(TerrahashError):
    """``init`` found an existing lock file."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"lock file already exists: {path}")
        self.path = path


class ReconciliationMismatchError(TerrahashError):
    """``check`` found modules that differ from, or are absent in, the lock file."""

    def __init__(self, classification: Classification) -> None:
        super().__init__(
            "non matching or missing modules found in the configuration "
            f"(non matching={len(classification.updated)}, "
            f"not in lock file={len(classification.not_found)})"
        )
        self.classification = classification


class NotApprovedError(TerrahashError):
    """The operator declined the proposed lock file changes."""

    def __init__(self) -> None:
        super().__init__("changes not accepted, lock file left unchanged")
