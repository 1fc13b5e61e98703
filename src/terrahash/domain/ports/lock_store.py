"""Port for persisting the approved baseline."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from terrahash.domain.model import DependencySet


@runtime_checkable
class LockStore(Protocol):
    """Read and write the lock file holding the baseline set."""

    def exists(self, path: Path) -> bool: ...

    def read(self, path: Path) -> DependencySet: ...

    def write(self, path: Path, entries: DependencySet) -> None: ...


__all__ = ["LockStore"]
