"""Port for reading the modules the host tool has materialised."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from terrahash.config import ProjectConfig
    from terrahash.domain.model import DependencySet


@runtime_checkable
class ManifestReader(Protocol):
    """Produce the current set of fetched modules, fingerprinted."""

    def read_current_set(self, config: ProjectConfig) -> DependencySet: ...


__all__ = ["ManifestReader"]
