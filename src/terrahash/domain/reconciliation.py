"""Classification of the current module set against the locked baseline."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from .model import DependencySet

if TYPE_CHECKING:
    from .model import DependencyEntry

log = getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class Classification:
    """Outcome of reconciling ``current`` against ``baseline``.

    ``added``, ``updated`` and ``unchanged`` partition the current set.
    ``missing`` holds baseline entries whose key is absent from the current set;
    those are dropped from ``proposed`` but never fail a check.
    """

    added: DependencySet = field(default_factory=DependencySet)
    updated: DependencySet = field(default_factory=DependencySet)
    unchanged: DependencySet = field(default_factory=DependencySet)
    missing: DependencySet = field(default_factory=DependencySet)
    proposed: DependencySet = field(default_factory=DependencySet)

    @property
    def has_changes(self) -> bool:
        return bool(self.added) or bool(self.updated)

    @property
    def not_found(self) -> DependencySet:
        """Current entries that have no counterpart in the lock file."""

        return self.added


def classify(current: DependencySet, baseline: DependencySet) -> Classification:
    """Partition ``current`` into added/updated/unchanged relative to ``baseline``."""

    added: list[DependencyEntry] = []
    updated: list[DependencyEntry] = []
    unchanged: list[DependencyEntry] = []

    for key, entry in current.items():
        locked = baseline.get(key)
        if locked is None:
            log.debug("module %s is not in the lock file", key)
            added.append(entry)
        elif entry.matches(locked):
            log.debug("no change to module %s", key)
            unchanged.append(entry)
        else:
            log.debug(
                "module %s differs from the lock file: version %r -> %r, hash %s -> %s",
                key,
                locked.version,
                entry.version,
                locked.digest,
                entry.digest,
            )
            updated.append(entry)

    missing = [entry for key, entry in baseline.items() if key not in current]
    for entry in missing:
        log.debug("module %s is locked but no longer used by the configuration", entry.key)

    return Classification(
        added=DependencySet(added),
        updated=DependencySet(updated),
        unchanged=DependencySet(unchanged),
        missing=DependencySet(missing),
        proposed=current.copy(),
    )
