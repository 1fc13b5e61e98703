"""Lock file workflows: create, verify and upgrade the approved baseline."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .errors import AlreadyInitializedError, NotApprovedError, ReconciliationMismatchError
from .reconciliation import Classification, classify

if TYPE_CHECKING:
    from pathlib import Path

    from terrahash.config import ProjectConfig

    from .model import DependencySet
    from .ports import Approver, LockStore, ManifestReader

log = getLogger(__name__)


@dataclass(slots=True)
class InitLockResult:
    """Outcome of creating a lock file."""

    lock_path: Path
    written: DependencySet


@dataclass(slots=True)
class UpgradeLockResult:
    """Outcome of an upgrade; ``written`` is ``False`` for a no-op."""

    lock_path: Path
    classification: Classification
    written: bool


def init_lock(
    config: ProjectConfig,
    *,
    reader: ManifestReader,
    store: LockStore,
) -> InitLockResult:
    """Write the current module set as the first baseline."""

    lock_path = config.lock_path
    if store.exists(lock_path):
        raise AlreadyInitializedError(lock_path)

    current = reader.read_current_set(config)
    if not current:
        log.info("no external modules found, writing an empty lock file")
    store.write(lock_path, current)
    log.info("created %s with %d module(s)", lock_path, len(current))
    return InitLockResult(lock_path=lock_path, written=current)


def check_lock(
    config: ProjectConfig,
    *,
    reader: ManifestReader,
    store: LockStore,
) -> Classification:
    """Verify the current module set against the lock file.

    Raises ``ReconciliationMismatchError`` when any module is new or differs.
    Modules that are only present in the lock file do not fail the check.
    """

    current = reader.read_current_set(config)
    baseline = store.read(config.lock_path)
    classification = classify(current, baseline)

    if classification.has_changes:
        raise ReconciliationMismatchError(classification)

    log.info("all modules match the lock file")
    return classification


def upgrade_lock(
    config: ProjectConfig,
    *,
    reader: ManifestReader,
    store: LockStore,
    approver: Approver,
) -> UpgradeLockResult:
    """Replace the lock file with the current module set once approved."""

    lock_path = config.lock_path
    current = reader.read_current_set(config)
    baseline = store.read(lock_path)
    classification = classify(current, baseline)

    if not classification.has_changes:
        log.info("no changes to %s", lock_path)
        return UpgradeLockResult(
            lock_path=lock_path, classification=classification, written=False
        )

    for key in classification.added:
        log.info("adding new module %s", key)
    for key in classification.updated:
        log.info("updating hash for module %s", key)

    if not approver.approve(classification):
        raise NotApprovedError

    store.write(lock_path, classification.proposed)
    log.info("wrote %d module(s) to %s", len(classification.proposed), lock_path)
    return UpgradeLockResult(lock_path=lock_path, classification=classification, written=True)
