"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from terrahash.adapters.lockfile import JsonLockStore
from terrahash.adapters.terraform import TerraformManifestReader
from terrahash.domain.lock_workflow import (
    InitLockResult,
    UpgradeLockResult,
    check_lock,
    init_lock,
    upgrade_lock,
)
from terrahash.ui.approval import AutoApprover, InteractiveApprover

if TYPE_CHECKING:
    from terrahash.config import ProjectConfig
    from terrahash.domain.ports import Approver, LockStore, ManifestReader
    from terrahash.domain.reconciliation import Classification


log = getLogger(__name__)


def create_lock_file(
    config: ProjectConfig,
    *,
    reader: ManifestReader | None = None,
    store: LockStore | None = None,
) -> InitLockResult:
    """Create the lock file for the configuration at ``config.root``."""

    log.info("init: working path set to %s", config.source)
    return init_lock(
        config,
        reader=reader or TerraformManifestReader(),
        store=store or JsonLockStore(),
    )


def check_lock_file(
    config: ProjectConfig,
    *,
    reader: ManifestReader | None = None,
    store: LockStore | None = None,
) -> Classification:
    """Check the configuration's modules against its lock file."""

    log.info("check: working path set to %s", config.source)
    return check_lock(
        config,
        reader=reader or TerraformManifestReader(),
        store=store or JsonLockStore(),
    )


def upgrade_lock_file(
    config: ProjectConfig,
    *,
    auto_approve: bool = False,
    reader: ManifestReader | None = None,
    store: LockStore | None = None,
    approver: Approver | None = None,
) -> UpgradeLockResult:
    """Reconcile and, once approved, rewrite the lock file."""

    log.info("upgrade: working path set to %s", config.source)
    effective_approver = approver or (AutoApprover() if auto_approve else InteractiveApprover())
    return upgrade_lock(
        config,
        reader=reader or TerraformManifestReader(),
        store=store or JsonLockStore(),
        approver=effective_approver,
    )
