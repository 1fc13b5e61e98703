"""Translate Terraform's module list into a keyed dependency set."""

from __future__ import annotations

from logging import getLogger
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from terrahash.domain.model import DependencyEntry, DependencySet

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .schema import ModuleRecord

log = getLogger(__name__)


def is_fetched(record: ModuleRecord, *, managed_dir: str = ".terraform") -> bool:
    """Return ``True`` when the module lives under Terraform's download cache.

    Locally authored modules point at directories inside the configuration and
    are not fingerprinted.
    """

    parts = PurePosixPath(record.dir.replace("\\", "/")).parts
    return bool(parts) and parts[0] == managed_dir


def to_dependency_set(
    records: Iterable[ModuleRecord],
    *,
    digest_for: Callable[[ModuleRecord], str],
    managed_dir: str = ".terraform",
) -> DependencySet:
    """Build the current set from ``records``.

    The root entry and locally sourced modules are dropped; ``digest_for`` is
    only called for the modules that remain.
    """

    entries: list[DependencyEntry] = []
    for record in records:
        if record.is_root:
            continue
        if not is_fetched(record, managed_dir=managed_dir):
            log.info("skipping module %s (local source %s)", record.key, record.dir)
            continue
        digest = digest_for(record)
        log.debug("hash generated for %s: %s", record.key, digest)
        entries.append(
            DependencyEntry(
                key=record.key,
                source=record.source,
                version=record.version,
                local_path=record.dir,
                digest=digest,
            )
        )
    return DependencySet(entries)
