"""JSON lock store with atomic replacement on write."""

from __future__ import annotations

import os
import stat
import tempfile
from dataclasses import dataclass
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from terrahash.domain.errors import CorruptRecordError, LockFileNotFoundError

from .schema import LockFileDocument

if TYPE_CHECKING:
    from terrahash.domain.model import DependencySet

log = getLogger(__name__)


def _target_mode(path: Path) -> int:
    """Mode for ``path``: the current one if it exists, else ``0o666`` less the umask."""

    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def atomic_write_text(path: Path, text: str) -> None:
    """Write ``text`` to a temp file next to ``path`` and rename it into place.

    The result keeps the permissions of the file it replaces.
    """

    mode = _target_mode(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        tmp_path.chmod(mode)
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()


@dataclass(frozen=True, slots=True)
class JsonLockStore:
    def exists(self, path: Path) -> bool:
        return path.is_file()

    def read(self, path: Path) -> DependencySet:
        log.debug("processing the mod lock file %s", path)
        try:
            raw = path.read_bytes()
        except FileNotFoundError as exc:
            raise LockFileNotFoundError(path) from exc
        try:
            document = LockFileDocument.model_validate_json(raw)
        except ValidationError as exc:
            raise CorruptRecordError(
                f"could not decode lock file ({exc.error_count()} error(s))", path=path
            ) from exc
        return document.to_dependency_set()

    def write(self, path: Path, entries: DependencySet) -> None:
        log.debug("writing %d module(s) to %s", len(entries), path)
        atomic_write_text(path, LockFileDocument.from_dependency_set(entries).dumps())
