"""Content digests for materialised module directories."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

_CHUNK_SIZE = 1024 * 1024


def sha256_file(path: Path) -> str:
    digest = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


@dataclass(frozen=True, slots=True)
class DirectoryHasher:
    """Hash a directory tree into one hex digest.

    The digest covers every regular file below ``path`` as a
    ``sha256sum``-style manifest (``<file digest>  <relative posix path>``)
    sorted by path, so it changes when any file is added, removed, renamed or
    edited, and is independent of filesystem enumeration order.
    """

    algorithm: str = "sha256"

    def __call__(self, path: Path) -> str:
        if not path.is_dir():
            raise NotADirectoryError(f"not a directory: {path}")

        files = sorted(
            (item.relative_to(path).as_posix(), item)
            for item in path.rglob("*")
            if item.is_file()
        )
        manifest = hashlib.new(self.algorithm)
        for relative, item in files:
            manifest.update(f"{sha256_file(item)}  {relative}\n".encode())
        return manifest.hexdigest()
