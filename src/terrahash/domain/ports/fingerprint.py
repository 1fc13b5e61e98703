"""Port for computing content digests of materialised modules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path


@runtime_checkable
class Fingerprinter(Protocol):
    """Pure function from a directory subtree to a deterministic digest."""

    def __call__(self, path: Path) -> str: ...


__all__ = ["Fingerprinter"]
