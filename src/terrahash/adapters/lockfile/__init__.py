"""Public interface for the lock file adapter."""

from __future__ import annotations

from .schema import LockedModule, LockFileDocument
from .store import JsonLockStore, atomic_write_text

__all__ = [
    "JsonLockStore",
    "LockFileDocument",
    "LockedModule",
    "atomic_write_text",
]
