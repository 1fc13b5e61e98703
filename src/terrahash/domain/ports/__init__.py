"""Domain port definitions for adapters."""

from __future__ import annotations

from .approval import Approver
from .fingerprint import Fingerprinter
from .lock_store import LockStore
from .manifest import ManifestReader

__all__ = [
    "Approver",
    "Fingerprinter",
    "LockStore",
    "ManifestReader",
]
