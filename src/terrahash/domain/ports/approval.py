"""Port for the approval gate in front of lock file updates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from terrahash.domain.reconciliation import Classification


@runtime_checkable
class Approver(Protocol):
    """Decide whether the proposed baseline may replace the lock file.

    Returning ``False`` is a rejection, never an error.
    """

    def approve(self, classification: Classification) -> bool: ...


__all__ = ["Approver"]
