"""Approval gate implementations for the upgrade command."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final, TextIO

from .report import write_changes

if TYPE_CHECKING:
    from terrahash.domain.reconciliation import Classification

log = getLogger(__name__)

AFFIRMATIVE_ANSWERS: Final[frozenset[str]] = frozenset({"yes", "y", "Yes", "Y"})


def _stdin() -> TextIO:
    return sys.stdin


def _stdout() -> TextIO:
    return sys.stdout


@dataclass(frozen=True, slots=True)
class AutoApprover:
    """Approve every proposal without interaction (``--auto-approve``)."""

    def approve(self, classification: Classification) -> bool:
        log.info(
            "auto-approving %d added and %d updated module(s)",
            len(classification.added),
            len(classification.updated),
        )
        return True


@dataclass(slots=True)
class InteractiveApprover:
    """Show the proposed changes and block on one line of operator input.

    Only the exact answers in ``AFFIRMATIVE_ANSWERS`` approve; anything else,
    including an empty line or end of input, rejects.
    """

    input_stream: TextIO = field(default_factory=_stdin)
    output_stream: TextIO = field(default_factory=_stdout)

    def approve(self, classification: Classification) -> bool:
        write_changes(classification, self.output_stream)
        self.output_stream.write("Do you want to update the lock file? [yes/no]: ")
        self.output_stream.flush()
        answer = self.input_stream.readline().strip()
        if answer in AFFIRMATIVE_ANSWERS:
            return True
        log.info("lock file update declined (answer=%r)", answer)
        return False
