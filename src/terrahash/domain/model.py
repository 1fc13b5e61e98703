"""Domain model for locked Terraform module references."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True, kw_only=True)
class DependencyEntry:
    """One externally fetched module reference and the digest of its content."""

    key: str
    source: str
    version: str
    local_path: str
    digest: str

    def matches(self, other: DependencyEntry) -> bool:
        """Return ``True`` when digest and version both agree with ``other``."""

        return self.digest == other.digest and self.version == other.version


class DependencySet(Mapping[str, DependencyEntry]):
    """Entries keyed by module key.

    Lookup is a dict lookup; iteration is in sorted key order so reports and
    serialised lock files do not depend on the order entries were discovered.
    The configuration root (empty key) is never a member.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[DependencyEntry] = ()) -> None:
        self._entries: dict[str, DependencyEntry] = {}
        for entry in entries:
            if not entry.key:
                raise ValueError("The configuration root (empty key) cannot be tracked")
            if entry.key in self._entries:
                raise ValueError(f"Duplicate module key: {entry.key}")
            self._entries[entry.key] = entry

    def __getitem__(self, key: str) -> DependencyEntry:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DependencySet({sorted(self._entries)!r})"

    def copy(self) -> DependencySet:
        return DependencySet(self.values())

