"""Plain-text summary tables for reconciliation results."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from terrahash.domain.model import DependencySet
    from terrahash.domain.reconciliation import Classification

_COLUMNS = ("Key", "Version", "Source", "Hash")


def format_table(entries: DependencySet) -> str:
    """Render ``entries`` as an aligned table, one module per row."""

    rows = [
        (entry.key, entry.version or "-", entry.source or "-", entry.digest)
        for entry in entries.values()
    ]
    widths = [
        max(len(column), *(len(row[index]) for row in rows)) if rows else len(column)
        for index, column in enumerate(_COLUMNS)
    ]

    def line(cells: tuple[str, ...]) -> str:
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths, strict=True))

    separator = tuple("-" * width for width in widths)
    return "\n".join(line(row).rstrip() for row in (_COLUMNS, separator, *rows))


def write_check_report(classification: Classification, stream: TextIO) -> None:
    """Print the modules that made ``check`` fail."""

    if classification.updated:
        stream.write("Non matching modules were found:\n")
        stream.write(format_table(classification.updated) + "\n")
        stream.write("You may wish to update the module lock file using the upgrade command.\n")
    if classification.not_found:
        stream.write("The following modules were not found in the lock file:\n")
        stream.write(format_table(classification.not_found) + "\n")
        stream.write("You may wish to add these modules using the upgrade command.\n")


def write_changes(classification: Classification, stream: TextIO) -> None:
    """Print the bucket membership and counts of a proposed upgrade."""

    stream.write(
        f"Proposed lock file changes: {len(classification.added)} to add, "
        f"{len(classification.updated)} to update, "
        f"{len(classification.unchanged)} unchanged.\n"
    )
    if classification.added:
        stream.write("Modules to add:\n")
        stream.write(format_table(classification.added) + "\n")
    if classification.updated:
        stream.write("Modules to update:\n")
        stream.write(format_table(classification.updated) + "\n")
