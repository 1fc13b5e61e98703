from __future__ import annotations

from terrahash.ui.cli import run

run()
