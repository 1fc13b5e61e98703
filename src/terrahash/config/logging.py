"""Logging setup for the terrahash command line."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Configure the root logger for terrahash output on stderr.

    ``level`` comes from ``--verbose`` or ``TERRAHASH_LOG_LEVEL``. ``force`` replaces
    handlers installed by an earlier call.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
