"""Command line interface: ``terrahash init|check|upgrade|version``."""

# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from terrahash import __version__
from terrahash.app import check_lock_file, create_lock_file, upgrade_lock_file
from terrahash.config import (
    ConfigurationError,
    configure_logging,
    get_log_level,
    get_project_config,
)
from terrahash.domain.errors import ReconciliationMismatchError, TerrahashError
from terrahash.ui.report import write_check_report

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _add_common_options(parser: argparse.ArgumentParser, *, suppress: bool = False) -> None:
    # Subcommand copies default to SUPPRESS; the top-level parser owns the defaults.
    parser.add_argument(
        "-s",
        "--source",
        type=str,
        default=argparse.SUPPRESS if suppress else None,
        help="Source directory to read from. Defaults to current directory.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress else False,
        help="Enable debug logging",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    common = argparse.ArgumentParser(add_help=False)
    _add_common_options(common, suppress=True)

    parser = argparse.ArgumentParser(
        prog="terrahash",
        description="Generate and check hashes of the Terraform modules used by a configuration",
    )
    _add_common_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser(
        "init",
        parents=[common],
        help="Create the module lock file if one doesn't already exist",
    )
    subparsers.add_parser(
        "check",
        parents=[common],
        help="Check that the modules match the module lock file",
    )
    upgrade = subparsers.add_parser(
        "upgrade",
        parents=[common],
        help="Replace the lock file entries with the modules found in the configuration",
    )
    upgrade.add_argument(
        "--auto-approve",
        action="store_true",
        help="Skip the interactive confirmation",
    )
    subparsers.add_parser("version", parents=[common], help="Print the terrahash version")

    return parser.parse_args(list(argv))


def _setup_logging(args: argparse.Namespace) -> None:
    level = logging.DEBUG if args.verbose else get_log_level()
    configure_logging(level=level)
    logging.getLogger("terrahash").setLevel(level)


def _run_command(args: argparse.Namespace) -> None:
    if args.command == "version":
        print(f"terrahash version is {__version__}")
        return

    config = get_project_config(args.source)
    if args.command == "init":
        result = create_lock_file(config)
        print(f"Created {result.lock_path} with {len(result.written)} module(s).")
    elif args.command == "check":
        check_lock_file(config)
        print("All modules match the lock file.")
    elif args.command == "upgrade":
        outcome = upgrade_lock_file(config, auto_approve=args.auto_approve)
        if outcome.written:
            print(f"Updated {outcome.lock_path}.")
        else:
            print("No changes to the lock file.")
    else:
        raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        _setup_logging(parsed_args)
    except ConfigurationError:
        configure_logging()
        log.exception("Configuration error")
        sys.exit(2)

    log.debug("%s command called", parsed_args.command)
    try:
        _run_command(parsed_args)
    except ReconciliationMismatchError as exc:
        write_check_report(exc.classification, sys.stdout)
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(1)
    except TerrahashError as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(1)
    except Exception:
        log.exception("Fatal error while running %s", parsed_args.command)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(130)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
