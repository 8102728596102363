#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from cardledger.app import add_card_list, load_catalog
from cardledger.config import ConfigurationError, configure_logging
from cardledger.domain.errors import InputError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

INTERRUPTED_EXIT_CODE = 130


def _add_database_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--database",
        "-d",
        type=Path,
        help="SQLite database path (defaults to DATABASE_URI or the data directory)",
    )
    parser.add_argument(
        "--spellfix",
        "-s",
        type=Path,
        help="Path to the spellfix1 SQLite extension (defaults to $SPELLFIX_EXT)",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Track owned cards against a catalog")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_list = subparsers.add_parser("add-list", help="Add a card list to the owned counters")
    _add_database_arguments(add_list)
    add_list.add_argument("list", type=Path, help="Card list file, one card per line")
    add_list.add_argument(
        "--save-on-error",
        "-o",
        type=Path,
        help="Write a resume log here so an aborted list can be replayed",
    )

    catalog = subparsers.add_parser("load-catalog", help="Load a catalog snapshot")
    _add_database_arguments(catalog)
    catalog.add_argument("snapshot", type=Path, help="Newline-delimited JSON catalog snapshot")
    catalog.add_argument(
        "--no-vocabulary",
        action="store_true",
        help="Skip building the spellfix vocabularies",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "add-list":
            applied = add_card_list(
                parsed_args.list,
                database_path=parsed_args.database,
                spellfix_extension=parsed_args.spellfix,
                save_on_error=parsed_args.save_on_error,
            )
            log.info("List %s: %s", applied.fingerprint.hex(), applied.status)
        elif parsed_args.command == "load-catalog":
            loaded = load_catalog(
                parsed_args.snapshot,
                database_path=parsed_args.database,
                spellfix_extension=parsed_args.spellfix,
                build_vocabulary=not parsed_args.no_vocabulary,
            )
            log.info("Catalog load finished: cards=%s, faces=%s", loaded.cards, loaded.faces)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except (ConfigurationError, InputError):
        log.exception("Invalid input or configuration")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C); a running list is rolled back before the process exits."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(INTERRUPTED_EXIT_CODE)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
