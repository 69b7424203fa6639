# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from flowtally.adapters.display import render_ledgers
from flowtally.adapters.scanner import IdentifierFormat
from flowtally.app import build_processor, process_line
from flowtally.config import (
    ConfigurationError,
    TallyConfig,
    configure_logging,
    get_tally_config,
)
from flowtally.domain.model import Flow

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from types import FrameType

    from flowtally.domain.reconciliation import ReconciliationProcessor

log = logging.getLogger(__name__)

FLOW_COMMANDS: dict[str, Flow] = {
    "receive": Flow.RECEIVED,
    "r": Flow.RECEIVED,
    "ship": Flow.SHIPPED,
    "s": Flow.SHIPPED,
}
QUIT_COMMANDS = frozenset({"quit", "exit"})

USAGE = """\
Commands:
  receive|r <ids...>   record identifiers as received
  ship|s <ids...>      record identifiers as shipped
  clear                empty both ledgers
  show                 print both ledgers
  help                 print this summary
  quit|exit            end the session"""


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Track received and shipped units, offsetting one flow against the other",
        epilog=USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--identifier-length",
        type=int,
        default=None,
        help="Number of hexadecimal characters per identifier (defaults to config)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level name, e.g. DEBUG or WARNING (defaults to config)",
    )
    return parser.parse_args(list(argv))


def _load_config(args: argparse.Namespace) -> TallyConfig:
    config = get_tally_config()
    if args.identifier_length is not None:
        config = replace(config, identifier_length=args.identifier_length)
    if args.log_level is not None:
        config = replace(config, log_level=args.log_level.strip().upper())
    return config


def run_session(
    processor: ReconciliationProcessor,
    lines: Iterable[str],
    *,
    fmt: IdentifierFormat,
) -> None:
    """Execute session commands until input ends or a quit command is read."""

    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            continue
        command, *remainder = line.split(maxsplit=1)
        rest = remainder[0] if remainder else ""
        command = command.lower()

        if command in QUIT_COMMANDS:
            return
        if command in FLOW_COMMANDS:
            process_line(processor, rest, FLOW_COMMANDS[command], fmt=fmt)
        elif command == "clear":
            processor.clear()
        elif command == "help":
            print(USAGE)
            continue
        elif command != "show":
            log.error("Unknown command: %s", command)
            continue
        print(render_ledgers(processor))
        print()


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        config = _load_config(parsed_args)
        fmt = IdentifierFormat(length=config.identifier_length)
    except (ConfigurationError, ValueError):
        log.exception("CLI validation error")
        sys.exit(2)

    logging.getLogger().setLevel(config.log_level)
    if sys.stdin.isatty():
        print(USAGE)

    run_session(build_processor(), sys.stdin, fmt=fmt)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
