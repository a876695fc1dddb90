"""Command line tool for managing customer records in memory."""

import argparse
import asyncio
import logging
import sys
import traceback

from customer_records.exceptions import CustomerRecordsException
from . import list as list_action, search, shell

_LOGGER = logging.getLogger(__name__)


def _make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Command line utility for managing customer records.",
    )
    parser.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    )

    subparsers = parser.add_subparsers(dest="command", help="Command", required=True)

    list_action.ListAction.register(subparsers)
    search.SearchAction.register(subparsers)
    shell.ShellAction.register(subparsers)
    return parser


def main(argv: list[str] | None = None) -> None:
    """Customer-records command line tool main entry point."""
    parser = _make_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        logging.basicConfig(level=args.log_level)

    action = args.cls()
    try:
        asyncio.run(action.run(**vars(args)))
    except CustomerRecordsException as err:
        if args.log_level == "DEBUG":
            traceback.print_exc(file=sys.stderr)
        print("customer-records error: ", err, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
