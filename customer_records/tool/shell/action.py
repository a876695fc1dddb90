"""Customer-records shell command implementation."""

import asyncio
from collections.abc import Callable
import logging
import sys
from argparse import _SubParsersAction as SubParsersAction, ArgumentParser
from typing import Any, cast

from customer_records.record import Record
from customer_records.store import Store, StoreEvent
from customer_records.tool import store_common

from .repl import CustomerShell

_LOGGER = logging.getLogger(__name__)


def _log_changes(store: Store) -> None:
    """Log every change made to the store during the session."""

    def listener(event: StoreEvent) -> Callable[[Record], None]:
        def log(record: Record) -> None:
            _LOGGER.info("Customer %s: %s", record.id, event.value)

        return log

    for event in StoreEvent:
        store.add_listener(event, listener(event))


class ShellAction:
    """Customer-records shell action."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the shell subcommand."""
        parser = cast(
            ArgumentParser,
            subparsers.add_parser(
                "shell",
                help="Start an interactive shell",
                description="Start an interactive shell for adding, viewing, "
                "searching, updating and deleting customers.",
            ),
        )
        store_common.add_dataset_flags(parser)
        parser.set_defaults(cls=cls)
        return parser

    async def run(self, **kwargs: Any) -> None:
        """Run the interactive shell over a seeded store."""
        store = await store_common.build_store(**kwargs)
        _log_changes(store)
        _LOGGER.info("Starting shell with %d customers", store.count)

        shell = CustomerShell(store=store)
        try:
            await asyncio.get_running_loop().run_in_executor(None, shell.cmdloop)
        except KeyboardInterrupt:
            print("\nExiting customer-records shell", file=sys.stderr)
