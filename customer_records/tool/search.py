"""Customer-records search action."""

import logging
from argparse import (
    ArgumentParser,
    _SubParsersAction as SubParsersAction,
)
import sys
from typing import cast

from . import store_common
from .format import print_records


_LOGGER = logging.getLogger(__name__)


class SearchAction:
    """Search the customers in a seeded store by name or code."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "search",
                help="Search customers by name or code",
                description="Print customers whose name or code contains the "
                "search term, ignoring case",
            ),
        )
        args.add_argument("term", help="Text to find in the customer name or code")
        store_common.add_dataset_flags(args)
        args.add_argument(
            "--output",
            "-o",
            choices=["table", "yaml", "json"],
            default="table",
            help="Output format of the command",
        )
        args.set_defaults(cls=cls)
        return args

    async def run(  # type: ignore[no-untyped-def]
        self,
        term: str,
        output: str,
        **kwargs,
    ) -> None:
        """Async Action implementation."""
        store = await store_common.build_store(**kwargs)
        records = store.find_by_text(term)
        _LOGGER.debug("Search for %r matched %d customers", term, len(records))
        if not records:
            print("No matching customers found.")
            return
        print_records(records, output=output, file=sys.stdout)
