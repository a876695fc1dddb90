"""Customer-records list action."""

from argparse import (
    ArgumentParser,
    _SubParsersAction as SubParsersAction,
)
import sys
from typing import cast

from . import store_common
from .format import print_records


class ListAction:
    """List the customers in a seeded store."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "list",
                aliases=["ls"],
                help="List customers",
                description="Print the customers in the dataset, optionally sorted",
            ),
        )
        store_common.add_dataset_flags(args)
        args.add_argument(
            "--sort",
            choices=["id", "name"],
            default=None,
            help="Sort customers by id or by name (ignoring case)",
        )
        args.add_argument(
            "--desc",
            action="store_true",
            default=False,
            help="Sort in descending order",
        )
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
        sort: str | None,
        desc: bool,
        output: str,
        **kwargs,
    ) -> None:
        """Async Action implementation."""
        store = await store_common.build_store(**kwargs)
        if sort == "name":
            records = store.sorted_by_name(ascending=not desc)
        elif sort == "id":
            records = store.sorted_by_id(ascending=not desc)
        else:
            records = store.all()
        if not records:
            print("No customers found")
            return
        print_records(records, output=output, file=sys.stdout)
