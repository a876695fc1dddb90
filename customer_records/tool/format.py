"""Library for formatting output."""

import json
import sys
from typing import Any, Generator, TextIO

import yaml

from tabulate import tabulate

from customer_records.config import DEFAULT_ADDRESS_WIDTH
from customer_records.record import Record


ELLIPSIS = "..."
HEADERS = ["ID", "NAME", "CODE", "ADDRESS"]


def truncate(value: str, width: int) -> str:
    """Shorten a value to fit within width characters for display."""
    if len(value) <= width:
        return value
    if width <= len(ELLIPSIS):
        return value[:width]
    return value[: width - len(ELLIPSIS)] + ELLIPSIS


def record_rows(
    records: list[Record], address_width: int = DEFAULT_ADDRESS_WIDTH
) -> list[list[Any]]:
    """Return table rows for the records with the address truncated."""
    return [
        [r.id, r.name, r.code, truncate(r.address or "", address_width)]
        for r in records
    ]


class TableFormatter:
    """A formatter that prints records as a human readable table."""

    def __init__(self, address_width: int = DEFAULT_ADDRESS_WIDTH) -> None:
        """Initialize the TableFormatter with the address display width."""
        self._address_width = address_width

    def format(self, records: list[Record]) -> Generator[str, None, None]:
        """Format the records."""
        if not records:
            return
        table = tabulate(
            record_rows(records, self._address_width),
            headers=HEADERS,
            tablefmt="simple",
            disable_numparse=True,
        )
        for line in table.split("\n"):
            yield line

    def print(self, records: list[Record], file: TextIO = sys.stdout) -> None:
        """Output the records."""
        for result in self.format(records):
            print(result, file=file)


def print_records(
    records: list[Record],
    output: str | None = None,
    address_width: int = DEFAULT_ADDRESS_WIDTH,
    file: TextIO = sys.stdout,
) -> None:
    """Print records as a table, or as yaml or json documents."""
    if output == "yaml":
        data = [r.to_dict() for r in records]
        print(yaml.dump(data, sort_keys=False, explicit_start=True), end="", file=file)
    elif output == "json":
        json.dump([r.to_dict() for r in records], sort_keys=False, indent=4, fp=file)
        print(file=file)
    else:
        TableFormatter(address_width).print(records, file=file)
