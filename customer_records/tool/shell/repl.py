"""Customer-records interactive shell implementation."""

import cmd
from argparse import ArgumentParser, Namespace
import logging
import shlex
import sys
from typing import TextIO

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from customer_records.config import DisplayConfig
from customer_records.exceptions import CustomerRecordsException, InvalidId, NotFound
from customer_records.record import (
    MAX_ADDRESS_LENGTH,
    MAX_CODE_LENGTH,
    MAX_NAME_LENGTH,
    Record,
    validate_id,
)
from customer_records.store import Store
from customer_records.tool.format import print_records


_LOGGER = logging.getLogger(__name__)

YES = ("y", "yes")


def parse_id(value: str) -> int:
    """Parse a customer id typed by the user."""
    try:
        record_id = int(value.strip())
    except ValueError as err:
        raise InvalidId(
            f"Customer id must be a positive integer: {value!r}"
        ) from err
    return validate_id(record_id)


class CustomerShell(cmd.Cmd):
    """Interactive shell for managing customer records."""

    intro = (
        "Welcome to the customer-records shell. Type 'help' for help, 'exit' to quit."
    )
    prompt = "customers> "

    def __init__(
        self,
        store: Store,
        display: DisplayConfig | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        """Initialize the shell with the given store and I/O streams.

        Args:
            store: The store holding the customer records (required)
            display: Optional settings for rendering records
            stdin: Optional stream for answers to prompts (default: sys.stdin)
            stdout: Optional stream for stdout (default: sys.stdout)
            stderr: Optional stream for stderr (default: sys.stderr)
        """
        super().__init__(
            stdin=stdin if stdin is not None else sys.stdin,
            stdout=stdout if stdout is not None else sys.stdout,
        )
        if stdin is not None:
            self.use_rawinput = False
        self.store = store
        self.display = display if display is not None else DisplayConfig()
        self.stderr = stderr if stderr is not None else sys.stderr

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        print(message, file=self.stderr)

    def onecmd(self, line: str) -> bool:
        """Run a command, reporting store errors without leaving the shell."""
        try:
            return super().onecmd(line)
        except CustomerRecordsException as err:
            _LOGGER.debug("Command %r failed: %s", line, err)
            self.print_error(f"Error: {err}")
            return False

    def emptyline(self) -> bool:
        """Do nothing on an empty line rather than repeating the last command."""
        return False

    def default(self, line: str) -> None:
        """Report an unknown command."""
        self.print_error(f"Unknown command: {line}")

    def _ask(self, prompt: str) -> str:
        """Prompt for a line of input, returning it stripped."""
        print(prompt, end="", file=self.stdout)
        self.stdout.flush()
        return self.stdin.readline().strip()

    def _confirm(self, prompt: str) -> bool:
        return self._ask(f"{prompt} (y/N): ").lower() in YES

    def _parse_args(self, parser: ArgumentParser, arg: str) -> Namespace | None:
        try:
            return parser.parse_args(shlex.split(arg))
        except ValueError as err:
            self.print_error(f"Error: {err}")
            return None
        except SystemExit:
            # Handle argparse exit from help or error
            return None

    def do_help(self, arg: str) -> None:
        """List available commands with 'help' or detailed help with 'help <cmd>'."""
        if arg:
            super().do_help(arg)
            return
        print("Documented commands (type help <topic>):\n", file=self.stdout)
        cmds = [
            name[3:]
            for name in self.get_names()
            if name.startswith("do_") and name not in ("do_help", "do_EOF")
        ]
        print("  " + "  ".join(sorted(cmds)) + "\n", file=self.stdout)

    def do_add(self, arg: str) -> None:
        """Add a new customer.

        Missing fields are prompted for.

        Examples:
            add
            add 101 "Alice Johnson" AJ101 "123 Maple St."
        """
        parser = ArgumentParser(prog="add", add_help=False)
        parser.add_argument("id", nargs="?", help="Customer id (numeric)")
        parser.add_argument("name", nargs="?", help="Customer name")
        parser.add_argument("code", nargs="?", help="Customer code")
        parser.add_argument("address", nargs="?", help="Customer address")
        if (args := self._parse_args(parser, arg)) is None:
            return

        if args.id is None:
            args.id = self._ask("Enter customer id (numeric): ")
        record_id = parse_id(args.id)
        if self.store.find_by_id(record_id) is not None:
            self.print_error(f"Customer id {record_id} already exists. Try again.")
            return
        prompted = args.name is None or args.code is None
        if args.name is None:
            args.name = self._ask(f"Enter name (max {MAX_NAME_LENGTH} characters): ")
        if args.code is None:
            args.code = self._ask(f"Enter code (max {MAX_CODE_LENGTH} characters): ")
        if args.address is None and prompted:
            args.address = self._ask(
                f"Enter address (max {MAX_ADDRESS_LENGTH} characters, optional): "
            )

        record = Record(record_id, args.name, args.code.strip(), args.address)
        self.store.add(record)
        print(f"Customer {record.id} added successfully.", file=self.stdout)

    def do_list(self, arg: str) -> None:
        """List all customers.

        Examples:
            list
            list --sort name
            list --sort id --desc
            list -o yaml
        """
        parser = ArgumentParser(prog="list", add_help=False)
        parser.add_argument("--sort", choices=["id", "name"], help="Sort order")
        parser.add_argument(
            "--desc", action="store_true", help="Sort in descending order"
        )
        parser.add_argument(
            "-o", "--output", choices=["table", "yaml", "json"], help="Output format"
        )
        if (args := self._parse_args(parser, arg)) is None:
            return

        ascending = not args.desc
        if args.sort == "name":
            records = self.store.sorted_by_name(ascending)
        elif args.sort == "id":
            records = self.store.sorted_by_id(ascending)
        else:
            records = self.store.all()
        if not records:
            print("No customers found", file=self.stdout)
            return
        self._print_records(records, args.output)

    def do_search(self, arg: str) -> None:
        """Search customers by a part of their name or code, ignoring case.

        Examples:
            search smith
            search aj1
        """
        term = arg.strip() or self._ask("Enter name or code to search: ")
        if not (records := self.store.find_by_text(term)):
            print("No matching customers found.", file=self.stdout)
            return
        self._print_records(records, None)

    def do_show(self, arg: str) -> None:
        """Show detailed information about a customer.

        Examples:
            show 101
        """
        if not arg.strip():
            print("Usage: show <id>", file=self.stdout)
            return
        record_id = parse_id(arg)
        if (record := self.store.find_by_id(record_id)) is None:
            raise NotFound(record_id)
        console = Console(file=self.stdout)
        console.print(
            Panel.fit(
                f"[bold]Id:[/] {record.id}\n"
                f"[bold]Name:[/] {escape(record.name)}\n"
                f"[bold]Code:[/] {escape(record.code)}\n"
                f"[bold]Address:[/] {escape(record.address or '')}",
                title="[bold]Customer",
            )
        )

    def do_update(self, arg: str) -> None:
        """Replace the name, code and address of a customer.

        Missing fields are prompted for.

        Examples:
            update 101
            update 101 "Alice Smith" AS101 "9 Birch Ln."
        """
        parser = ArgumentParser(prog="update", add_help=False)
        parser.add_argument("id", nargs="?", help="Customer id (numeric)")
        parser.add_argument("name", nargs="?", help="New customer name")
        parser.add_argument("code", nargs="?", help="New customer code")
        parser.add_argument("address", nargs="?", help="New customer address")
        if (args := self._parse_args(parser, arg)) is None:
            return

        if args.id is None:
            args.id = self._ask("Enter customer id to update: ")
        record_id = parse_id(args.id)
        if self.store.find_by_id(record_id) is None:
            raise NotFound(record_id)
        prompted = args.name is None or args.code is None
        if args.name is None:
            args.name = self._ask(
                f"Enter new name (max {MAX_NAME_LENGTH} characters): "
            )
        if args.code is None:
            args.code = self._ask(
                f"Enter new code (max {MAX_CODE_LENGTH} characters): "
            )
        if args.address is None and prompted:
            args.address = self._ask(
                f"Enter new address (max {MAX_ADDRESS_LENGTH} characters, optional): "
            )

        self.store.update(record_id, args.name, args.code.strip(), args.address)
        print(f"Customer {record_id} updated successfully.", file=self.stdout)

    def do_delete(self, arg: str) -> None:
        """Delete a customer after confirmation.

        Examples:
            delete 101
            delete 101 --yes
        """
        parser = ArgumentParser(prog="delete", add_help=False)
        parser.add_argument("id", nargs="?", help="Customer id (numeric)")
        parser.add_argument(
            "-y", "--yes", action="store_true", help="Do not ask for confirmation"
        )
        if (args := self._parse_args(parser, arg)) is None:
            return

        if args.id is None:
            args.id = self._ask("Enter customer id to delete: ")
        record_id = parse_id(args.id)
        if self.store.find_by_id(record_id) is None:
            raise NotFound(record_id)
        if not args.yes and not self._confirm(
            f"Are you sure you want to delete customer {record_id}?"
        ):
            print("Deletion cancelled.", file=self.stdout)
            return
        self.store.delete(record_id)
        print(f"Customer {record_id} deleted successfully.", file=self.stdout)

    def _print_records(self, records: list[Record], output: str | None) -> None:
        print_records(
            records,
            output=output,
            address_width=self.display.address_width,
            file=self.stdout,
        )

    def do_exit(self, arg: str) -> bool:
        """Exit the shell after confirmation, or immediately with 'exit -y'."""
        if arg.strip() not in ("-y", "--yes") and not self._confirm(
            "Are you sure you want to exit?"
        ):
            return False
        print("Exiting customer-records shell", file=self.stdout)
        return True

    def do_quit(self, arg: str) -> bool:
        """Exit the shell (alias for exit)."""
        return self.do_exit(arg)

    def do_EOF(self, arg: str) -> bool:
        """Handle EOF (Ctrl+D) to exit the shell."""
        print("\n", file=self.stdout, end="")
        self.stdout.flush()
        return self.do_exit("--yes")
