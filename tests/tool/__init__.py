"""Test helpers for customer-records tools."""

import pytest

from customer_records.tool.customer_records import main


def run_command(args: list[str], capsys: pytest.CaptureFixture[str]) -> str:
    """Run the command line tool and return what it printed to stdout."""
    capsys.readouterr()
    main(args)
    return capsys.readouterr().out
