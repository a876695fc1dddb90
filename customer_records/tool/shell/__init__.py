"""Customer-records shell command implementation."""

from .repl import CustomerShell
from .action import ShellAction

__all__ = ["CustomerShell", "ShellAction"]
