"""
customer-records manages a bounded collection of customer records in memory.

The library is organized around a few modules:
  - `record`: the validated customer record value type
  - `store`: the store that owns the live records, with search and sort
  - `dataset`: reading YAML datasets used to seed a store
  - `exceptions`: errors raised for invalid input and failed store operations

The `tool` package holds the command line program and interactive shell that
are thin adapters over the store.
"""

__all__ = [
    "record",
    "store",
    "dataset",
    "exceptions",
    "config",
    # Note this is exposed for CLI documentation, not to be used as a library
    "tool",
]
