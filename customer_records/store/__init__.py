"""
The store module provides the central repository of customer records for a
customer-records session.

- Uses the record id as the identity of every record.
- Enforces a fixed capacity and id uniqueness across the live records.
- Provides lookup, search, update, delete and sorted views for the adapters
  (e.g. the interactive shell and command line actions).

This abstract interface allows for various implementations; the records only
ever live in memory.
"""

from .store import Store, StoreEvent
from .in_memory import InMemoryStore

__all__ = [
    "Store",
    "StoreEvent",
    "InMemoryStore",
]
