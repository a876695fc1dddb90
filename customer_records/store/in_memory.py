"""Module for in memory record store."""

from collections import defaultdict
from collections.abc import Callable
from typing import DefaultDict

import logging

from customer_records.config import StoreConfig
from customer_records.exceptions import CapacityExceeded, DuplicateId, NotFound
from customer_records.record import (
    Record,
    validate_address,
    validate_code,
    validate_name,
)
from customer_records.sorting import exchange_sort

from .store import Store, StoreEvent


_LOGGER = logging.getLogger(__name__)


class InMemoryStore(Store):
    """In-memory implementation of the Store interface.

    Records are kept in a list in insertion order. The list grows as needed
    but never past the configured capacity. Deleting a record closes the gap
    so the remaining records keep their relative order.
    """

    def __init__(self, config: StoreConfig | None = None) -> None:
        """Initialize the InMemoryStore."""
        self._config = config if config is not None else StoreConfig()
        self._records: list[Record] = []
        self._listeners: DefaultDict[StoreEvent, list[Callable[[Record], None]]] = (
            defaultdict(list)
        )

    @property
    def capacity(self) -> int:
        """Return the maximum number of live records."""
        return self._config.capacity

    @property
    def count(self) -> int:
        """Return the number of live records."""
        return len(self._records)

    def _index_of(self, record_id: int) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    def add(self, record: Record) -> None:
        """Append a record to the store."""
        if self.count >= self.capacity:
            raise CapacityExceeded(self.capacity)
        if self._index_of(record.id) is not None:
            raise DuplicateId(record.id)
        _LOGGER.debug("Adding record %s to store", record.id)
        self._records.append(record)
        self._fire_event(StoreEvent.RECORD_ADDED, record)

    def find_by_id(self, record_id: int) -> Record | None:
        """Return the live record with the given id, if any."""
        if (index := self._index_of(record_id)) is None:
            return None
        return self._records[index]

    def find_by_text(self, term: str) -> list[Record]:
        """Return records whose name or code contains the term, ignoring case."""
        if not term:
            return []
        return [record for record in self._records if record.matches(term)]

    def update(
        self, record_id: int, name: str, code: str, address: str | None = None
    ) -> None:
        """Replace the name, code and address of a live record in place."""
        if (record := self.find_by_id(record_id)) is None:
            raise NotFound(record_id)
        # Validate every field up front so a failure leaves the record untouched
        new_name = validate_name(name)
        new_code = validate_code(code)
        new_address = validate_address(address)
        _LOGGER.debug("Updating record %s in store", record_id)
        record.name = new_name
        record.code = new_code
        record.address = new_address
        self._fire_event(StoreEvent.RECORD_UPDATED, record)

    def delete(self, record_id: int) -> bool:
        """Remove the live record with the given id."""
        if (index := self._index_of(record_id)) is None:
            _LOGGER.debug("Record %s not in store, nothing to delete", record_id)
            return False
        record = self._records.pop(index)
        _LOGGER.debug("Deleted record %s from store", record_id)
        self._fire_event(StoreEvent.RECORD_DELETED, record)
        return True

    def all(self) -> list[Record]:
        """Return a copy of the live records in store order."""
        return list(self._records)

    def sorted_by_name(self, ascending: bool = True) -> list[Record]:
        """Return a copy of the live records ordered by name, ignoring case.

        Records with equal names keep their store order.
        """
        return exchange_sort(
            self._records, key=lambda r: r.name.casefold(), ascending=ascending
        )

    def sorted_by_id(self, ascending: bool = True) -> list[Record]:
        """Return a copy of the live records ordered by id."""
        return exchange_sort(self._records, key=lambda r: r.id, ascending=ascending)

    def add_listener(
        self,
        event: StoreEvent,
        callback: Callable[[Record], None],
    ) -> Callable[[], None]:
        """Register a callback for a specific event (record added, updated, deleted)."""

        def remove() -> None:
            if callback in self._listeners[event]:
                self._listeners[event].remove(callback)

        self._listeners[event].append(callback)
        return remove

    def _fire_event(self, event: StoreEvent, record: Record) -> None:
        for cb in list(self._listeners[event]):  # Iterate over a copy for safe removal
            try:
                cb(record)
            except Exception:
                _LOGGER.exception("Store listener callback failed for event %s", event)
