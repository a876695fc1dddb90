"""Store module for holding the live set of customer records."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum

from customer_records.record import Record


class StoreEvent(str, Enum):
    """Enum for store events."""

    RECORD_ADDED = "record_added"
    RECORD_UPDATED = "record_updated"
    RECORD_DELETED = "record_deleted"


class Store(ABC):
    """Abstract base class for a bounded, ordered collection of customer records.

    The store is the sole authority over the live record set. All ids of live
    records are distinct and the relative order of records is the order in
    which they were added, with deleted records removed from that order.
    """

    @property
    @abstractmethod
    def capacity(self) -> int:
        """Return the maximum number of live records."""

    @property
    @abstractmethod
    def count(self) -> int:
        """Return the number of live records."""

    def __len__(self) -> int:
        """Return the number of live records."""
        return self.count

    @abstractmethod
    def add(self, record: Record) -> None:
        """Append a record to the store.

        Raises:
            CapacityExceeded: If the store is full.
            DuplicateId: If a live record already has the same id.
        """

    @abstractmethod
    def find_by_id(self, record_id: int) -> Record | None:
        """Return the live record with the given id, if any."""

    @abstractmethod
    def find_by_text(self, term: str) -> list[Record]:
        """Return records whose name or code contains the term, ignoring case.

        An empty term matches nothing.
        """

    @abstractmethod
    def update(
        self, record_id: int, name: str, code: str, address: str | None = None
    ) -> None:
        """Replace the name, code and address of a live record in place.

        All fields are validated before any is changed.

        Raises:
            NotFound: If no live record has the id.
            ValidationError: If any new field value is invalid.
        """

    @abstractmethod
    def delete(self, record_id: int) -> bool:
        """Remove the live record with the given id.

        Returns:
            bool: True if a record was removed, False if the id was not found.
        """

    @abstractmethod
    def all(self) -> list[Record]:
        """Return a copy of the live records in store order."""

    @abstractmethod
    def sorted_by_name(self, ascending: bool = True) -> list[Record]:
        """Return a copy of the live records ordered by name, ignoring case."""

    @abstractmethod
    def sorted_by_id(self, ascending: bool = True) -> list[Record]:
        """Return a copy of the live records ordered by id."""

    @abstractmethod
    def add_listener(
        self,
        event: StoreEvent,
        callback: Callable[[Record], None],
    ) -> Callable[[], None]:
        """Register a callback for a specific event (record added, updated, deleted).

        Returns a callable that can be called to remove the listener.
        """
