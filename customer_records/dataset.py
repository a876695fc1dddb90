"""Datasets used to seed a store with customer records.

A dataset is a YAML document with a list of customers, for example:

```yaml
customers:
- id: 101
  name: Alice Johnson
  code: AJ101
  address: 123 Maple St.
```

Datasets are only ever read. The packaged default dataset is used when a
command is not given a dataset file.
"""

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any

import aiofiles
import yaml

from .config import StoreConfig
from .exceptions import DuplicateId, InputException, ValidationError
from .record import Record
from .store import InMemoryStore, Store

__all__ = [
    "Dataset",
    "DEFAULT_DATASET_PATH",
    "read_dataset",
    "seed_store",
    "load_store",
]

_LOGGER = logging.getLogger(__name__)

DEFAULT_DATASET_PATH = Path(__file__).parent / "data" / "default_customers.yaml"


@dataclass
class Dataset:
    """A list of customer records to seed a store with."""

    customers: list[Record] = field(default_factory=list)
    """The customer records, in the order they are added to a store."""

    @classmethod
    def parse_doc(cls, doc: dict[str, Any]) -> "Dataset":
        """Parse a Dataset from a mapping with a list of customers."""
        entries = doc.get("customers") or []
        if not isinstance(entries, list):
            raise InputException(
                f"Invalid dataset customers, expected a list: {entries!r}"
            )
        customers = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise InputException(
                    f"Invalid dataset customer, expected a mapping: {entry!r}"
                )
            try:
                customers.append(Record.parse_doc(entry))
            except ValidationError as err:
                raise InputException(
                    f"Invalid dataset customer {entry}: {err}"
                ) from err
        return cls(customers=customers)

    @classmethod
    def parse_yaml(cls, content: str) -> "Dataset":
        """Parse a serialized dataset."""
        try:
            doc: Any = yaml.safe_load(content)
        except yaml.YAMLError as err:
            raise InputException(f"Invalid dataset yaml: {err}") from err
        if not isinstance(doc, dict):
            raise InputException(f"Invalid dataset, expected a mapping: {doc!r}")
        return cls.parse_doc(doc)


async def read_dataset(dataset_path: Path) -> Dataset:
    """Return the contents of a dataset file."""
    try:
        async with aiofiles.open(str(dataset_path)) as dataset_file:
            content = await dataset_file.read()
    except OSError as err:
        raise InputException(
            f"Unable to read dataset file {dataset_path}: {err}"
        ) from err
    if not content.strip():
        raise InputException(f"Dataset file {dataset_path} is empty")
    return Dataset.parse_yaml(content)


def seed_store(store: Store, records: list[Record]) -> int:
    """Add records to the store, skipping any whose id is already present.

    Returns the number of records added.
    """
    added = 0
    for record in records:
        try:
            store.add(record)
        except DuplicateId as err:
            _LOGGER.debug("Skipping seed record: %s", err)
            continue
        added += 1
    _LOGGER.debug("Seeded store with %d of %d records", added, len(records))
    return added


async def load_store(
    dataset_path: Path | None = None,
    empty: bool = False,
    config: StoreConfig | None = None,
) -> InMemoryStore:
    """Create a store seeded from a dataset file or the default dataset."""
    store = InMemoryStore(config)
    if empty:
        return store
    dataset = await read_dataset(dataset_path or DEFAULT_DATASET_PATH)
    seed_store(store, dataset.customers)
    return store
