"""Common flags for actions that operate on a seeded store."""

from argparse import ArgumentParser
import logging
import pathlib
from typing import Any

from customer_records.dataset import load_store
from customer_records.store import InMemoryStore

_LOGGER = logging.getLogger(__name__)


def add_dataset_flags(args: ArgumentParser) -> None:
    """Add flags that choose the records a store is seeded with."""
    group = args.add_mutually_exclusive_group()
    group.add_argument(
        "--dataset",
        type=pathlib.Path,
        default=None,
        help="YAML file of customers to load instead of the default dataset",
    )
    group.add_argument(
        "--empty",
        action="store_true",
        default=False,
        help="Start with an empty store",
    )


async def build_store(
    dataset: pathlib.Path | None = None,
    empty: bool = False,
    **kwargs: Any,  # pylint: disable=unused-argument
) -> InMemoryStore:
    """Create the store for an action from the dataset flags."""
    store = await load_store(dataset_path=dataset, empty=empty)
    _LOGGER.debug("Loaded store with %d customers", store.count)
    return store
