"""Configuration objects for customer-records."""

from dataclasses import dataclass

DEFAULT_CAPACITY = 500
DEFAULT_ADDRESS_WIDTH = 30


@dataclass
class StoreConfig:
    """Configuration for the record store."""

    capacity: int = DEFAULT_CAPACITY


@dataclass
class DisplayConfig:
    """Configuration for rendering records on the console."""

    address_width: int = DEFAULT_ADDRESS_WIDTH
