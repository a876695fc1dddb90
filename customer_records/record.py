"""Representation of a single customer record.

A record is a small value object that validates each field when it is
constructed and again whenever a field is assigned. An assignment that fails
validation raises a `ValidationError` and leaves the previous value in place,
so a record is never observable in an invalid state.

The id of a record is its identity within a store and may not change once
the record is created.
"""

from dataclasses import dataclass
import re
from typing import Any, Callable

from mashumaro import DataClassDictMixin
from mashumaro.config import BaseConfig

from .exceptions import (
    InvalidAddress,
    InvalidCode,
    InvalidId,
    InvalidName,
)

__all__ = [
    "Record",
    "validate_id",
    "validate_name",
    "validate_code",
    "validate_address",
    "MAX_NAME_LENGTH",
    "MAX_CODE_LENGTH",
    "MAX_ADDRESS_LENGTH",
]

MAX_NAME_LENGTH = 50
MAX_CODE_LENGTH = 10
MAX_ADDRESS_LENGTH = 200

# At least one letter and one digit, letters and digits only.
CODE_PATTERN = re.compile(
    rf"(?=.*[A-Za-z])(?=.*\d)[A-Za-z\d]{{1,{MAX_CODE_LENGTH}}}", re.ASCII
)


def validate_id(value: Any) -> int:
    """Return the id if it is a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidId(f"Customer id must be a positive integer: {value!r}")
    return value


def validate_name(value: Any) -> str:
    """Return the trimmed name if it is non-empty and short enough."""
    if not isinstance(value, str) or not (name := value.strip()):
        raise InvalidName("Name is required")
    if len(name) > MAX_NAME_LENGTH:
        raise InvalidName(
            f"Name should not exceed {MAX_NAME_LENGTH} characters (was {len(name)})"
        )
    return name


def validate_code(value: Any) -> str:
    """Return the code if it is a short mix of ASCII letters and digits."""
    if not isinstance(value, str) or not CODE_PATTERN.fullmatch(value):
        raise InvalidCode(
            f"Code must be 1-{MAX_CODE_LENGTH} letters and digits with at least "
            f"one of each: {value!r}"
        )
    return value


def validate_address(value: Any) -> str | None:
    """Return the trimmed address, or None when it is blank."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidAddress(f"Address must be text: {value!r}")
    if not (address := value.strip()):
        return None
    if len(address) > MAX_ADDRESS_LENGTH:
        raise InvalidAddress(
            f"Address should not exceed {MAX_ADDRESS_LENGTH} characters "
            f"(was {len(address)})"
        )
    return address


_VALIDATORS: dict[str, Callable[[Any], Any]] = {
    "id": validate_id,
    "name": validate_name,
    "code": validate_code,
    "address": validate_address,
}


@dataclass
class Record(DataClassDictMixin):
    """A customer record held by a store."""

    id: int
    """The unique positive identifier of the customer."""

    name: str
    """The customer name, trimmed."""

    code: str
    """A short alphanumeric customer code."""

    address: str | None = None
    """An optional postal address."""

    def __setattr__(self, key: str, value: Any) -> None:
        """Validate and normalize each field as it is assigned.

        Fields are assigned by `__init__` in declaration order, which fixes the
        order in which a new record reports the first invalid field.
        """
        if (validator := _VALIDATORS.get(key)) is None:
            super().__setattr__(key, value)
            return
        if key == "id" and "id" in self.__dict__:
            raise AttributeError(f"Customer id {self.id} cannot be changed")
        super().__setattr__(key, validator(value))

    def set_name(self, value: str) -> None:
        """Replace the name, leaving the record unchanged if invalid."""
        self.name = value

    def set_code(self, value: str) -> None:
        """Replace the code, leaving the record unchanged if invalid."""
        self.code = value

    def set_address(self, value: str | None) -> None:
        """Replace the address, leaving the record unchanged if invalid."""
        self.address = value

    @classmethod
    def parse_doc(cls, doc: dict[str, Any]) -> "Record":
        """Parse a Record from a mapping such as a dataset entry."""
        return cls(
            id=doc.get("id"),  # type: ignore[arg-type]
            name=doc.get("name"),  # type: ignore[arg-type]
            code=doc.get("code"),  # type: ignore[arg-type]
            address=doc.get("address"),
        )

    def matches(self, term: str) -> bool:
        """Return True if the term is a case-insensitive substring of name or code."""
        needle = term.casefold()
        return needle in self.name.casefold() or needle in self.code.casefold()

    class Config(BaseConfig):
        omit_none = True
