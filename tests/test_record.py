"""Tests for the record library."""

from typing import Any

import pytest

from customer_records.exceptions import (
    InvalidAddress,
    InvalidCode,
    InvalidId,
    InvalidName,
    ValidationError,
)
from customer_records.record import Record


def test_create_record() -> None:
    """Test creating a record with valid fields."""
    record = Record(101, "Alice Johnson", "AJ101", "123 Maple St.")
    assert record.id == 101
    assert record.name == "Alice Johnson"
    assert record.code == "AJ101"
    assert record.address == "123 Maple St."


def test_create_record_normalizes_fields() -> None:
    """Test names and addresses are trimmed and blank addresses are absent."""
    record = Record(7, "  Bob Smith\t", "bs7", "  456 Oak Ave.  ")
    assert record.name == "Bob Smith"
    assert record.address == "456 Oak Ave."

    assert Record(8, "Carol", "C8", "   ").address is None
    assert Record(9, "Carol", "C9", "").address is None
    assert Record(10, "Carol", "C10").address is None


@pytest.mark.parametrize(
    ("fields", "expected"),
    [
        ((-1, "", "12345", "x" * 201), InvalidId),
        ((0, "Alice", "AJ101", None), InvalidId),
        ((True, "Alice", "AJ101", None), InvalidId),
        (("101", "Alice", "AJ101", None), InvalidId),
        ((1, "", "12345", "x" * 201), InvalidName),
        ((1, "   ", "AJ101", None), InvalidName),
        ((1, "x" * 51, "AJ101", None), InvalidName),
        ((1, "Alice", "12345", "x" * 201), InvalidCode),
        ((1, "Alice", "ABCDE", None), InvalidCode),
        ((1, "Alice", "", None), InvalidCode),
        ((1, "Alice", "AB123456789", None), InvalidCode),
        ((1, "Alice", "AJ-101", None), InvalidCode),
        ((1, "Alice", "AJ 101", None), InvalidCode),
        ((1, "Alice", "ÄJ101", None), InvalidCode),
        ((1, "Alice", "AJ١٠١", None), InvalidCode),
        ((1, "Alice", "AJ101", "x" * 201), InvalidAddress),
        ((1, "Alice", "AJ101", 42), InvalidAddress),
    ],
    ids=[
        "negative-id-first",
        "zero-id",
        "bool-id",
        "str-id",
        "empty-name-before-code",
        "blank-name",
        "long-name",
        "digits-only-code-before-address",
        "letters-only-code",
        "empty-code",
        "long-code",
        "punctuation-code",
        "space-code",
        "non-ascii-letter-code",
        "non-ascii-digit-code",
        "long-address",
        "non-text-address",
    ],
)
def test_create_invalid_record(
    fields: tuple[Any, Any, Any, Any], expected: type[ValidationError]
) -> None:
    """Test the first invalid field is reported in id, name, code, address order."""
    with pytest.raises(expected) as exc_info:
        Record(*fields)
    assert exc_info.type is expected
    assert exc_info.value.field == expected.field


@pytest.mark.parametrize(
    ("name", "code", "address"),
    [
        ("x" * 50, "A1", None),
        ("  " + "x" * 50 + "  ", "A1", None),
        ("Alice", "1A", None),
        ("Alice", "AB12345678", None),
        ("Alice", "a1", "y" * 200),
    ],
    ids=["max-name", "max-name-padded", "digit-first", "max-code", "max-address"],
)
def test_create_boundary_values(name: str, code: str, address: str | None) -> None:
    """Test values at the limits of each rule are accepted."""
    record = Record(1, name, code, address)
    assert record.name == name.strip()
    assert record.code == code
    assert record.address == address


def test_set_name() -> None:
    """Test replacing the name of a record."""
    record = Record(1, "Alice", "A1")
    record.set_name("  Alicia ")
    assert record.name == "Alicia"

    with pytest.raises(InvalidName):
        record.set_name("")
    assert record.name == "Alicia"

    with pytest.raises(InvalidName):
        record.name = "x" * 51
    assert record.name == "Alicia"


def test_set_code() -> None:
    """Test replacing the code of a record."""
    record = Record(1, "Alice", "A1")
    record.set_code("B2")
    assert record.code == "B2"

    with pytest.raises(InvalidCode):
        record.set_code("12345")
    assert record.code == "B2"


def test_set_address() -> None:
    """Test replacing the address of a record."""
    record = Record(1, "Alice", "A1", "1 Main St.")
    record.set_address("2 Main St. ")
    assert record.address == "2 Main St."

    with pytest.raises(InvalidAddress):
        record.set_address("z" * 201)
    assert record.address == "2 Main St."

    record.set_address("  ")
    assert record.address is None


def test_id_cannot_change() -> None:
    """Test the identity of a record is fixed once created."""
    record = Record(1, "Alice", "A1")
    with pytest.raises(AttributeError, match="Customer id 1 cannot be changed"):
        record.id = 2
    assert record.id == 1


def test_records_are_equal_by_value() -> None:
    """Test records compare by their field values."""
    assert Record(1, "Alice", "A1", " x ") == Record(1, " Alice", "A1", "x")
    assert Record(1, "Alice", "A1") != Record(2, "Alice", "A1")


def test_to_dict_omits_missing_address() -> None:
    """Test serializing a record."""
    assert Record(1, "Alice", "A1").to_dict() == {
        "id": 1,
        "name": "Alice",
        "code": "A1",
    }
    assert Record(2, "Bob", "B2", "Oak Ave.").to_dict() == {
        "id": 2,
        "name": "Bob",
        "code": "B2",
        "address": "Oak Ave.",
    }


def test_parse_doc() -> None:
    """Test parsing a record from a mapping."""
    record = Record.parse_doc({"id": 5, "name": " Eve ", "code": "E5"})
    assert record == Record(5, "Eve", "E5")

    with pytest.raises(InvalidName):
        Record.parse_doc({"id": 5, "code": "E5"})


@pytest.mark.parametrize(
    ("term", "expected"),
    [
        ("alice", True),
        ("JOHN", True),
        ("aj1", True),
        ("101", True),
        ("bob", False),
    ],
)
def test_matches(term: str, expected: bool) -> None:
    """Test matching search terms against the name and code."""
    record = Record(101, "Alice Johnson", "AJ101")
    assert record.matches(term) is expected
