"""Tests for the sorting library."""

import random

import pytest

from customer_records.sorting import exchange_sort


def test_empty() -> None:
    """Test sorting nothing."""
    assert exchange_sort([], key=lambda x: x) == []


def test_single() -> None:
    """Test sorting a single item."""
    assert exchange_sort([3], key=lambda x: x) == [3]


@pytest.mark.parametrize("ascending", [True, False])
def test_random_values(ascending: bool) -> None:
    """Test the result matches the builtin sort."""
    values = random.Random(1234).sample(range(1000), 100)
    assert exchange_sort(values, key=lambda x: x, ascending=ascending) == sorted(
        values, reverse=not ascending
    )


def test_input_is_not_modified() -> None:
    """Test the input is copied rather than sorted in place."""
    values = [3, 1, 2]
    assert exchange_sort(values, key=lambda x: x) == [1, 2, 3]
    assert values == [3, 1, 2]


def test_equal_keys_keep_input_order() -> None:
    """Test items with equal keys keep their input order in both directions."""
    items = [("b", 1), ("a", 2), ("b", 3), ("a", 4), ("c", 5)]
    assert exchange_sort(items, key=lambda x: x[0]) == [
        ("a", 2),
        ("a", 4),
        ("b", 1),
        ("b", 3),
        ("c", 5),
    ]
    assert exchange_sort(items, key=lambda x: x[0], ascending=False) == [
        ("c", 5),
        ("b", 1),
        ("b", 3),
        ("a", 2),
        ("a", 4),
    ]
