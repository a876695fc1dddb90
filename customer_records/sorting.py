"""Exchange sort used to order store snapshots."""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

__all__ = ["exchange_sort"]

T = TypeVar("T")


def exchange_sort(
    items: Iterable[T],
    key: Callable[[T], Any],
    ascending: bool = True,
) -> list[T]:
    """Return a new list of items ordered by key using adjacent exchanges.

    Each pass compares neighbouring items and swaps them only when they are
    strictly out of order, so items with equal keys keep their input order in
    both directions. Passes stop early once nothing was swapped.
    """
    result = list(items)
    keys = [key(item) for item in result]
    end = len(result) - 1
    while end > 0:
        last_swap = 0
        for i in range(end):
            left, right = keys[i], keys[i + 1]
            if (left > right) if ascending else (left < right):
                keys[i], keys[i + 1] = right, left
                result[i], result[i + 1] = result[i + 1], result[i]
                last_swap = i
        end = last_swap
    return result
