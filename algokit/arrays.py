"""Basic operations on plain integer sequences."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence


def array_max(values: Sequence[int]) -> int:
    """Return the largest value, raising ValueError for an empty sequence."""
    if not values:
        raise ValueError("Array is empty")
    iterator = iter(values)
    largest = next(iterator)
    for value in iterator:
        if value > largest:
            largest = value
    return largest


def array_intersect(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return values present in both inputs, without duplicates, in the order of ``first``."""
    lookup = set(second)
    result: list[int] = []
    seen: set[int] = set()
    for value in first:
        if value in lookup and value not in seen:
            seen.add(value)
            result.append(value)
    return result


def array_reverse(values: MutableSequence[int]) -> None:
    """Reverse ``values`` in place by swapping from both ends inward."""
    left, right = 0, len(values) - 1
    while left < right:
        values[left], values[right] = values[right], values[left]
        left += 1
        right -= 1


def insert_at(values: MutableSequence[int], item: int, index: int) -> None:
    """Insert ``item`` at ``index``, shifting later values right.

    Raises IndexError when ``index`` is outside ``0..len(values)``.
    """
    if index < 0 or index > len(values):
        raise IndexError("Invalid index")
    values.insert(index, item)