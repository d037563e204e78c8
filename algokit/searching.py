"""Linear and binary search, with a helper to time a search."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence

NOT_FOUND = -1


def linear_search(values: Sequence[int], target: int) -> int:
    """Return the index of the first ``target`` in ``values``, or -1 if absent."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return NOT_FOUND


def binary_search(values: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in the ascending ``values``, or -1 if absent."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if values[mid] == target:
            return mid
        if target < values[mid]:
            right = mid - 1
        else:
            left = mid + 1
    return NOT_FOUND


def timed_search(
    search: Callable[[Sequence[int], int], int],
    values: Sequence[int],
    target: int,
) -> tuple[int, float]:
    """Run ``search`` and return its result with the processor time it took in seconds."""
    start = time.process_time()
    result = search(values, target)
    elapsed = time.process_time() - start
    return result, elapsed