"""Small problems solved with the chaining hash table."""

from __future__ import annotations

from collections.abc import Sequence

from algokit.hashtable import HashTable


def most_frequent(values: Sequence[int]) -> int:
    """Return the value occurring most often in ``values``.

    Counts are kept in a hash table of ``2 * len(values)`` buckets; among equally
    frequent values the one met first in the table's iteration order wins.
    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("values is empty")
    table = HashTable(len(values) * 2)
    for value in values:
        current = table.get(value)
        table.put(value, str(int(current) + 1) if current is not None else "1")

    best_key = values[0]
    best_count = 0
    for key, count_text in table.entries():
        count = int(count_text)
        if count > best_count:
            best_count = count
            best_key = key
    return best_key


def count_pairs_with_diff(values: Sequence[int], k: int) -> int:
    """Count the positions ``i`` for which ``values[i] + k`` also occurs in ``values``."""
    table = HashTable(len(values) * 2)
    for value in values:
        table.put(value, "1")
    return sum(1 for value in values if table.contains_key(value + k))


def two_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)``, ``i < j``, with ``values[i] + values[j] == target``.

    The first ``j`` that completes a pair is used, paired with the latest earlier
    index holding the complement. Returns None when no pair exists.
    """
    table = HashTable(len(values) * 2)
    for index, value in enumerate(values):
        seen_at = table.get(target - value)
        if seen_at is not None:
            return int(seen_at), index
        table.put(value, str(index))
    return None