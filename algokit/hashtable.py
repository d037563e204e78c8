"""Separate-chaining hash table mapping integer keys to string values."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass

DEFAULT_CAPACITY = 10


@dataclass
class _Entry:
    key: int
    value: str


class HashTable:
    """A fixed-size table of buckets, each a chain of entries.

    New keys go to the front of their bucket's chain. Iteration visits the
    buckets in index order and each chain from front to back.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            capacity = DEFAULT_CAPACITY
        self.capacity = capacity
        self._buckets: list[list[_Entry]] = [[] for _ in range(capacity)]

    def _bucket(self, key: int) -> list[_Entry]:
        return self._buckets[key % self.capacity]

    def _iter_entries(self) -> Iterator[_Entry]:
        for bucket in self._buckets:
            yield from bucket

    def put(self, key: int, value: str) -> None:
        """Store ``value`` under ``key``, replacing any value already there."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry.key == key:
                entry.value = value
                return
        bucket.insert(0, _Entry(key, value))

    def get(self, key: int) -> str | None:
        """Return the value stored under ``key``, or None if there is none."""
        for entry in self._bucket(key):
            if entry.key == key:
                return entry.value
        return None

    def contains_key(self, key: int) -> bool:
        """Return True when ``key`` is present."""
        return self.get(key) is not None

    def contains_value(self, value: str | None) -> bool:
        """Return True when some key maps to ``value``."""
        if value is None:
            return False
        return any(entry.value == value for entry in self._iter_entries())

    def remove(self, key: int) -> None:
        """Delete the entry for ``key``; a missing key is ignored."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[position]
                return

    def keys(self) -> list[int]:
        """Return all keys in iteration order."""
        return [entry.key for entry in self._iter_entries()]

    def entries(self) -> list[tuple[int, str]]:
        """Return all ``(key, value)`` pairs in iteration order."""
        return [(entry.key, entry.value) for entry in self._iter_entries()]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def render_entries(self) -> str:
        """Return one line per non-empty bucket listing its ``key = value`` pairs."""
        lines = ["HashTable: "]
        for index, bucket in enumerate(self._buckets):
            if bucket:
                body = "".join(f"{entry.key} = {entry.value}" for entry in bucket)
                lines.append(f"Bucket[{index}] {body}")
        return "\n".join(lines)

    def render_keys(self) -> str:
        """Return every key on a single line, each followed by a space."""
        body = "".join(f"{key} " for key in self.keys())
        return f"Keys: \n{body}"

    def most_frequent_value(self) -> str | None:
        """Return the value held by the most keys, the first seen winning ties.

        Returns None for an empty table.
        """
        counts = Counter(entry.value for entry in self._iter_entries())
        best: str | None = None
        best_count = 0
        for entry in self._iter_entries():
            if counts[entry.value] > best_count:
                best_count = counts[entry.value]
                best = entry.value
        return best

    def pairs_with_diff(self, k: int) -> list[tuple[int, int]]:
        """Return ``(x, x + k)`` for every key ``x`` whose partner ``x + k`` is also a key."""
        return [(key, key + k) for key in self.keys() if self.contains_key(key + k)]

    def render_pairs_with_diff(self, k: int) -> str:
        """Return the pairs found by :meth:`pairs_with_diff` as text."""
        body = "".join(f"({x}:{y})" for x, y in self.pairs_with_diff(k))
        return f"Pairs with different {k}{body}"