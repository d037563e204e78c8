"""Singly linked list with head and tail references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    value: int
    next: _Node | None = None


class LinkedList:
    """A singly linked list supporting appends and in-place reversal."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        if self._head is None or self._head.next is None:
            return
        previous: _Node | None = None
        current = self._head
        self._tail = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def __iter__(self) -> Iterator[int]:
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """Return the list as text, e.g. ``"1 ->2 ->NULL"``."""
        return "".join(f"{value} ->" for value in self) + "NULL"