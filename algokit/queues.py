"""FIFO queues: a fixed-capacity circular buffer and an unbounded linked queue."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

DEFAULT_CAPACITY = 100


class QueueFullError(Exception):
    """Raised when enqueuing onto a queue that has no room left."""


class QueueEmptyError(Exception):
    """Raised when reading from or dequeuing an empty queue."""


class CircularQueue:
    """A bounded FIFO queue stored in a ring of fixed size."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._slots = [0] * capacity
        self._front = 0
        self._size = 0

    def _slot(self, offset: int) -> int:
        return (self._front + offset) % self._capacity

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return self._size == 0

    def is_full(self) -> bool:
        """Return True when every slot is in use."""
        return self._size == self._capacity

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise QueueFullError("Enqueue Failed")
        self._slots[self._slot(self._size)] = value
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("Dequeue Failed")
        value = self._slots[self._front]
        self._front = self._slot(1)
        self._size -= 1
        return value

    def peek(self) -> int:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise QueueEmptyError("Queue is Empty")
        return self._slots[self._front]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        for offset in range(self._size):
            yield self._slots[self._slot(offset)]

    def render(self) -> str:
        """Return the queue as text from front to rear."""
        if self.is_empty():
            return "Queue is Empty"
        body = "".join(f"{value} " for value in self)
        return f"Queue (front -> rear): [ {body}]"

    def reverse_prefix(self, k: int) -> None:
        """Reverse the order of the first ``k`` values, leaving the rest in place."""
        if self.is_empty():
            raise QueueEmptyError("Queue is Empty")
        if not 0 <= k <= self._size:
            raise ValueError(f"k must be between 0 and {self._size}")
        left, right = 0, k - 1
        while left < right:
            a, b = self._slot(left), self._slot(right)
            self._slots[a], self._slots[b] = self._slots[b], self._slots[a]
            left += 1
            right -= 1


@dataclass
class _Node:
    value: int
    next: _Node | None = None


class LinkedQueue:
    """An unbounded FIFO queue built from linked nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return self._front is None

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if self._front is None:
            raise QueueEmptyError("Queue is Empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def peek(self) -> int:
        """Return the value at the front without removing it."""
        if self._front is None:
            raise QueueEmptyError("Queue is Empty")
        return self._front.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        current = self._front
        while current is not None:
            yield current.value
            current = current.next

    def render(self) -> str:
        """Return the queue as text from front to rear."""
        body = "".join(f"{value} -> " for value in self)
        return f"Front -> Rear\n[ {body}NULL ]"