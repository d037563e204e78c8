"""A LIFO stack built from two bounded FIFO queues."""

from __future__ import annotations

from collections.abc import Iterator

from algokit.queues import CircularQueue, DEFAULT_CAPACITY
from algokit.stacks import StackOverflowError, StackUnderflowError


class QueueStack:
    """A stack whose push costs O(n) so that pop and peek are O(1).

    The active queue always keeps the most recently pushed value at its front.
    """

    def __init__(self) -> None:
        self._active = CircularQueue(DEFAULT_CAPACITY)
        self._spare = CircularQueue(DEFAULT_CAPACITY)

    def push(self, value: int) -> None:
        """Push ``value`` on top of the stack."""
        if self._active.is_full():
            raise StackOverflowError("Stack overflow")
        if self._active.is_empty():
            self._active.enqueue(value)
            return
        self._spare.enqueue(value)
        while not self._active.is_empty():
            self._spare.enqueue(self._active.dequeue())
        self._active, self._spare = self._spare, self._active

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._active.is_empty():
            raise StackUnderflowError("Stack is Empty")
        return self._active.dequeue()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if self._active.is_empty():
            raise StackUnderflowError("Stack is Empty")
        return self._active.peek()

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return self._active.is_empty()

    def __len__(self) -> int:
        return len(self._active)

    def __iter__(self) -> Iterator[int]:
        """Yield the values from top to bottom."""
        return iter(self._active)

    def render(self) -> str:
        """Return the stack as text from top to bottom."""
        if self.is_empty():
            return "Stack is Empty"
        body = "".join(f"{value} " for value in self)
        return f"Stack (top -> bottom): \n[ {body}]"