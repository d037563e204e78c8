"""Array-backed stacks: two stacks sharing one buffer, and a stack tracking its minimum."""

from __future__ import annotations

DEFAULT_CAPACITY = 100


class StackOverflowError(Exception):
    """Raised when pushing onto a stack that has no room left."""


class StackUnderflowError(Exception):
    """Raised when reading from or popping an empty stack."""


def _format_values(values) -> str:
    return "".join(f"{value} " for value in values)


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be positive")


class TwoStack:
    """Two stacks that share a single fixed-size storage area.

    The first stack grows from the left end and the second from the right,
    so either may use whatever room the other leaves free.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._first: list[int] = []
        self._second: list[int] = []

    def is_first_empty(self) -> bool:
        """Return True when the first stack holds nothing."""
        return not self._first

    def is_second_empty(self) -> bool:
        """Return True when the second stack holds nothing."""
        return not self._second

    def is_full(self) -> bool:
        """Return True when the shared storage has no free slot."""
        return len(self._first) + len(self._second) == self._capacity

    def push_first(self, value: int) -> None:
        """Push ``value`` onto the first stack."""
        if self.is_full():
            raise StackOverflowError("Stack 1 overflow")
        self._first.append(value)

    def push_second(self, value: int) -> None:
        """Push ``value`` onto the second stack."""
        if self.is_full():
            raise StackOverflowError("Stack 2 overflow")
        self._second.append(value)

    def pop_first(self) -> int:
        """Remove and return the top of the first stack."""
        if not self._first:
            raise StackUnderflowError("Stack 1 underflow")
        return self._first.pop()

    def pop_second(self) -> int:
        """Remove and return the top of the second stack."""
        if not self._second:
            raise StackUnderflowError("Stack 2 underflow")
        return self._second.pop()

    def render(self) -> str:
        """Return both stacks as text, each listed from top to bottom."""
        return (
            f"Stack 1: {_format_values(reversed(self._first))}\n"
            f"Stack 2: {_format_values(reversed(self._second))}"
        )


class MinStack:
    """A bounded stack that reports its smallest value in constant time."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._values: list[int] = []
        self._minimums: list[int] = []

    def push(self, value: int) -> None:
        """Push ``value``, recording it as a minimum when it is not larger than the current one."""
        if len(self._values) == self._capacity:
            raise StackOverflowError("Stack overflow")
        self._values.append(value)
        if not self._minimums or value <= self._minimums[-1]:
            self._minimums.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._values:
            raise StackUnderflowError("Stack underflow")
        value = self._values.pop()
        if value == self._minimums[-1]:
            self._minimums.pop()
        return value

    def minimum(self) -> int:
        """Return the smallest value currently on the stack."""
        if not self._minimums:
            raise StackUnderflowError("Stack is empty")
        return self._minimums[-1]

    def __len__(self) -> int:
        return len(self._values)

    def render(self) -> str:
        """Return the stack as text from top to bottom."""
        if not self._values:
            return "Stack is empty"
        return f"Stack: {_format_values(reversed(self._values))}"

    def render_minimums(self) -> str:
        """Return the stack of recorded minimums as text from top to bottom."""
        if not self._minimums:
            return "Min Stack is empty"
        return f"Min Stack: {_format_values(reversed(self._minimums))}"