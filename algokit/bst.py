"""Unbalanced binary search tree of unique integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """A binary search tree that rejects duplicate values."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Insert ``value``; return False if it was already present."""
        if self._root is None:
            self._root = _Node(value)
            return True
        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = _Node(value)
                    return True
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = _Node(value)
                    return True
                current = current.right
            else:
                return False

    def __contains__(self, value: object) -> bool:
        current = self._root
        while current is not None:
            if value == current.value:
                return True
            current = current.left if value < current.value else current.right
        return False

    def _walk_inorder(self) -> Iterator[int]:
        pending: list[_Node] = []
        current = self._root
        while pending or current is not None:
            while current is not None:
                pending.append(current)
                current = current.left
            node = pending.pop()
            yield node.value
            current = node.right

    def __iter__(self) -> Iterator[int]:
        """Yield the values in ascending order."""
        return self._walk_inorder()

    def inorder(self) -> list[int]:
        """Return the values in left, node, right order."""
        return list(self._walk_inorder())

    def preorder(self) -> list[int]:
        """Return the values in node, left, right order."""
        result: list[int] = []
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            result.append(node.value)
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)
        return result

    def postorder(self) -> list[int]:
        """Return the values in left, right, node order."""
        result: list[int] = []
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            result.append(node.value)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        result.reverse()
        return result

    def level_order(self) -> list[int]:
        """Return the values level by level, left to right."""
        result: list[int] = []
        pending = deque([self._root] if self._root is not None else [])
        while pending:
            node = pending.popleft()
            result.append(node.value)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return result

    def render_inorder(self) -> str:
        """Return the ascending values one per line, followed by an end marker."""
        if self._root is None:
            return "Tree Empty"
        return "".join(f"{value}\n" for value in self) + "End of Tree"

    def size(self) -> int:
        """Return the number of nodes."""
        return sum(1 for _ in self)

    def count_leaves(self) -> int:
        """Return the number of nodes without children."""
        count = 0
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            if node.left is None and node.right is None:
                count += 1
            pending.extend(child for child in (node.left, node.right) if child is not None)
        return count

    def maximum(self) -> int:
        """Return the largest value, raising ValueError for an empty tree."""
        if self._root is None:
            raise ValueError("tree is empty")
        current = self._root
        while current.right is not None:
            current = current.right
        return current.value