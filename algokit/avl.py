"""Self-balancing AVL tree of unique integer keys."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class AVLNode:
    """A tree node holding a key, its children and the height of its subtree."""

    key: int
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def height(node: AVLNode | None) -> int:
    """Return the height of ``node``'s subtree, 0 for an empty one."""
    return 0 if node is None else node.height


def balance_factor(node: AVLNode | None) -> int:
    """Return left height minus right height, 0 for an empty subtree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = max(height(node.left), height(node.right)) + 1


def rotate_right(node: AVLNode) -> AVLNode:
    """Rotate ``node`` right and return the new subtree root (its former left child)."""
    pivot = node.left
    if pivot is None:
        raise ValueError("cannot rotate right without a left child")
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def rotate_left(node: AVLNode) -> AVLNode:
    """Rotate ``node`` left and return the new subtree root (its former right child)."""
    pivot = node.right
    if pivot is None:
        raise ValueError("cannot rotate left without a right child")
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def insert(root: AVLNode | None, key: int) -> AVLNode:
    """Insert ``key`` below ``root``, rebalancing, and return the new subtree root.

    A key that is already present leaves the tree unchanged.
    """
    if root is None:
        return AVLNode(key)
    if key < root.key:
        root.left = insert(root.left, key)
    elif key > root.key:
        root.right = insert(root.right, key)
    else:
        return root

    _update_height(root)
    balance = balance_factor(root)

    if balance > 1 and root.left is not None:
        if key > root.left.key:
            root.left = rotate_left(root.left)
        return rotate_right(root)
    if balance < -1 and root.right is not None:
        if key < root.right.key:
            root.right = rotate_right(root.right)
        return rotate_left(root)
    return root


def _inorder(node: AVLNode | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.key
        yield from _inorder(node.right)


def _preorder(node: AVLNode | None) -> Iterator[int]:
    if node is not None:
        yield node.key
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _render_lines(node: AVLNode | None, level: int) -> Iterator[str]:
    if node is not None:
        yield from _render_lines(node.right, level + 1)
        yield f"{'    ' * level}{node.key} (h = {node.height},bf: {balance_factor(node)})"
        yield from _render_lines(node.left, level + 1)


class AVLTree:
    """An AVL tree holding unique integer keys."""

    def __init__(self) -> None:
        self.root: AVLNode | None = None

    def insert(self, key: int) -> None:
        """Insert ``key``, keeping the tree balanced; duplicates are ignored."""
        self.root = insert(self.root, key)

    def inorder(self) -> list[int]:
        """Return the keys in ascending order."""
        return list(_inorder(self.root))

    def preorder(self) -> list[int]:
        """Return the keys in node, left, right order."""
        return list(_preorder(self.root))

    def render(self) -> str:
        """Return a sideways drawing of the tree, right subtree on top."""
        return "\n".join(_render_lines(self.root, 0))