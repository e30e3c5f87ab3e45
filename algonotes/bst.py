"""Unbalanced binary search tree with ordered traversal and neighbours."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """A tree node holding ``data`` and links to its children and parent."""

    data: Any
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)
    parent: Node | None = field(default=None, repr=False)


_ROOT: Any = object()


class BinarySearchTree:
    """A binary search tree of distinct, mutually comparable values."""

    def __init__(self) -> None:
        self.root: Node | None = None

    def insert(self, value: Any) -> Node:
        """Insert ``value`` and return its node.

        A value already in the tree is not added again; its node is returned.
        """
        if self.root is None:
            self.root = Node(value)
            return self.root
        node = self.root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = Node(value, parent=node)
                    return node.left
                node = node.left
            elif node.data < value:
                if node.right is None:
                    node.right = Node(value, parent=node)
                    return node.right
                node = node.right
            else:
                return node

    def in_order_walk(self, node: Node | None = _ROOT) -> Iterator[Any]:
        """Yield the values of the subtree at ``node`` (the whole tree by default) in order."""
        current = self.root if node is _ROOT else node
        stack: list[Node] = []
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.data
            current = current.right

    def search(self, value: Any, node: Node | None = _ROOT) -> Node | None:
        """Return the node holding ``value`` in the subtree at ``node``, or None."""
        current = self.root if node is _ROOT else node
        while current is not None and current.data != value:
            current = current.left if value < current.data else current.right
        return current

    def minimum(self) -> Node | None:
        """Return the node with the smallest value, or None for an empty tree."""
        return _leftmost(self.root) if self.root is not None else None

    def maximum(self) -> Node | None:
        """Return the node with the largest value, or None for an empty tree."""
        return _rightmost(self.root) if self.root is not None else None

    @staticmethod
    def predecessor(node: Node | None) -> Node | None:
        """Return the node holding the next smaller value, or None."""
        if node is None:
            return None
        if node.left is not None:
            return _rightmost(node.left)
        child, parent = node, node.parent
        while parent is not None and parent.left is child:
            child, parent = parent, parent.parent
        return parent

    @staticmethod
    def successor(node: Node | None) -> Node | None:
        """Return the node holding the next larger value, or None."""
        if node is None:
            return None
        if node.right is not None:
            return _leftmost(node.right)
        child, parent = node, node.parent
        while parent is not None and parent.right is child:
            child, parent = parent, parent.parent
        return parent


def _leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node