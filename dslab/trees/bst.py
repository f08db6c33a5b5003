"""Unbalanced binary search tree of distinct integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Protocol

ORDERS = ("pre", "in", "post")


class _TreeNode(Protocol):
    num: int
    left: _TreeNode | None
    right: _TreeNode | None


@dataclass(eq=False)
class BSTNode:
    """A node of the binary search tree."""

    num: int
    left: BSTNode | None = None
    right: BSTNode | None = None


def _walk(root: _TreeNode | None, order: str) -> Iterator[_TreeNode]:
    """Yield the nodes under root in pre-, in- or post-order, without recursion."""
    if order not in ORDERS:
        raise ValueError(f"unknown traversal order: {order!r}")
    if root is None:
        return
    if order == "pre":
        stack = [root]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
    elif order == "in":
        stack: list[_TreeNode] = []
        node = root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right
    else:
        reversed_order: list[_TreeNode] = []
        stack = [root]
        while stack:
            node = stack.pop()
            reversed_order.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_order)


def _search(root: _TreeNode | None, num: int) -> tuple[_TreeNode | None, int]:
    comparisons = 0
    node = root
    while node is not None:
        comparisons += 1
        if node.num == num:
            return node, comparisons
        node = node.right if num > node.num else node.left
    return None, comparisons


def _format(nodes: Iterable[_TreeNode]) -> str:
    return "".join(f"{node.num} " for node in nodes)


class BinarySearchTree:
    """Binary search tree; adding a value that is already present does nothing."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: BSTNode | None = None
        for value in values:
            self.add(value)

    def add(self, num: int) -> None:
        """Insert num unless it is already in the tree."""
        if self.root is None:
            self.root = BSTNode(num)
            return
        node = self.root
        while True:
            if num > node.num:
                if node.right is None:
                    node.right = BSTNode(num)
                    return
                node = node.right
            elif num < node.num:
                if node.left is None:
                    node.left = BSTNode(num)
                    return
                node = node.left
            else:
                return

    def search(self, num: int) -> tuple[BSTNode | None, int]:
        """Return the node holding num (or None) and the number of comparisons."""
        return _search(self.root, num)

    def delete(self, num: int) -> None:
        """Remove num if present; a node with two children takes its predecessor."""
        parent: BSTNode | None = None
        node = self.root
        while node is not None and node.num != num:
            parent = node
            node = node.right if num > node.num else node.left
        if node is None:
            return

        if node.left is not None and node.right is not None:
            pred_parent = node
            pred = node.left
            while pred.right is not None:
                pred_parent = pred
                pred = pred.right
            node.num = pred.num
            if pred_parent is node:
                pred_parent.left = pred.left
            else:
                pred_parent.right = pred.left
            return

        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def traverse(self, order: str = "in") -> Iterator[BSTNode]:
        """Yield nodes in "pre", "in" or "post" order."""
        return _walk(self.root, order)

    def __iter__(self) -> Iterator[int]:
        return (node.num for node in self.traverse("in"))

    def __bool__(self) -> bool:
        return self.root is not None

    def format(self, order: str = "in") -> str:
        """Values in the given order, each followed by a space."""
        return _format(self.traverse(order))