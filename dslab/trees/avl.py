"""Self-balancing AVL tree of distinct integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from dslab.trees.bst import BinarySearchTree, _format, _search, _walk


@dataclass(eq=False)
class AVLNode:
    """A node of the AVL tree with the height of its subtree."""

    num: int
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def _height(node: AVLNode | None) -> int:
    return node.height if node is not None else 0


def _balance(node: AVLNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(tree: AVLNode) -> AVLNode:
    new_root = tree.left
    tree.left = new_root.right
    new_root.right = tree
    _update(tree)
    _update(new_root)
    return new_root


def _rotate_left(tree: AVLNode) -> AVLNode:
    new_root = tree.right
    tree.right = new_root.left
    new_root.left = tree
    _update(tree)
    _update(new_root)
    return new_root


def _insert(node: AVLNode | None, num: int) -> AVLNode:
    if node is None:
        return AVLNode(num)
    if num > node.num:
        node.right = _insert(node.right, num)
    elif num < node.num:
        node.left = _insert(node.left, num)
    else:
        return node

    _update(node)
    balance = _balance(node)
    if balance > 1 and num < node.left.num:
        return _rotate_right(node)
    if balance < -1 and num > node.right.num:
        return _rotate_left(node)
    if balance > 1 and num > node.left.num:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and num < node.right.num:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _remove(node: AVLNode | None, num: int) -> AVLNode | None:
    if node is None:
        return None
    if num < node.num:
        node.left = _remove(node.left, num)
    elif num > node.num:
        node.right = _remove(node.right, num)
    elif node.left is None or node.right is None:
        return node.left if node.left is not None else node.right
    else:
        pred = node.left
        while pred.right is not None:
            pred = pred.right
        node.num = pred.num
        node.left = _remove(node.left, pred.num)

    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """Height-balanced binary search tree; duplicates are ignored."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: AVLNode | None = None
        for value in values:
            self.add(value)

    @classmethod
    def from_bst(cls, bst: BinarySearchTree) -> AVLTree:
        """Build a balanced tree from the values of bst taken in pre-order."""
        if not bst:
            raise ValueError("the binary search tree is empty")
        return cls(node.num for node in bst.traverse("pre"))

    def add(self, num: int) -> None:
        """Insert num and rebalance."""
        self.root = _insert(self.root, num)

    def search(self, num: int) -> tuple[AVLNode | None, int]:
        """Return the node holding num (or None) and the number of comparisons."""
        return _search(self.root, num)

    def delete(self, num: int) -> None:
        """Remove num if present and rebalance."""
        self.root = _remove(self.root, num)

    def traverse(self, order: str = "in") -> Iterator[AVLNode]:
        """Yield nodes in "pre", "in" or "post" order."""
        return _walk(self.root, order)

    def __iter__(self) -> Iterator[int]:
        return (node.num for node in self.traverse("in"))

    def __bool__(self) -> bool:
        return self.root is not None

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self.root)

    def format(self, order: str = "in") -> str:
        """Values in the given order, each followed by a space."""
        return _format(self.traverse(order))