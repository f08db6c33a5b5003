"""Export of search trees in DOT notation."""

from __future__ import annotations

from pathlib import Path

from dslab.trees.avl import AVLTree
from dslab.trees.bst import BinarySearchTree


def _null_lines(num: int) -> list[str]:
    name = f"null_{-num}" if num < 0 else f"null{num}"
    return [f"{num} -> {name} [style=invis];", f"{name}[style=invis];"]


def node_dot_lines(node) -> list[str]:
    """DOT lines for the edges of one node; a missing child gets an invisible stub."""
    lines: list[str] = []
    for child in (node.left, node.right):
        if child is not None:
            lines.append(f"{node.num} -> {child.num};")
        else:
            lines.extend(_null_lines(node.num))
    return lines


def _export(nodes, name: str) -> str:
    lines = [f"digraph {name} {{"]
    for node in nodes:
        lines.extend(node_dot_lines(node))
    lines.append("}")
    return "\n".join(lines) + "\n"


def bst_export_to_dot(tree: BinarySearchTree, name: str = "BST") -> str:
    """The binary search tree as a DOT digraph, nodes visited in order."""
    return _export(tree.traverse("in"), name)


def avl_export_to_dot(tree: AVLTree, name: str = "AVL") -> str:
    """The AVL tree as a DOT digraph, nodes visited in pre-order."""
    return _export(tree.traverse("pre"), name)


def write_dot_graph(text: str, path="graph.gv") -> Path:
    """Write DOT text to path and return the path."""
    target = Path(path)
    target.write_text(text, encoding="utf-8")
    return target