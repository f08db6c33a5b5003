from dslab.trees.avl import AVLTree
from dslab.trees.bst import BinarySearchTree
from dslab.trees.dot import (
    avl_export_to_dot,
    bst_export_to_dot,
    node_dot_lines,
    write_dot_graph,
)


def test_leaf_lines():
    node = BinarySearchTree([5]).root
    assert node_dot_lines(node) == [
        "5 -> null5 [style=invis];",
        "null5[style=invis];",
        "5 -> null5 [style=invis];",
        "null5[style=invis];",
    ]


def test_negative_leaf_uses_underscore_name():
    node = BinarySearchTree([-3]).root
    lines = node_dot_lines(node)
    assert lines[0] == "-3 -> null_3 [style=invis];"
    assert lines[1] == "null_3[style=invis];"


def test_node_with_children():
    node = BinarySearchTree([2, 1, 3]).root
    assert node_dot_lines(node) == ["2 -> 1;", "2 -> 3;"]


def test_bst_export_structure():
    text = bst_export_to_dot(BinarySearchTree([2, 1, 3]))
    assert text.startswith("digraph BST {\n")
    assert text.endswith("}\n")
    body = text.splitlines()[1:-1]
    assert body[:2] == ["1 -> null1 [style=invis];", "null1[style=invis];"]
    assert "2 -> 1;" in body
    assert "2 -> 3;" in body


def test_avl_export_visits_root_first():
    text = avl_export_to_dot(AVLTree([1, 2, 3]))
    lines = text.splitlines()
    assert lines[0] == "digraph AVL {"
    assert lines[1] == "2 -> 1;"
    assert lines[2] == "2 -> 3;"


def test_empty_tree_export():
    assert bst_export_to_dot(BinarySearchTree(), "T") == "digraph T {\n}\n"


def test_write_round_trip(tmp_path):
    text = avl_export_to_dot(AVLTree([4, 2, 6]))
    path = write_dot_graph(text, tmp_path / "graph.gv")
    assert path.read_text(encoding="utf-8") == text