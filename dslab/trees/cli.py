"""Interactive menu for search trees, hash tables and searching a file of numbers."""

from __future__ import annotations

import argparse
import os
import sys
from collections import deque
from typing import TextIO

from dslab.trees.avl import AVLTree
from dslab.trees.bst import BinarySearchTree
from dslab.trees.dot import avl_export_to_dot, bst_export_to_dot, write_dot_graph
from dslab.trees.efficiency import (
    SearchTiming,
    collision_comparison,
    format_collision_table,
    format_memory_table,
    format_time_table,
    measure_memory,
    measure_time,
    search_with_time,
)
from dslab.trees.hashtable import HashTable
from dslab.trees.numbers_file import file_len, file_search, read_numbers

DEFAULT_MAX_COMP = 4
_DOT_FILE = "graph.gv"
_WRONG_INPUT = "Wrong input!\n"


class _TokenReader:
    """Whitespace-separated tokens read lazily, line by line, from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def next_token(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending.extend(line.split())
        return self._pending.popleft()

    def discard_line(self) -> None:
        self._pending.clear()

    def next_int(self) -> int | None:
        """Next token as an int, None if it is not one; EOFError at the end."""
        token = self.next_token()
        try:
            return int(token)
        except ValueError:
            return None


def read_file_to_bst(stream: TextIO) -> BinarySearchTree:
    """Build a binary search tree from the integers of stream.

    Raises ValueError when the stream holds no leading integers.
    """
    numbers = read_numbers(stream)
    if not numbers:
        raise ValueError("no numbers in the file")
    return BinarySearchTree(numbers)


def welcome_text() -> str:
    """The greeting shown when the program starts."""
    return "\n".join(
        [
            "Welcome! This programme perfoms operations on:",
            "- Binary Search Trees",
            "- AVL Trees",
            "- Hash tables",
            "- Files",
            "Follow the instructions provided by the menu.",
        ]
    )


def menu_text() -> str:
    """The main menu, ending with the choice prompt."""
    return "\n".join(
        [
            "",
            "+--------------------------------------------------------+",
            "| Choose your option!                                    |",
            "|                                                        |",
            "| 1  - Input file name                                   |",
            "|                                                        |",
            "| 2  - Build Binary Search Tree (BST) based on the file  |",
            "| 3  - Add node to BST                                   |",
            "| 4  - Delete node in BST                                |",
            "| 5  - View BST Graph                                    |",
            "|                                                        |",
            "| 6  - Balance BST - Build AVL Tree                      |",
            "| 7  - Add node to AVL Tree                              |",
            "| 8  - Delete node in AVL Tree                           |",
            "| 9  - View AVL Graph                                    |",
            "|                                                        |",
            "| 10 - Input maximum number of comparisons               |",
            "| 11 - Build hash table based on the file                |",
            "| 12 - View hash table                                   |",
            "| 13 - Add element to hash table                         |",
            "| 14 - Delete element from hash table                    |",
            "|                                                        |",
            "| 15 - Search data in BST                                |",
            "| 16 - Search data in AVL                                |",
            "| 17 - Search data in Hash table                         |",
            "| 18 - Search data in file                               |",
            "| 19 - Compare time and memory efficiency                |",
            "|                                                        |",
            "| 0 - Exit                                               |",
            "+--------------------------------------------------------+",
            "",
            "Your choice: ",
        ]
    )


def _search_report(found: bool, comparisons: int) -> str:
    """The outcome of one search and the comparisons it took."""
    outcome = "Found!" if found else "Not found!"
    return f"{outcome}\nComparisons number : {comparisons}\n"


def _format_timing(timing: SearchTiming, table: HashTable) -> str:
    parts = [
        _search_report(timing.found, timing.comparisons),
        f"Time : {timing.average_ns} ns\n",
    ]
    if timing.restructured:
        parts += [
            "IMPORTANT! Table will be restructured!\n",
            "New table:\n",
            table.format() + "\n",
            f"Restructure time : {timing.restructure_ns} ns\n",
            "New search:\n",
            _search_report(timing.new_found, timing.new_comparisons),
            f"Time : {timing.new_average_ns} ns\n",
        ]
    return "".join(parts)


def _ask_int(reader: _TokenReader, out: TextIO, prompt: str) -> int | None:
    """Prompt for an integer; report bad input and return None."""
    out.write(prompt)
    value = reader.next_int()
    if value is None:
        out.write(_WRONG_INPUT)
        reader.discard_line()
    return value


def _open_file(reader: _TokenReader, out: TextIO, current: TextIO | None) -> TextIO | None:
    out.write("Currently you have ")
    out.write("no files.\n" if current is None else "a file!\n")
    out.write("Please, input path to your new file.\n")
    out.write(f"Current working directory: {os.getcwd()}\n")
    out.write("Your input: ")
    name = reader.next_token()
    try:
        new = open(name, encoding="utf-8")
    except OSError:
        out.write("No file!\n")
        return current
    if current is not None:
        current.close()
    return new


def main(argv: list[str] | None = None) -> int:
    """Run the interactive trees and hashing menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Search trees and hash tables.")
    parser.parse_args(argv)

    reader = _TokenReader(sys.stdin)
    out = sys.stdout
    stream: TextIO | None = None
    bst = BinarySearchTree()
    avl = AVLTree()
    table: HashTable | None = None
    max_comp = DEFAULT_MAX_COMP

    out.write(welcome_text() + "\n")
    try:
        while True:
            out.write(menu_text())
            choice = reader.next_int()
            if choice is None:
                out.write(_WRONG_INPUT)
                reader.discard_line()
            elif choice == 0:
                break
            elif choice == 1:
                stream = _open_file(reader, out, stream)
            elif choice == 2:
                if stream is None:
                    out.write("Error!\n")
                    continue
                try:
                    bst = read_file_to_bst(stream)
                except ValueError:
                    bst = BinarySearchTree()
                    out.write("Error!\n")
                else:
                    out.write("Success!\n")
            elif choice == 3:
                if not bst:
                    out.write("No BST!\n")
                elif (num := _ask_int(reader, out, "Input number to add: ")) is not None:
                    bst.add(num)
                    out.write("Success!\n")
            elif choice == 4:
                if not bst:
                    out.write("No BST!\n")
                elif (num := _ask_int(reader, out, "Input number to delete: ")) is not None:
                    bst.delete(num)
                    out.write("If the number existed, it was deleted!\n")
            elif choice == 5:
                if not bst:
                    out.write("No tree yet!\n")
                else:
                    path = write_dot_graph(bst_export_to_dot(bst), _DOT_FILE)
                    out.write(f"Graph written to {path}\n")
            elif choice == 6:
                try:
                    avl = AVLTree.from_bst(bst)
                except ValueError:
                    out.write("Error!\n")
                else:
                    out.write("Success!\n")
            elif choice == 7:
                if not avl:
                    out.write("No AVL Tree!\n")
                elif (num := _ask_int(reader, out, "Input number to add: ")) is not None:
                    avl.add(num)
                    out.write("Success!\n")
            elif choice == 8:
                if not avl:
                    out.write("No AVL Tree!\n")
                elif (num := _ask_int(reader, out, "Input number to delete: ")) is not None:
                    avl.delete(num)
                    out.write("If the number existed, it was deleted!\n")
            elif choice == 9:
                if not avl:
                    out.write("No tree yet!\n")
                else:
                    path = write_dot_graph(avl_export_to_dot(avl), _DOT_FILE)
                    out.write(f"Graph written to {path}\n")
            elif choice == 10:
                out.write("Input maximum number of comparisons [default = 4]: ")
                value = reader.next_int()
                if value is None or value < 1:
                    out.write(_WRONG_INPUT)
                    max_comp = DEFAULT_MAX_COMP
                    reader.discard_line()
                else:
                    max_comp = value
            elif choice == 11:
                if stream is None or file_len(stream) < 1:
                    out.write("Error!\n")
                else:
                    table = HashTable.from_numbers(read_numbers(stream))
                    out.write("Success!\n")
            elif choice == 12:
                out.write("No table!\n" if table is None else table.format() + "\n")
            elif choice == 13:
                if table is None:
                    out.write("No table!\n")
                elif (num := _ask_int(reader, out, "Input number to add: ")) is not None:
                    table.add(num)
                    out.write("Success!\n")
            elif choice == 14:
                if table is None:
                    out.write("No table!\n")
                elif (num := _ask_int(reader, out, "Input number to delete: ")) is not None:
                    try:
                        table.delete(num)
                    except KeyError:
                        out.write("No such element!\n")
                    else:
                        out.write("Success!\n")
            elif choice in (15, 16):
                tree = bst if choice == 15 else avl
                if not tree:
                    out.write("No tree!\n")
                elif (num := _ask_int(reader, out, "Input number to search: ")) is not None:
                    node, comparisons = tree.search(num)
                    out.write(_search_report(node is not None, comparisons))
            elif choice == 17:
                if table is None:
                    out.write("No table!\n")
                elif (num := _ask_int(reader, out, "Input number to search: ")) is not None:
                    timing = search_with_time(table, num, max_comp)
                    out.write(_format_timing(timing, table))
            elif choice == 18:
                if stream is None:
                    out.write("No file!\n")
                elif (num := _ask_int(reader, out, "Input number to search: ")) is not None:
                    found, comparisons = file_search(stream, num)
                    out.write(_search_report(found, comparisons))
            elif choice == 19:
                try:
                    out.write(format_time_table(measure_time()) + "\n")
                    out.write(format_memory_table(measure_memory()) + "\n")
                    out.write(format_collision_table(collision_comparison()) + "\n")
                except (OSError, ValueError) as exc:
                    out.write(f"Cannot measure: {exc}\n")
            else:
                out.write(_WRONG_INPUT)
    except EOFError:
        pass
    finally:
        if stream is not None:
            stream.close()
    return 0