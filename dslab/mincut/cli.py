"""Interactive menu for entering a graph and finding its minimum cut."""

from __future__ import annotations

import argparse
import random
import sys
from collections import deque
from pathlib import Path
from typing import TextIO

from dslab.mincut.graph import Graph
from dslab.mincut.karger import format_mincut, karger

_DOT_FILE = "graph.gv"


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


def _as_reader(stream_in) -> _TokenReader:
    return stream_in if isinstance(stream_in, _TokenReader) else _TokenReader(stream_in)


def _read_count(reader: _TokenReader, out: TextIO, name: str, minimum: int) -> int:
    out.write(f"{name} = ")
    while True:
        value = reader.next_int()
        if value is not None and value >= minimum:
            return value
        reader.discard_line()
        out.write(f"Incorrent input! {name} = ")


def read_graph(stream_in, stream_out: TextIO) -> Graph:
    """Prompt for the vertex count, edge count and edges, re-asking on bad input.

    Raises EOFError when the input ends before the graph is complete.
    """
    reader = _as_reader(stream_in)
    stream_out.write("Input number of nodes. ")
    vertices = _read_count(reader, stream_out, "V", 2)
    stream_out.write("Input number of edges. ")
    edges = _read_count(reader, stream_out, "E", 1)

    graph = Graph(vertices)
    stream_out.write("Input edges of the graph. Nodes must belong to [0, V - 1].\n")

    while len(graph.edges) < edges:
        stream_out.write("Input beginning: ")
        beg = reader.next_int()
        if beg is None or not 0 <= beg < vertices:
            stream_out.write("Wrong input!\n")
            reader.discard_line()
            continue
        stream_out.write("Input ending: ")
        end = reader.next_int()
        if end is None or not 0 <= end < vertices:
            stream_out.write("Wrong input!\n")
            reader.discard_line()
            continue
        stream_out.write(f"Success! Read {len(graph.edges) + 1} edges.\n")
        graph.add_edge(beg, end)
    return graph


def write_dot(graph: Graph, path) -> Path:
    """Write the graph in DOT notation to path and return the path."""
    target = Path(path)
    target.write_text(graph.to_dot("Graph"), encoding="utf-8")
    return target


def welcome_text() -> str:
    """The greeting shown when the program starts."""
    return "\n".join(
        [
            "Welcome! This programme perfoms operations on",
            "connected graphs and check, how many edges should be",
            "removed to make graph disconnected by minimum loss.",
            "In other words, this programme solves the min-cut problem.",
        ]
    )


def menu_text() -> str:
    """The main menu, ending with the choice prompt."""
    return "\n".join(
        [
            "",
            "+-----------------------------------------------------------+",
            "| Choose your option!                                       |",
            "|                                                           |",
            "| 1  - Input graph                                          |",
            "| 2  - Open graph image                                     |",
            "| 3  - See how many edges to delete to disconnect the graph |",
            "| 0  - Exit                                                 |",
            "+-----------------------------------------------------------+",
            "",
            "Your choice: ",
        ]
    )


def main(argv: list[str] | None = None) -> int:
    """Run the interactive minimum-cut menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Minimum cut of a graph.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    reader = _TokenReader(sys.stdin)
    out = sys.stdout
    graph: Graph | None = None

    out.write(welcome_text() + "\n")
    while True:
        out.write(menu_text())
        try:
            choice = reader.next_int()
        except EOFError:
            break
        if choice is None:
            out.write("Wrong input!\n")
            reader.discard_line()
        elif choice == 0:
            break
        elif choice == 1:
            try:
                graph = read_graph(reader, out)
            except EOFError:
                break
        elif choice == 2:
            if graph is None:
                out.write("No graph!\n")
            else:
                path = write_dot(graph, _DOT_FILE)
                out.write(f"Graph written to {path}\n")
        elif choice == 3:
            if graph is None:
                out.write("No graph!\n")
            else:
                out.write("\n" + format_mincut(karger(graph, rng)) + "\n")
        else:
            out.write("Wrong input!\n")
    return 0