"""Undirected multigraph stored as a list of edges."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple


class Edge(NamedTuple):
    """An edge between two vertex indices."""

    src: int
    dest: int


class Graph:
    """A graph on vertices 0..vertices-1 with an ordered list of edges."""

    def __init__(self, vertices: int, edges: Iterable[tuple[int, int]] = ()) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self.edges: list[Edge] = []
        for src, dest in edges:
            self.add_edge(src, dest)

    def add_edge(self, src: int, dest: int) -> Edge:
        """Append an edge; both ends must lie in [0, vertices - 1]."""
        for end in (src, dest):
            if not 0 <= end < self.vertices:
                raise ValueError(f"vertex {end} is outside [0, {self.vertices - 1}]")
        edge = Edge(src, dest)
        self.edges.append(edge)
        return edge

    def to_dot(self, name: str = "Graph") -> str:
        """Return the graph in DOT notation."""
        lines = [f"digraph {name} {{"]
        lines.extend(f"{e.src} -> {e.dest} [dir=none];" for e in self.edges)
        lines.append("}")
        return "\n".join(lines) + "\n"


def format_edges(edges: Iterable[Edge]) -> str:
    """One "src - dest" line per edge."""
    return "\n".join(f"{e.src} - {e.dest}" for e in edges)