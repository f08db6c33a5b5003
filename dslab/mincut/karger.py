"""Karger's randomised contraction algorithm for the minimum cut."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from dslab.mincut.disjoint_set import DisjointSet
from dslab.mincut.graph import Edge, Graph, format_edges


@dataclass(frozen=True)
class MinCut:
    """Edges whose removal splits the graph in two."""

    edges: tuple[Edge, ...]

    @property
    def size(self) -> int:
        return len(self.edges)


def karger_mincut(graph: Graph, rng: random.Random | None = None) -> MinCut:
    """Contract random edges until two vertices remain and return the cut.

    If the graph falls apart into more than two components, contraction
    stops early and the cut is empty.
    """
    source = rng if rng is not None else random.Random()
    sets = DisjointSet(graph.vertices)
    vertices = graph.vertices

    def crossing() -> list[Edge]:
        return [e for e in graph.edges if sets.find(e.src) != sets.find(e.dest)]

    while vertices > 2:
        candidates = crossing()
        if not candidates:
            break
        edge = source.choice(candidates)
        sets.union(edge.src, edge.dest)
        vertices -= 1

    return MinCut(tuple(crossing()))


def trial_count(vertices: int) -> int:
    """Number of repetitions giving a high chance of the true minimum (at least one)."""
    if vertices < 2:
        return 1
    return max(1, int(vertices * vertices * (math.log2(vertices) / math.log2(2.71828))))


def karger(
    graph: Graph, rng: random.Random | None = None, trials: int | None = None
) -> MinCut:
    """Repeat the contraction and keep the smallest cut found."""
    if trials is None:
        trials = trial_count(graph.vertices)
    if trials < 1:
        raise ValueError("at least one trial is required")
    source = rng if rng is not None else random.Random()

    best: MinCut | None = None
    for _ in range(trials):
        cut = karger_mincut(graph, source)
        if best is None or cut.size < best.size:
            best = cut
    return best


def format_mincut(result: MinCut) -> str:
    """Render the answer and the list of edges to delete."""
    lines = [f"Answer: {result.size}"]
    if result.size == 0:
        lines.append("Graph is not well-connected")
    else:
        lines.append("The list of edges to delete: ")
        lines.append(format_edges(result.edges))
    return "\n".join(lines)