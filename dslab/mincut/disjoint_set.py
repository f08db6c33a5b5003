"""Union-find over vertex indices with path compression and union by rank."""

from __future__ import annotations


class DisjointSet:
    """Partition of the integers 0..size-1 into disjoint sets."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.parent = list(range(size))
        self.rank = [0] * size

    def find(self, i: int) -> int:
        """Return the representative of the set holding i."""
        root = i
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[i] != root:
            self.parent[i], i = root, self.parent[i]
        return root

    def union(self, x: int, y: int) -> int:
        """Merge the sets holding x and y and return the new representative."""
        xroot = self.find(x)
        yroot = self.find(y)
        if xroot == yroot:
            return xroot
        if self.rank[xroot] < self.rank[yroot]:
            self.parent[xroot] = yroot
            return yroot
        if self.rank[xroot] > self.rank[yroot]:
            self.parent[yroot] = xroot
            return xroot
        self.parent[yroot] = xroot
        self.rank[xroot] += 1
        return xroot

    def __len__(self) -> int:
        return len(self.parent)