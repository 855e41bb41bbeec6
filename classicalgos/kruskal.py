"""Kruskal's minimum spanning tree algorithm with a union-find structure."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    src: int
    dest: int
    weight: float


class DisjointSet:
    """Union-find over the integers ``0 .. size - 1`` with rank and path compression."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, i: int) -> int:
        """Return the representative of the set holding ``i``."""
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def union(self, x: int, y: int) -> bool:
        """Join the sets of ``x`` and ``y``; return False if already joined."""
        x_root = self.find(x)
        y_root = self.find(y)
        if x_root == y_root:
            return False
        if self._rank[x_root] < self._rank[y_root]:
            self._parent[x_root] = y_root
        elif self._rank[x_root] > self._rank[y_root]:
            self._parent[y_root] = x_root
        else:
            self._parent[y_root] = x_root
            self._rank[x_root] += 1
        return True


def kruskal_mst(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the edges of a minimum spanning forest, in the order chosen."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    ordered = sorted(edges, key=lambda edge: edge.weight)
    for edge in ordered:
        if not (0 <= edge.src < vertex_count and 0 <= edge.dest < vertex_count):
            raise ValueError(f"edge {edge} refers to a vertex outside the graph")

    subsets = DisjointSet(vertex_count)
    result: list[Edge] = []
    for edge in ordered:
        if len(result) >= vertex_count - 1:
            break
        x = subsets.find(edge.src)
        y = subsets.find(edge.dest)
        if x != y:
            result.append(edge)
            subsets.union(x, y)
    return result


EXAMPLE_VERTICES = 5
EXAMPLE_EDGES: tuple[Edge, ...] = (
    Edge(0, 1, 2),
    Edge(0, 3, 6),
    Edge(1, 2, 3),
    Edge(1, 4, 5),
    Edge(1, 3, 8),
    Edge(2, 4, 7),
    Edge(3, 4, 9),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the minimum spanning tree of the example graph."""
    parser = argparse.ArgumentParser(
        description="Build the minimum spanning tree of the example graph."
    )
    parser.parse_args(argv)
    print("Following are the edges in the constructed MST")
    for edge in kruskal_mst(EXAMPLE_VERTICES, EXAMPLE_EDGES):
        print(f"{edge.src} -- {edge.dest} == {edge.weight}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())