"""
Randomized Kruskal's algorithm.

Every edge between adjacent cells is listed once, shuffled and processed in
order; an edge is carved when its cells are in different sets of a
disjoint-set forest local to the run. Needs neighbors fixed before carving,
so weaving and diagonal mazes are unsupported.
"""

from __future__ import annotations

import random

from mazegen.geometry.cell import Cell
from mazegen.geometry.maze import Maze

from .base_generator import ALL_TOPOLOGIES, DYNAMIC_TOPOLOGIES, BaseGenerator


class Edge:
    """Unordered pair of adjacent cells."""

    __slots__ = ("first", "second")

    def __init__(self, first: Cell, second: Cell):
        self.first = first
        self.second = second

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return {self.first.index, self.second.index} == {other.first.index, other.second.index}

    def __hash__(self) -> int:
        return hash(frozenset((self.first.index, self.second.index)))

    def __repr__(self) -> str:
        return f"Edge({self.first.position}, {self.second.position})"


class DisjointSet:
    """Index-based union-find forest with path halving."""

    def __init__(self, size: int):
        self.parents = list(range(size))

    def find(self, index: int) -> int:
        parents = self.parents
        while parents[index] != index:
            parents[index] = parents[parents[index]]
            index = parents[index]
        return index

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; False if they were already merged."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        self.parents[root_b] = root_a
        return True


class KruskalGenerator(BaseGenerator):
    """Shuffled-edge spanning tree generator."""

    name = "kruskals"
    supported_topologies = ALL_TOPOLOGIES - DYNAMIC_TOPOLOGIES

    def _carve(self, maze: Maze) -> None:
        edges: dict[Edge, None] = {}
        for cell in maze.cells:
            for neighbor in cell.neighbors:
                edges.setdefault(Edge(cell, neighbor))

        edge_list = list(edges)
        random.shuffle(edge_list)

        forest = DisjointSet(maze.cell_count)
        while edge_list:
            edge = edge_list.pop()
            if forest.union(edge.first.index, edge.second.index):
                edge.first.connect_with(edge.second)
