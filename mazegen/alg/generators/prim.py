"""
Prim's algorithm (randomized, cell frontier).

Keeps the frontier of unvisited cells next to the tree; a random frontier
cell joins the tree through one of its visited neighbors and brings its own
unvisited neighbors into the frontier.
"""

from __future__ import annotations

import random

from mazegen.geometry.maze import Maze

from .base_generator import BaseGenerator, RandomPool


class PrimGenerator(BaseGenerator):
    """Frontier-based generator with many short dead ends. Supports every topology."""

    name = "prims"

    def _carve(self, maze: Maze) -> None:
        frontier = RandomPool()
        start = maze.random_cell()
        start.visited = True
        for neighbor in start.neighbors:
            frontier.add(neighbor)

        while len(frontier) > 0:
            cell = frontier.random_item()
            frontier.remove(cell)

            neighbors = cell.neighbors
            random.shuffle(neighbors)
            connected = False
            for neighbor in neighbors:
                if neighbor.visited:
                    if not connected:
                        cell.connect_with(neighbor)
                        connected = True
                else:
                    frontier.add(neighbor)
            cell.visited = True
