"""
Aldous-Broder algorithm.

Random walk over the whole maze; a passage is carved every time the walk
steps onto a cell for the first time. Produces uniformly random spanning
trees but has no upper bound on running time.
"""

from __future__ import annotations

import random

from mazegen.geometry.maze import Maze

from .base_generator import BaseGenerator


class AldousBroderGenerator(BaseGenerator):
    """Uniform spanning tree by random walk. Supports every topology."""

    name = "aldous_broder"

    def _carve(self, maze: Maze) -> None:
        current = maze.random_cell()
        current.visited = True
        remaining = maze.cell_count - 1

        while remaining > 0:
            neighbor = random.choice(current.neighbors)
            if not neighbor.visited:
                current.connect_with(neighbor)
                neighbor.visited = True
                remaining -= 1
            current = neighbor
