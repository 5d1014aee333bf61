"""
Wilson's algorithm.

Loop-erased random walks from unvisited cells until they reach the tree.
Produces uniformly random spanning trees. The walk relies on neighbors that
do not change while carving, so weaving and diagonal mazes are unsupported.
"""

from __future__ import annotations

import random

from mazegen.geometry.maze import Maze

from .base_generator import ALL_TOPOLOGIES, DYNAMIC_TOPOLOGIES, BaseGenerator, RandomPool


class WilsonGenerator(BaseGenerator):
    """Uniform spanning tree by loop-erased random walk."""

    name = "wilsons"
    supported_topologies = ALL_TOPOLOGIES - DYNAMIC_TOPOLOGIES

    def _carve(self, maze: Maze) -> None:
        unvisited = RandomPool(maze.cells)

        first = unvisited.random_item()
        first.visited = True
        unvisited.remove(first)

        while len(unvisited) > 0:
            walk = [unvisited.random_item()]
            positions = {walk[0].index: 0}

            while not walk[-1].visited:
                neighbor = random.choice(walk[-1].neighbors)
                position = positions.get(neighbor.index)
                if position is not None:
                    # Erase the loop back to the revisited cell
                    for erased in walk[position + 1 :]:
                        del positions[erased.index]
                    del walk[position + 1 :]
                else:
                    positions[neighbor.index] = len(walk)
                    walk.append(neighbor)

            for cell, next_cell in zip(walk, walk[1:]):
                cell.connect_with(next_cell)
                cell.visited = True
                unvisited.remove(cell)
