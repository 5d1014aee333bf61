"""
Recursive backtracking (depth-first search) with an explicit stack.

Creates mazes with long, winding passages and few dead ends.
"""

from __future__ import annotations

import random

from mazegen.geometry.maze import Maze

from .base_generator import BaseGenerator, unvisited_neighbors


class RecursiveBacktrackerGenerator(BaseGenerator):
    """
    Depth-first search maze generator. Supports every topology.

    Algorithm:
    1. Start at random cell, mark as visited
    2. While the stack is not empty:
       - Choose random unvisited neighbor of the top cell
       - Link cells, push the neighbor
    3. Pop the stack when the top cell has no unvisited neighbor
    """

    name = "recursive_backtracking"

    def _carve(self, maze: Maze) -> None:
        start = maze.random_cell()
        start.visited = True
        stack = [start]

        while stack:
            current = stack[-1]
            unvisited = unvisited_neighbors(current)

            if unvisited:
                next_cell = random.choice(unvisited)
                current.connect_with(next_cell)
                next_cell.visited = True
                stack.append(next_cell)
            else:
                stack.pop()
