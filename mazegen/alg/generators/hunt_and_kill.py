"""
Hunt-and-kill algorithm.

Random walk until stuck (kill), then scan the maze in storage order for an
unvisited cell next to a visited one and restart from it (hunt).
"""

from __future__ import annotations

import random

from mazegen.geometry.maze import Maze

from .base_generator import BaseGenerator, unvisited_neighbors


class HuntAndKillGenerator(BaseGenerator):
    """Random walk with a full scan on dead ends. Supports every topology."""

    name = "hunt_and_kill"

    def _carve(self, maze: Maze) -> None:
        current = maze.random_cell()
        current.visited = True

        while current is not None:
            unvisited = unvisited_neighbors(current)
            if unvisited:
                next_cell = random.choice(unvisited)
                current.connect_with(next_cell)
                next_cell.visited = True
                current = next_cell
            else:
                current = self._hunt(maze)

    @staticmethod
    def _hunt(maze: Maze):
        for cell in maze.cells:
            if cell.visited:
                continue
            visited = [neighbor for neighbor in cell.neighbors if neighbor.visited]
            if visited:
                cell.connect_with(visited[0])
                cell.visited = True
                return cell
        return None
