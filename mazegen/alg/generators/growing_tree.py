"""
Growing tree algorithm.

Generalizes recursive backtracking and Prim's algorithm: cells are picked
from an active list either at random, the newest or the oldest one,
according to three integer weights.

Weight presets:
- newest only: recursive backtracking (long corridors)
- random only: Prim-like (short dead ends)
- oldest only: long straight passages radiating from the start
"""

from __future__ import annotations

import random
from typing import Any

from mazegen.geometry.maze import Maze
from mazegen.utils.exceptions import ConfigurationError, validate_parameter_value

from .base_generator import BaseGenerator, unvisited_neighbors


class GrowingTreeGenerator(BaseGenerator):
    """
    Active-list generator with a weighted cell selection policy.

    Args:
        random_weight: Weight of picking a random active cell
        newest_weight: Weight of picking the most recently added cell
        oldest_weight: Weight of picking the least recently added cell
    """

    name = "growing_tree"

    def __init__(self, random_weight: int = 1, newest_weight: int = 1, oldest_weight: int = 0):
        self.set_weights(random_weight, newest_weight, oldest_weight)

    def set_weights(self, random_weight: int, newest_weight: int, oldest_weight: int) -> None:
        """Validate and set the three selection weights."""
        weights = {"random_weight": random_weight, "newest_weight": newest_weight, "oldest_weight": oldest_weight}
        for parameter, weight in weights.items():
            validate_parameter_value(weight, parameter, int, (0, float("inf")), component=self.name)
        if sum(weights.values()) == 0:
            raise ConfigurationError(
                "weights", list(weights.values()), component=self.name, reason="at least one weight must be positive"
            )

        self.random_weight = random_weight
        self.newest_weight = newest_weight
        self.oldest_weight = oldest_weight

    def options(self) -> dict[str, Any]:
        return {
            "random_weight": self.random_weight,
            "newest_weight": self.newest_weight,
            "oldest_weight": self.oldest_weight,
        }

    def _choose_index(self, size: int) -> int:
        choice = random.randrange(self.random_weight + self.newest_weight + self.oldest_weight)
        if choice < self.random_weight:
            return random.randrange(size)
        if choice < self.random_weight + self.newest_weight:
            return size - 1
        return 0

    def _carve(self, maze: Maze) -> None:
        start = maze.random_cell()
        start.visited = True
        active = [start]

        while active:
            index = self._choose_index(len(active))
            cell = active[index]
            unvisited = unvisited_neighbors(cell)

            if unvisited:
                next_cell = random.choice(unvisited)
                cell.connect_with(next_cell)
                next_cell.visited = True
                active.append(next_cell)
            else:
                del active[index]
