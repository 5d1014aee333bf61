"""
Eller's algorithm.

Builds the maze one row at a time while tracking which cells of the current
row are already connected (sets). Adjacent cells of different sets merge
with probability ``horizontal_bias``; every set then carves south from each
of its cells with probability ``vertical_bias``, at least once. The last row
merges every remaining set.
"""

from __future__ import annotations

import random
from typing import Any

from mazegen.geometry.maze import Maze
from mazegen.geometry.sides import SquareSide
from mazegen.utils.exceptions import validate_parameter_value

from .base_generator import SQUARE_ONLY, BaseGenerator


class EllerGenerator(BaseGenerator):
    """
    Row-by-row set-merging generator for square mazes.

    Args:
        horizontal_bias: Probability of merging two adjacent sets, in (0, 1]
        vertical_bias: Probability of carving south from a cell, in (0, 1]
    """

    name = "ellers"
    supported_topologies = SQUARE_ONLY

    def __init__(self, horizontal_bias: float = 0.5, vertical_bias: float = 0.5):
        self.horizontal_bias = horizontal_bias
        self.vertical_bias = vertical_bias

    @property
    def horizontal_bias(self) -> float:
        return self._horizontal_bias

    @horizontal_bias.setter
    def horizontal_bias(self, value: float) -> None:
        self._horizontal_bias = self._check_bias(value, "horizontal_bias")

    @property
    def vertical_bias(self) -> float:
        return self._vertical_bias

    @vertical_bias.setter
    def vertical_bias(self, value: float) -> None:
        self._vertical_bias = self._check_bias(value, "vertical_bias")

    def _check_bias(self, value: float, parameter: str) -> float:
        validate_parameter_value(value, parameter, (int, float), (0, 1), component=self.name, exclusive_minimum=True)
        return float(value)

    def options(self) -> dict[str, Any]:
        return {"horizontal_bias": self.horizontal_bias, "vertical_bias": self.vertical_bias}

    def _carve(self, maze: Maze) -> None:
        width = maze.topology.width
        height = maze.topology.height

        members: dict[int, list] = {}
        set_of: dict[int, int] = {}
        next_id = 0

        for y in range(height):
            last_row = y == height - 1
            row = [maze.cell_at_xy(x, y) for x in range(width)]

            # Cells not reached from the row above start their own set
            for cell in row:
                if cell.index not in set_of:
                    members[next_id] = [cell]
                    set_of[cell.index] = next_id
                    next_id += 1

            for cell, next_cell in zip(row, row[1:]):
                set_id = set_of[cell.index]
                other_id = set_of[next_cell.index]
                if set_id != other_id and (last_row or random.random() <= self.horizontal_bias):
                    cell.connect_with(next_cell)
                    for merged in members.pop(other_id):
                        set_of[merged.index] = set_id
                        members[set_id].append(merged)

            if last_row:
                break

            for set_id, cells in list(members.items()):
                to_carve = []
                for cell in cells:
                    if random.random() <= self.vertical_bias:
                        to_carve.append(cell)
                    del set_of[cell.index]
                if not to_carve:
                    to_carve.append(random.choice(cells))

                below = []
                for cell in to_carve:
                    south = cell.cell_on_side(SquareSide.SOUTH)
                    cell.connect_with(south)
                    set_of[south.index] = set_id
                    below.append(south)
                members[set_id] = below
