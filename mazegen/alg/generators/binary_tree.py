"""
Binary tree algorithm.

Each cell carves toward one of two bias sides chosen at random, falling
back to the other side on the border. Leaves two unbroken corridors along
the bias sides.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Any

from mazegen.geometry.maze import Maze
from mazegen.geometry.sides import SquareSide
from mazegen.utils.exceptions import ConfigurationError

from .base_generator import SQUARE_ONLY, BaseGenerator


class BinaryTreeBias(Enum):
    """Pair of sides every cell may carve toward."""

    NORTH_EAST = "ne"
    NORTH_WEST = "nw"
    SOUTH_EAST = "se"
    SOUTH_WEST = "sw"

    @property
    def sides(self) -> tuple[SquareSide, SquareSide]:
        vertical = SquareSide.NORTH if self.value[0] == "n" else SquareSide.SOUTH
        horizontal = SquareSide.EAST if self.value[1] == "e" else SquareSide.WEST
        return vertical, horizontal


class BinaryTreeGenerator(BaseGenerator):
    """
    Binary tree generator for square mazes.

    Args:
        bias: Bias pair, a ``BinaryTreeBias`` or one of "ne", "nw", "se", "sw"
    """

    name = "binary_tree"
    supported_topologies = SQUARE_ONLY

    def __init__(self, bias: BinaryTreeBias | str = BinaryTreeBias.NORTH_EAST):
        try:
            self.bias = BinaryTreeBias(bias.lower() if isinstance(bias, str) else bias)
        except ValueError as e:
            raise ConfigurationError(
                "bias", bias, component=self.name, reason="expected one of ne, nw, se, sw"
            ) from e

    def options(self) -> dict[str, Any]:
        return {"bias": self.bias.value}

    def _carve(self, maze: Maze) -> None:
        vertical, horizontal = self.bias.sides
        for cell in maze.cells:
            first, second = (vertical, horizontal) if random.random() < 0.5 else (horizontal, vertical)
            target = cell.cell_on_side(first) or cell.cell_on_side(second)
            if target is not None:
                cell.connect_with(target)
