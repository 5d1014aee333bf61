"""
Recursive division algorithm.

A wall adder: starting from an open area bounded by the border, split the
area with a wall at a random offset along its longer side, leave one gap in
the wall and repeat on both halves until they are one cell wide or tall.
Areas wait in a queue instead of recursing.
"""

from __future__ import annotations

import random
from collections import deque
from typing import NamedTuple

from mazegen.geometry.maze import Maze
from mazegen.geometry.sides import SquareSide

from .base_generator import SQUARE_ONLY, BaseGenerator


class Area(NamedTuple):
    x: int
    y: int
    width: int
    height: int


class RecursiveDivisionGenerator(BaseGenerator):
    """Wall-adding generator for square mazes."""

    name = "recursive_division"
    supported_topologies = SQUARE_ONLY

    def _carve(self, maze: Maze) -> None:
        width = maze.topology.width
        height = maze.topology.height

        maze.reset_all()
        for x in range(width):
            maze.cell_at_xy(x, 0).close_side(SquareSide.NORTH)
            maze.cell_at_xy(x, height - 1).close_side(SquareSide.SOUTH)
        for y in range(height):
            maze.cell_at_xy(0, y).close_side(SquareSide.WEST)
            maze.cell_at_xy(width - 1, y).close_side(SquareSide.EAST)

        areas = deque([Area(0, 0, width, height)])
        while areas:
            area = areas.popleft()
            if area.width == 1 or area.height == 1:
                continue

            horizontal = area.width < area.height or (area.width == area.height and random.random() < 0.5)

            if horizontal:
                wall_y = area.y + random.randrange(1, area.height)
                gap = random.randrange(area.width)
                for i in range(area.width):
                    if i != gap:
                        maze.cell_at_xy(area.x + i, wall_y).close_side(SquareSide.NORTH)
                areas.append(Area(area.x, area.y, area.width, wall_y - area.y))
                areas.append(Area(area.x, wall_y, area.width, area.height - (wall_y - area.y)))
            else:
                wall_x = area.x + random.randrange(1, area.width)
                gap = random.randrange(area.height)
                for i in range(area.height):
                    if i != gap:
                        maze.cell_at_xy(wall_x, area.y + i).close_side(SquareSide.WEST)
                areas.append(Area(area.x, area.y, wall_x - area.x, area.height))
                areas.append(Area(wall_x, area.y, area.width - (wall_x - area.x), area.height))
