"""
Sidewinder algorithm.

Rows are processed top to bottom. A run of cells grows east at random;
when it closes, one random cell of the run carves north. The top row has no
north side and becomes a single corridor.
"""

from __future__ import annotations

import random

from mazegen.geometry.maze import Maze
from mazegen.geometry.sides import SquareSide

from .base_generator import SQUARE_ONLY, BaseGenerator


class SidewinderGenerator(BaseGenerator):
    """Row-run generator for square mazes."""

    name = "sidewinder"
    supported_topologies = SQUARE_ONLY

    def _carve(self, maze: Maze) -> None:
        for y in range(maze.topology.height):
            run = []
            for x in range(maze.topology.width):
                cell = maze.cell_at_xy(x, y)
                run.append(cell)

                east = cell.cell_on_side(SquareSide.EAST)
                north = cell.cell_on_side(SquareSide.NORTH)
                if east is not None and (north is None or random.random() < 0.5):
                    cell.connect_with(east)
                else:
                    member = random.choice(run)
                    member_north = member.cell_on_side(SquareSide.NORTH)
                    if member_north is not None:
                        member.connect_with(member_north)
                    run.clear()
