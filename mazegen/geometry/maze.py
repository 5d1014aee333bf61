"""
Maze container.

A ``Maze`` owns a flat, index-addressable list of cells laid out by its
topology. The shape never changes after construction; generators, opening
carving and braiding only change cell wall masks, and the solver and
distance mapper only annotate cells.

Example:
    >>> maze = create_maze("square", width=10, height=10)
    >>> maze.cell_count
    100
"""

from __future__ import annotations

import random
from collections.abc import Callable, Iterator
from typing import Any

from .cell import Cell
from .positions import Position2D, PositionPolar
from .topology import GridTopology, MazeTopology, create_topology


class Maze:
    """
    Collection of cells for one topology and size.

    Attributes:
        topology: Geometry strategy of the maze
        cells: All cells in storage order, ``cells[i].index == i``
        openings: Cells carved through the outer boundary, in carving order
        solution: Cells of the solved path, or None
        has_distance_map: Whether cells carry distance map values
    """

    def __init__(self, topology: GridTopology):
        self.topology = topology
        self.cells: list[Cell] = [Cell(self, position, i) for i, position in enumerate(topology.positions())]
        self._by_position = {cell.position: cell for cell in self.cells}
        self._neighbor_cache: list[list[Cell] | None] = [None] * len(self.cells)

        self.openings: list[Cell] = []
        self.solution: list[Cell] | None = None
        self.has_distance_map = False

        self.fill_all()

    @property
    def kind(self) -> MazeTopology:
        return self.topology.kind

    @property
    def cell_count(self) -> int:
        return len(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def cell_at(self, position: Any) -> Cell | None:
        """Cell at ``position``, or None if the position is outside the maze."""
        return self._by_position.get(self.topology.normalize(position))

    def cell_at_xy(self, x: int, y: int) -> Cell | None:
        """Cell at grid coordinates; ``y`` is the ring index for circular mazes."""
        if self.kind is MazeTopology.CIRCULAR:
            return self.cell_at(PositionPolar(x, y))
        return self.cell_at(Position2D(x, y))

    def random_cell(self) -> Cell:
        return random.choice(self.cells)

    def all_cells(self) -> list[Cell]:
        return list(self.cells)

    def for_each_cell(self, action: Callable[[Cell], Any]) -> None:
        for cell in self.cells:
            action(cell)

    def fill_all(self) -> None:
        """Close every side of every cell and clear all generation state."""
        for cell in self.cells:
            cell.fill()
            cell.visited = False
        self.openings.clear()
        self.clear_annotations()

    def reset_all(self) -> None:
        """Open every side of every cell."""
        for cell in self.cells:
            cell.reset()

    def reset_visited(self) -> None:
        for cell in self.cells:
            cell.visited = False

    def clear_annotations(self) -> None:
        """Drop solution and distance map annotations."""
        for cell in self.cells:
            cell.on_solution_path = False
            cell.distance = -1
            cell.tunnel_distance = -1
        self.solution = None
        self.has_distance_map = False

    def dead_ends(self) -> list[Cell]:
        """Cells with exactly one accessible neighbor."""
        return [cell for cell in self.cells if cell.is_dead_end]

    def describe(self) -> dict[str, Any]:
        return {"topology": self.kind.value, **self.topology.describe(), "cells": self.cell_count}

    def __repr__(self) -> str:
        dims = ", ".join(f"{key}={value}" for key, value in self.topology.describe().items())
        return f"Maze({self.kind.value}, {dims})"


def create_maze(kind: MazeTopology | str, **dimensions: Any) -> Maze:
    """
    Create a fully walled maze.

    Args:
        kind: Topology tag or its string value (e.g. ``"square"``)
        **dimensions: Topology dimensions, see ``create_topology``

    Returns:
        Maze with every side of every cell closed
    """
    return Maze(create_topology(kind, **dimensions))
