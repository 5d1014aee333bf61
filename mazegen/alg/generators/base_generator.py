"""
Common contract of the maze generators.

A generator turns a maze into a perfect maze: every cell reachable, exactly
one path between any two cells. ``generate`` checks the topology before
touching the maze, closes every wall, then hands the maze to the algorithm.
Single-path mazes are generated on their half-resolution square base and
expanded afterwards.

Randomness comes from the ``random`` module; generators never seed it.
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from mazegen.geometry.maze import Maze
from mazegen.geometry.single_path import apply_single_path
from mazegen.geometry.topology import MazeTopology
from mazegen.utils.exceptions import UnsupportedTopologyError
from mazegen.utils.maze_logging import LoggedOperation, get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mazegen.geometry.cell import Cell

logger = get_logger(__name__)

ALL_TOPOLOGIES = frozenset(MazeTopology)

# Neighbors of these topologies change while passages are carved
DYNAMIC_TOPOLOGIES = frozenset({MazeTopology.WEAVING_SQUARE, MazeTopology.DIAGONAL_SQUARE})

SQUARE_ONLY = frozenset({MazeTopology.SQUARE})


class BaseGenerator(ABC):
    """
    Base class for maze generators.

    Subclasses set ``name`` and ``supported_topologies`` and implement
    ``_carve``, which receives a fully walled maze of a supported topology.
    """

    name: ClassVar[str]
    supported_topologies: ClassVar[frozenset[MazeTopology]] = ALL_TOPOLOGIES

    def supports(self, kind: MazeTopology) -> bool:
        if kind is MazeTopology.SINGLE_PATH:
            return MazeTopology.SQUARE in self.supported_topologies
        return kind in self.supported_topologies

    def generate(self, maze: Maze) -> Maze:
        """
        Generate a perfect maze in place.

        Args:
            maze: Maze to generate, any previous content is discarded

        Returns:
            The same maze

        Raises:
            UnsupportedTopologyError: If the algorithm cannot handle the maze
                topology; the maze is left untouched
        """
        if not self.supports(maze.kind):
            raise UnsupportedTopologyError(
                self.name, maze.kind, sorted(self.supported_topologies, key=lambda t: t.value)
            )

        with LoggedOperation(logger, f"{self.name} on {maze!r}", logging.DEBUG):
            maze.fill_all()
            if maze.kind is MazeTopology.SINGLE_PATH:
                base = Maze(maze.topology.base_topology())
                self._carve(base)
                apply_single_path(maze, base)
            else:
                self._carve(maze)
                maze.reset_visited()

        return maze

    @abstractmethod
    def _carve(self, maze: Maze) -> None:
        """Carve passages into a fully walled maze."""

    def options(self) -> dict[str, Any]:
        """Algorithm options, for logging."""
        return {}

    def __repr__(self) -> str:
        options = ", ".join(f"{key}={value}" for key, value in self.options().items())
        return f"{type(self).__name__}({options})"


class RandomPool:
    """
    Unordered set of cells with constant-time insertion, removal and random pick.

    Removal swaps the last element into the freed slot.
    """

    def __init__(self, cells: Iterable[Cell] = ()):
        self._items: list[Cell] = []
        self._slots: dict[int, int] = {}
        for cell in cells:
            self.add(cell)

    def add(self, cell: Cell) -> None:
        if cell.index not in self._slots:
            self._slots[cell.index] = len(self._items)
            self._items.append(cell)

    def remove(self, cell: Cell) -> None:
        slot = self._slots.pop(cell.index)
        last = self._items.pop()
        if slot < len(self._items):
            self._items[slot] = last
            self._slots[last.index] = slot

    def random_item(self) -> Cell:
        return self._items[random.randrange(len(self._items))]

    def __contains__(self, cell: Cell) -> bool:
        return cell.index in self._slots

    def __len__(self) -> int:
        return len(self._items)


def unvisited_neighbors(cell: Cell) -> list[Cell]:
    return [neighbor for neighbor in cell.neighbors if not neighbor.visited]
