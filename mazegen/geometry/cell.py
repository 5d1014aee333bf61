"""
Maze cell.

A cell stores its walls as a bitmask over its topology's sides (a set bit is
a wall). Every query that depends on geometry is answered by the maze's
topology, so a single cell class serves every maze family.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .maze import Maze
    from .positions import Position
    from .sides import CellSide


class Cell:
    """
    One cell of a maze.

    Attributes:
        maze: Owning maze
        position: Topology-specific position
        index: Index in ``maze.cells``
        value: Wall bitmask, a set bit is a wall
        visited: Scratch flag used by generators
        distance: Distance map value, -1 when unreached
        tunnel_distance: Distance map value of the passage tunneling under
            the cell in weaving mazes, -1 when unreached or without tunnel
        on_solution_path: Whether the cell belongs to the solved path
    """

    __slots__ = ("distance", "index", "maze", "on_solution_path", "position", "tunnel_distance", "value", "visited")

    def __init__(self, maze: Maze, position: Position, index: int):
        self.maze = maze
        self.position = position
        self.index = index
        self.value = 0
        self.visited = False
        self.distance = -1
        self.tunnel_distance = -1
        self.on_solution_path = False

    @property
    def sides(self) -> tuple[CellSide, ...]:
        return self.maze.topology.sides_of(self)

    @property
    def neighbors(self) -> list[Cell]:
        """All topology-adjacent cells, regardless of walls."""
        return self.maze.topology.neighbors(self.maze, self)

    @property
    def accessible_neighbors(self) -> list[Cell]:
        """Neighbors reachable through an open side."""
        return self.maze.topology.accessible_neighbors(self.maze, self)

    @property
    def closed_neighbors(self) -> list[Cell]:
        """Neighbors separated from this cell by a wall."""
        return self.maze.topology.closed_neighbors(self.maze, self)

    @property
    def is_dead_end(self) -> bool:
        return len(self.accessible_neighbors) == 1

    def cell_on_side(self, side: CellSide) -> Cell | None:
        return self.maze.topology.cell_on_side(self.maze, self, side)

    def side_toward(self, other: Cell) -> CellSide | None:
        """Side of this cell that faces ``other``, or None if not adjacent."""
        return self.maze.topology.side_toward(self.maze, self, other)

    def has_side(self, side: CellSide) -> bool:
        """Whether the wall on ``side`` is present."""
        return self.maze.topology.has_side(self.maze, self, side)

    def open_side(self, side: CellSide) -> None:
        """Remove the wall on ``side`` and the matching wall of the cell across it."""
        self._change_side(side, lambda cell, s: cell._clear_bit(s))

    def close_side(self, side: CellSide) -> None:
        """Add the wall on ``side`` and the matching wall of the cell across it."""
        self._change_side(side, lambda cell, s: cell._set_bit(s))

    def toggle_side(self, side: CellSide) -> None:
        if self.has_side(side):
            self.open_side(side)
        else:
            self.close_side(side)

    def connect_with(self, other: Cell) -> None:
        """Open the pair of sides joining this cell with the adjacent ``other``."""
        self.maze.topology.connect(self.maze, self, other)

    def fill(self) -> None:
        """Close every side of this cell only."""
        self.value = self.maze.topology.full_walls(self)

    def reset(self) -> None:
        """Open every side of this cell only."""
        self.value = 0

    def _set_bit(self, side: CellSide) -> None:
        self.value |= side.bit

    def _clear_bit(self, side: CellSide) -> None:
        self.value &= ~side.bit

    def _change_side(self, side, change) -> None:
        change(self, side)
        other = self.cell_on_side(side)
        if other is not None:
            change(other, side.opposite)

    def __hash__(self) -> int:
        return hash(self.position)

    def __eq__(self, other) -> bool:
        return self is other

    def __repr__(self) -> str:
        walls = "".join(side.symbol for side in self.sides if self.value & side.bit)
        return f"Cell({self.position}, walls={walls or '-'})"
