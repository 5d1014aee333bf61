"""
Cell positions.

Planar topologies address cells with ``Position2D(x, y)``; the circular
topology uses ``PositionPolar(x, r)`` where ``r`` is the ring index and ``x``
the position along the ring.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Position2D:
    """Integer grid coordinate; ``y`` grows downward (south)."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Position2D:
        return Position2D(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}]"


@dataclass(frozen=True)
class PositionPolar:
    """
    Position on a circular maze.

    ``row_width`` records how many cells the ring holds and is not part of
    equality, so a position built without it still finds the cell.
    """

    x: int
    r: int
    row_width: int = field(default=0, compare=False)

    def offset(self, dx: int, dr: int) -> PositionPolar:
        return PositionPolar(self.x + dx, self.r + dr)

    def __str__(self) -> str:
        return f"[x={self.x}, r={self.r}]"


Position = Position2D | PositionPolar
