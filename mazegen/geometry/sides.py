"""
Cell sides for every maze topology.

Each side owns one bit of a cell's wall mask (a set bit is a wall), an
optional relative offset to the neighbor it faces, a display symbol and the
name of its opposite side.
"""

from __future__ import annotations

from enum import Enum


class CellSide(Enum):
    """Base for the per-topology side enumerations."""

    def __init__(self, bit: int, offset: tuple[int, int] | None, symbol: str, opposite_name: str):
        self.bit = bit
        self.offset = offset
        self.symbol = symbol
        self.opposite_name = opposite_name

    @property
    def opposite(self) -> CellSide:
        return type(self)[self.opposite_name]

    @classmethod
    def all_walls(cls) -> int:
        value = 0
        for side in cls:
            value |= side.bit
        return value


class SquareSide(CellSide):
    """Sides of square cells; also used by the weaving and single-path topologies."""

    NORTH = (1, (0, -1), "N", "SOUTH")
    SOUTH = (4, (0, 1), "S", "NORTH")
    WEST = (8, (-1, 0), "W", "EAST")
    EAST = (2, (1, 0), "E", "WEST")


class DiagonalSide(CellSide):
    """Sides of cells that may also connect diagonally."""

    NORTH = (1, (0, -1), "N", "SOUTH")
    SOUTH = (16, (0, 1), "S", "NORTH")
    EAST = (4, (1, 0), "E", "WEST")
    WEST = (64, (-1, 0), "W", "EAST")
    NORTHEAST = (2, (1, -1), "NE", "SOUTHWEST")
    SOUTHWEST = (32, (-1, 1), "SW", "NORTHEAST")
    SOUTHEAST = (8, (1, 1), "SE", "NORTHWEST")
    NORTHWEST = (128, (-1, -1), "NW", "SOUTHEAST")

    @property
    def is_diagonal(self) -> bool:
        return len(self.symbol) == 2


class HexSide(CellSide):
    """Sides of hexagonal cells in an axial layout."""

    NORTH = (1, (0, -1), "N", "SOUTH")
    SOUTH = (8, (0, 1), "S", "NORTH")
    NORTHEAST = (2, (1, 0), "NE", "SOUTHWEST")
    SOUTHWEST = (16, (-1, 0), "SW", "NORTHEAST")
    SOUTHEAST = (4, (1, 1), "SE", "NORTHWEST")
    NORTHWEST = (32, (-1, -1), "NW", "SOUTHEAST")


class TriangleSide(CellSide):
    """
    Sides of triangular cells.

    The base faces north on cells where ``x + y`` is even and south otherwise,
    so its offset depends on the cell and it is its own opposite.
    """

    BASE = (1, None, "B", "BASE")
    EAST = (2, (1, 0), "E", "WEST")
    WEST = (4, (-1, 0), "W", "EAST")


class RingSide(CellSide):
    """Sides of circular maze cells."""

    OUT = (1, None, "OUT", "IN")
    IN = (2, None, "IN", "OUT")
    CW = (4, (-1, 0), "CW", "CCW")
    CCW = (8, (1, 0), "CCW", "CW")


# Flag stored in the wall mask of weaving square cells crossed by a tunnel
TUNNEL_FLAG = 16

SQUARE_CELL_SIDES = (DiagonalSide.NORTH, DiagonalSide.SOUTH, DiagonalSide.EAST, DiagonalSide.WEST)
