"""
Openings through the outer boundary of a maze.

An opening position gives one coordinate per axis, each either an absolute
index or an anchor (start, center or end of the axis). For circular mazes
``x`` is the position along a ring and ``y`` the ring index. Absolute ``y``
values of shaped grids count from the top of the column.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from mazegen.utils.exceptions import ConfigurationError, InvalidOpeningError

if TYPE_CHECKING:
    from .cell import Cell
    from .maze import Maze


class OpeningAnchor(Enum):
    """Symbolic coordinate of an opening."""

    START = "S"
    CENTER = "C"
    END = "E"

    def resolve(self, size: int) -> int:
        if self is OpeningAnchor.START:
            return 0
        if self is OpeningAnchor.CENTER:
            return size // 2
        return size - 1


Coordinate = int | OpeningAnchor


@dataclass(frozen=True)
class OpeningPosition:
    """Position of an opening, e.g. ``OpeningPosition(OpeningAnchor.START, 0)``."""

    x: Coordinate
    y: Coordinate

    def resolve_x(self, size: int) -> int:
        return self.x.resolve(size) if isinstance(self.x, OpeningAnchor) else self.x

    def resolve_y(self, size: int) -> int:
        return self.y.resolve(size) if isinstance(self.y, OpeningAnchor) else self.y

    @classmethod
    def parse(cls, value: OpeningPosition | str | list | tuple) -> OpeningPosition:
        """
        Parse an opening from a pair of coordinates.

        Strings are matched on their first letter (``"S"``, ``"start"``,
        ``"C"``, ``"E"``); integers are absolute.

        Examples:
            >>> OpeningPosition.parse(["S", "S"])
            >>> OpeningPosition.parse("E 3")
        """
        if isinstance(value, OpeningPosition):
            return value
        parts = value.split() if isinstance(value, str) else list(value)
        if len(parts) != 2:
            raise ConfigurationError("opening", value, reason="an opening needs exactly two coordinates")
        return cls(_parse_coordinate(parts[0], value), _parse_coordinate(parts[1], value))

    def __str__(self) -> str:
        def fmt(c: Coordinate) -> str:
            return c.value if isinstance(c, OpeningAnchor) else str(c)

        return f"({fmt(self.x)}, {fmt(self.y)})"


def _parse_coordinate(part, whole) -> Coordinate:
    if isinstance(part, OpeningAnchor):
        return part
    if isinstance(part, int) and not isinstance(part, bool):
        return part
    if isinstance(part, str):
        text = part.strip()
        if text.lstrip("-").isdigit():
            return int(text)
        if text:
            try:
                return OpeningAnchor(text[0].upper())
            except ValueError:
                pass
    raise ConfigurationError("opening", whole, reason=f"invalid coordinate '{part}'")


def _resolve(maze: Maze, opening: OpeningPosition) -> Cell:
    cell = maze.topology.opening_cell(maze, opening)
    if cell is None:
        raise InvalidOpeningError(opening, "position is outside the maze")
    return cell


def _carve(maze: Maze, cell: Cell) -> None:
    # Open the first side facing outside; interior cells keep their walls
    for side in cell.sides:
        if cell.cell_on_side(side) is None:
            cell.open_side(side)
            break
    maze.openings.append(cell)


def create_opening(maze: Maze, opening: OpeningPosition) -> Cell:
    """
    Carve one opening.

    Args:
        maze: Maze to carve
        opening: Opening position

    Returns:
        The opening cell

    Raises:
        InvalidOpeningError: If the position is outside the maze or the cell
            is already an opening
    """
    cell = _resolve(maze, opening)
    if any(existing is cell for existing in maze.openings):
        raise InvalidOpeningError(opening, "an opening already exists at this position")
    _carve(maze, cell)
    return cell


def create_openings(maze: Maze, openings: list[OpeningPosition]) -> list[Cell]:
    """
    Carve several openings, validating all of them before touching the maze.

    Raises:
        InvalidOpeningError: If any position is outside the maze or two
            openings share a cell
    """
    cells: list[Cell] = []
    seen = {cell.index for cell in maze.openings}
    for opening in openings:
        cell = _resolve(maze, opening)
        if cell.index in seen:
            raise InvalidOpeningError(opening, "an opening already exists at this position")
        seen.add(cell.index)
        cells.append(cell)

    for cell in cells:
        _carve(maze, cell)
    return cells
