"""
Maze topologies.

A topology decides where cells sit, which sides each cell has and which
cell lies across every side. The set of topologies is closed: each member of
``MazeTopology`` maps to one strategy class below, and ``create_topology``
is the only constructor callers need.

Storage order is column-major for planar grids (``x`` then ``y``) and ring
by ring for circular mazes.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

from mazegen.utils.exceptions import ConfigurationError, InvalidCellOperationError, validate_parameter_value

from .positions import Position2D, PositionPolar
from .sides import (
    SQUARE_CELL_SIDES,
    TUNNEL_FLAG,
    CellSide,
    DiagonalSide,
    HexSide,
    RingSide,
    SquareSide,
    TriangleSide,
)

if TYPE_CHECKING:
    from .cell import Cell
    from .maze import Maze
    from .openings import OpeningPosition


class MazeTopology(Enum):
    """Available maze families."""

    SQUARE = "square"
    TRIANGULAR = "triangular"
    HEXAGONAL = "hexagonal"
    OCTAGON_SQUARE = "octagon_square"
    DIAGONAL_SQUARE = "diagonal_square"
    WEAVING_SQUARE = "weaving_square"
    CIRCULAR = "circular"
    SINGLE_PATH = "single_path"


class MazeShape(Enum):
    """Outline of triangular and hexagonal mazes."""

    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    HEXAGON = "hexagon"
    RHOMBUS = "rhombus"


def _unique(cells: list[Cell]) -> list[Cell]:
    seen: set[int] = set()
    unique = []
    for cell in cells:
        if cell.index not in seen:
            seen.add(cell.index)
            unique.append(cell)
    return unique


class GridTopology(ABC):
    """
    Geometry strategy shared by all cells of a maze.

    Subclasses with ``dynamic_neighbors`` recompute adjacency on every call
    because it depends on passages carved elsewhere in the maze.
    """

    kind: ClassVar[MazeTopology]
    side_type: ClassVar[type[CellSide]]
    dynamic_neighbors: ClassVar[bool] = False

    @abstractmethod
    def positions(self) -> list[Any]:
        """All cell positions in storage order."""

    @abstractmethod
    def cell_on_side(self, maze: Maze, cell: Cell, side: CellSide) -> Cell | None:
        """Cell across ``side`` of ``cell``, or None at the border."""

    @abstractmethod
    def opening_cell(self, maze: Maze, opening: OpeningPosition) -> Cell | None:
        """Resolve an opening position to a cell, None when out of range."""

    @abstractmethod
    def describe(self) -> dict[str, Any]:
        """Dimensions of the topology, for logging and export."""

    def normalize(self, position: Any) -> Any:
        return position

    def sides_of(self, cell: Cell) -> tuple[CellSide, ...]:
        return tuple(self.side_type)

    def full_walls(self, cell: Cell) -> int:
        value = 0
        for side in self.sides_of(cell):
            value |= side.bit
        return value

    def has_side(self, maze: Maze, cell: Cell, side: CellSide) -> bool:
        return cell.value & side.bit != 0

    def neighbors(self, maze: Maze, cell: Cell) -> list[Cell]:
        if self.dynamic_neighbors:
            return self._find_neighbors(maze, cell)
        cached = maze._neighbor_cache[cell.index]
        if cached is None:
            cached = maze._neighbor_cache[cell.index] = self._find_neighbors(maze, cell)
        return list(cached)

    def _find_neighbors(self, maze: Maze, cell: Cell) -> list[Cell]:
        found = []
        for side in self.sides_of(cell):
            other = self.cell_on_side(maze, cell, side)
            if other is not None:
                found.append(other)
        return _unique(found)

    def accessible_neighbors(self, maze: Maze, cell: Cell) -> list[Cell]:
        found = []
        for side in self.sides_of(cell):
            if not self.has_side(maze, cell, side):
                other = self.cell_on_side(maze, cell, side)
                if other is not None:
                    found.append(other)
        return _unique(found)

    def closed_neighbors(self, maze: Maze, cell: Cell) -> list[Cell]:
        """Neighbors that ``connect`` would join to ``cell`` through a wall."""
        accessible = {other.index for other in self.accessible_neighbors(maze, cell)}
        return [other for other in self.neighbors(maze, cell) if other.index not in accessible]

    def side_toward(self, maze: Maze, cell: Cell, other: Cell) -> CellSide | None:
        for side in self.sides_of(cell):
            if self.cell_on_side(maze, cell, side) is other:
                return side
        return None

    def connect(self, maze: Maze, cell: Cell, other: Cell) -> None:
        side = self.side_toward(maze, cell, other) if other.maze is maze else None
        if side is None:
            raise InvalidCellOperationError("connect", cell, other)
        cell.value &= ~side.bit
        other.value &= ~side.opposite.bit

    def crossed_cells(self, maze: Maze, cell: Cell, other: Cell) -> list[Cell]:
        """Cells a passage between two accessible neighbors tunnels under."""
        return []

    def distance(self, a: Any, b: Any) -> float:
        """Lower bound on the number of moves between two positions."""
        return abs(a.x - b.x) + abs(a.y - b.y)


class ColumnGridTopology(GridTopology):
    """
    Planar grid stored as columns of varying height.

    Column ``x`` holds rows ``row_offsets[x]`` to
    ``row_offsets[x] + column_heights[x] - 1``.
    """

    def __init__(self, column_heights: list[int], row_offsets: list[int] | None = None):
        self.column_heights = column_heights
        self.row_offsets = row_offsets or [0] * len(column_heights)

    def positions(self) -> list[Position2D]:
        return [
            Position2D(x, y + offset)
            for x, (rows, offset) in enumerate(zip(self.column_heights, self.row_offsets, strict=True))
            for y in range(rows)
        ]

    def cell_on_side(self, maze: Maze, cell: Cell, side: CellSide) -> Cell | None:
        if side.offset is None:
            return None
        return maze.cell_at(cell.position.offset(*side.offset))

    def opening_cell(self, maze: Maze, opening: OpeningPosition) -> Cell | None:
        columns = len(self.column_heights)
        x = opening.resolve_x(columns)
        if not 0 <= x < columns:
            return None
        rows = self.column_heights[x]
        y = opening.resolve_y(rows)
        if not 0 <= y < rows:
            return None
        return maze.cell_at(Position2D(x, y + self.row_offsets[x]))


class SquareTopology(ColumnGridTopology):
    """Rectangular grid of square cells with four sides."""

    kind = MazeTopology.SQUARE
    side_type = SquareSide

    def __init__(self, width: int, height: int):
        validate_parameter_value(width, "width", int, (1, math.inf), component=self.kind.value)
        validate_parameter_value(height, "height", int, (1, math.inf), component=self.kind.value)
        self.width = width
        self.height = height
        super().__init__([height] * width)

    def describe(self) -> dict[str, Any]:
        return {"width": self.width, "height": self.height}


class SinglePathTopology(SquareTopology):
    """
    Square grid holding a single path through every cell.

    Mazes are generated on a half-resolution square base and then expanded
    by ``mazegen.geometry.single_path.apply_single_path``.
    """

    kind = MazeTopology.SINGLE_PATH

    def __init__(self, width: int, height: int):
        super().__init__(width, height)
        for name, value in (("width", width), ("height", height)):
            if value % 2 != 0:
                raise ConfigurationError(name, value, component=self.kind.value, reason="must be even")

    def base_topology(self) -> SquareTopology:
        return SquareTopology(self.width // 2, self.height // 2)


class WeavingSquareTopology(SquareTopology):
    """
    Square grid where passages may cross under straight perpendicular passages.

    A neighbor may sit up to ``max_weave + 1`` cells away in a straight line;
    every crossed cell gets the tunnel flag when the two cells are connected.
    """

    kind = MazeTopology.WEAVING_SQUARE
    dynamic_neighbors = True

    def __init__(self, width: int, height: int, max_weave: int = 1):
        super().__init__(width, height)
        validate_parameter_value(max_weave, "max_weave", int, (0, math.inf), component=self.kind.value)
        self.max_weave = max_weave

    def describe(self) -> dict[str, Any]:
        return {**super().describe(), "max_weave": self.max_weave}

    @staticmethod
    def has_tunnel(cell: Cell) -> bool:
        return cell.value & TUNNEL_FLAG != 0

    @staticmethod
    def _is_passage_parallel_to(cell: Cell, side: CellSide) -> bool:
        # A straight passage has walls only on the two sides facing the traveler
        if side in (SquareSide.NORTH, SquareSide.SOUTH):
            return cell.value == SquareSide.NORTH.bit | SquareSide.SOUTH.bit
        return cell.value == SquareSide.WEST.bit | SquareSide.EAST.bit

    def full_walls(self, cell: Cell) -> int:
        return SquareSide.all_walls()

    def _find_neighbors(self, maze: Maze, cell: Cell) -> list[Cell]:
        found = []
        for side in SquareSide:
            position = cell.position
            for i in range(self.max_weave + 1):
                position = position.offset(*side.offset)
                other = maze.cell_at(position)
                if other is None:
                    break
                if i > 0 and self.has_tunnel(other):
                    break
                found.append(other)
                if not self._is_passage_parallel_to(other, side):
                    break
        return found

    def accessible_neighbors(self, maze: Maze, cell: Cell) -> list[Cell]:
        found = []
        for side in SquareSide:
            if cell.value & side.bit:
                continue
            position = cell.position
            for _ in range(self.max_weave + 1):
                position = position.offset(*side.offset)
                other = maze.cell_at(position)
                if other is None:
                    break
                if not self.has_tunnel(other) or not other.value & side.bit:
                    found.append(other)
                    break
        return found

    def closed_neighbors(self, maze: Maze, cell: Cell) -> list[Cell]:
        # A side already opened for a tunnel leads past the adjacent cell
        found = []
        for other in self._find_neighbors(maze, cell):
            side = self.side_toward(maze, cell, other)
            if cell.value & side.bit and other.value & side.opposite.bit:
                found.append(other)
        return found

    def side_toward(self, maze: Maze, cell: Cell, other: Cell) -> CellSide | None:
        dx = other.position.x - cell.position.x
        dy = other.position.y - cell.position.y
        if dx != 0 and dy == 0:
            return SquareSide.EAST if dx > 0 else SquareSide.WEST
        if dy != 0 and dx == 0:
            return SquareSide.SOUTH if dy > 0 else SquareSide.NORTH
        return None

    def connect(self, maze: Maze, cell: Cell, other: Cell) -> None:
        if other.maze is not maze or all(n is not other for n in self._find_neighbors(maze, cell)):
            raise InvalidCellOperationError("connect", cell, other)
        side = self.side_toward(maze, cell, other)
        cell.value &= ~side.bit
        for crossed in self.crossed_cells(maze, cell, other):
            crossed.value |= TUNNEL_FLAG
        other.value &= ~side.opposite.bit

    def crossed_cells(self, maze: Maze, cell: Cell, other: Cell) -> list[Cell]:
        side = self.side_toward(maze, cell, other)
        if side is None:
            return []
        span = abs(other.position.x - cell.position.x) + abs(other.position.y - cell.position.y)
        crossed = []
        position = cell.position
        for _ in range(span - 1):
            position = position.offset(*side.offset)
            crossed.append(maze.cell_at(position))
        return crossed

    def distance(self, a: Any, b: Any) -> float:
        return (abs(a.x - b.x) + abs(a.y - b.y)) / (self.max_weave + 1)


class OctagonSquareTopology(ColumnGridTopology):
    """
    Grid alternating octagons and squares.

    Cells where ``x + y`` is even are octagons with eight sides; the others
    are squares with four.
    """

    kind = MazeTopology.OCTAGON_SQUARE
    side_type = DiagonalSide

    def __init__(self, width: int, height: int):
        validate_parameter_value(width, "width", int, (1, math.inf), component=self.kind.value)
        validate_parameter_value(height, "height", int, (1, math.inf), component=self.kind.value)
        self.width = width
        self.height = height
        super().__init__([height] * width)

    def describe(self) -> dict[str, Any]:
        return {"width": self.width, "height": self.height}

    @staticmethod
    def is_octagon(cell: Cell) -> bool:
        return (cell.position.x + cell.position.y) % 2 == 0

    def sides_of(self, cell: Cell) -> tuple[CellSide, ...]:
        return tuple(DiagonalSide) if self.is_octagon(cell) else SQUARE_CELL_SIDES

    def cell_on_side(self, maze: Maze, cell: Cell, side: CellSide) -> Cell | None:
        if side.is_diagonal and not self.is_octagon(cell):
            return None
        return super().cell_on_side(maze, cell, side)

    def distance(self, a: Any, b: Any) -> float:
        return max(abs(a.x - b.x), abs(a.y - b.y))


class DiagonalSquareTopology(ColumnGridTopology):
    """
    Square grid whose cells also connect diagonally.

    A diagonal neighbor is unavailable while the two cells flanking that
    diagonal are connected to each other, since the passages would cross.
    """

    kind = MazeTopology.DIAGONAL_SQUARE
    side_type = DiagonalSide
    dynamic_neighbors = True

    def __init__(self, width: int, height: int):
        validate_parameter_value(width, "width", int, (1, math.inf), component=self.kind.value)
        validate_parameter_value(height, "height", int, (1, math.inf), component=self.kind.value)
        self.width = width
        self.height = height
        super().__init__([height] * width)

    def describe(self) -> dict[str, Any]:
        return {"width": self.width, "height": self.height}

    def has_crossing_passage(self, maze: Maze, cell: Cell, side: CellSide) -> bool:
        """Whether the diagonal on ``side`` is blocked by a passage crossing it."""
        if not side.is_diagonal:
            return False
        dx, dy = side.offset
        first = maze.cell_at(cell.position.offset(dx, 0))
        second = maze.cell_at(cell.position.offset(0, dy))
        if first is None or second is None:
            return False
        crossing = DiagonalSide[_diagonal_name(-dx, dy)]
        return not first.value & crossing.bit

    def _find_neighbors(self, maze: Maze, cell: Cell) -> list[Cell]:
        found = []
        for side in DiagonalSide:
            other = self.cell_on_side(maze, cell, side)
            if other is not None and not self.has_crossing_passage(maze, cell, side):
                found.append(other)
        return found

    def accessible_neighbors(self, maze: Maze, cell: Cell) -> list[Cell]:
        found = []
        for side in DiagonalSide:
            if cell.value & side.bit:
                continue
            other = self.cell_on_side(maze, cell, side)
            if other is not None and not self.has_crossing_passage(maze, cell, side):
                found.append(other)
        return found

    def distance(self, a: Any, b: Any) -> float:
        return max(abs(a.x - b.x), abs(a.y - b.y))


def _diagonal_name(dx: int, dy: int) -> str:
    return ("NORTH" if dy < 0 else "SOUTH") + ("EAST" if dx > 0 else "WEST")


def _shape_columns(shape: MazeShape, width: int, height: int, triangular: bool) -> tuple[list[int], list[int]]:
    """Column heights and row offsets of a shaped triangular or hexagonal grid."""
    heights: list[int] = []
    offsets: list[int] = []

    if triangular:
        columns = 2 * width - 1
        if shape is MazeShape.RECTANGLE:
            heights = [height] * columns
            offsets = [0] * columns
        elif shape is MazeShape.HEXAGON:
            columns = 4 * width - 1
            for x in range(columns):
                if x < width:
                    half, offset = x + 1, width - x - 1
                elif x >= columns - width:
                    half, offset = columns - x, width + x - columns
                else:
                    half, offset = width, 0
                heights.append(2 * half)
                offsets.append(offset + width % 2)
        elif shape is MazeShape.TRIANGLE:
            heights = [width - abs(x - columns // 2) for x in range(columns)]
            offsets = [0] * columns
        else:
            columns = 2 * width + height - 1
            for x in range(columns):
                rows = height
                if x < height:
                    rows -= height - x - 1
                if x >= columns - height:
                    rows -= x - (columns - height)
                heights.append(rows)
                offsets.append(max(0, height - columns + x))
    else:
        columns = width
        if shape is MazeShape.RECTANGLE:
            heights = [height] * columns
            offsets = [x // 2 for x in range(columns)]
        elif shape is MazeShape.HEXAGON:
            columns = 2 * width - 1
            heights = [columns - abs(x - width + 1) for x in range(columns)]
            offsets = [0 if x < width else x - width + 1 for x in range(columns)]
        elif shape is MazeShape.TRIANGLE:
            heights = [x + 1 for x in range(columns)]
            offsets = [0] * columns
        else:
            heights = [height] * columns
            offsets = [0] * columns

    return heights, offsets


class _ShapedTopology(ColumnGridTopology):
    triangular: ClassVar[bool]

    def __init__(self, width: int, height: int | None = None, shape: MazeShape | str = MazeShape.RECTANGLE):
        shape = MazeShape(shape)
        # Triangle and hexagon outlines only have a size
        if shape in (MazeShape.TRIANGLE, MazeShape.HEXAGON) or height is None:
            height = width
        validate_parameter_value(width, "width", int, (1, math.inf), component=self.kind.value)
        validate_parameter_value(height, "height", int, (1, math.inf), component=self.kind.value)
        if self.triangular and shape is MazeShape.RECTANGLE and width == 1 and height > 1:
            # The top triangle of a single column points down and has no neighbor
            raise ConfigurationError(
                "width", width, component=self.kind.value, reason="a single column needs height 1 or width >= 2"
            )
        self.width = width
        self.height = height
        self.shape = shape
        super().__init__(*_shape_columns(shape, width, height, self.triangular))

    def describe(self) -> dict[str, Any]:
        return {"width": self.width, "height": self.height, "shape": self.shape.value}


class TriangularTopology(_ShapedTopology):
    """Grid of triangles alternately pointing down and up."""

    kind = MazeTopology.TRIANGULAR
    side_type = TriangleSide
    triangular = True

    def cell_on_side(self, maze: Maze, cell: Cell, side: CellSide) -> Cell | None:
        if side is TriangleSide.BASE:
            x, y = cell.position.x, cell.position.y
            return maze.cell_at(Position2D(x, y - 1 if (x + y) % 2 == 0 else y + 1))
        return super().cell_on_side(maze, cell, side)


class HexagonalTopology(_ShapedTopology):
    """Grid of hexagons in axial coordinates."""

    kind = MazeTopology.HEXAGONAL
    side_type = HexSide
    triangular = False

    def distance(self, a: Any, b: Any) -> float:
        dx = a.x - b.x
        dy = a.y - b.y
        return max(abs(dx), abs(dy), abs(dx - dy))


class CircularTopology(GridTopology):
    """
    Concentric rings of cells around a single center cell.

    A ring keeps the width of the ring inside it until its circumference
    reaches ``subdivision`` times that width; it then takes the largest
    multiple of the inner width, at least twice as many cells.
    """

    kind = MazeTopology.CIRCULAR
    side_type = RingSide

    def __init__(self, radius: int, center_radius: float = 1.0, subdivision: float = 1.5):
        validate_parameter_value(radius, "radius", int, (1, math.inf), component=self.kind.value)
        validate_parameter_value(
            center_radius,
            "center_radius",
            (int, float),
            (0, math.inf),
            component=self.kind.value,
            exclusive_minimum=True,
        )
        validate_parameter_value(
            subdivision, "subdivision", (int, float), (0, math.inf), component=self.kind.value, exclusive_minimum=True
        )
        self.radius = radius
        self.center_radius = center_radius
        self.subdivision = subdivision
        self.row_widths = self._compute_row_widths()

    def _compute_row_widths(self) -> list[int]:
        widths = []
        last_width = 1.0
        for r in range(self.radius):
            width = 0.0 if r == 0 else (r + self.center_radius - 1) * math.tau
            if width < last_width * self.subdivision:
                width = last_width
            else:
                width = max(width - width % last_width, last_width * 2)
                last_width = width
            widths.append(int(width))
        return widths

    def describe(self) -> dict[str, Any]:
        return {"radius": self.radius, "center_radius": self.center_radius, "subdivision": self.subdivision}

    def positions(self) -> list[PositionPolar]:
        return [PositionPolar(x, r, width) for r, width in enumerate(self.row_widths) for x in range(width)]

    def normalize(self, position: PositionPolar) -> PositionPolar:
        if 0 <= position.r < self.radius:
            width = self.row_widths[position.r]
            return PositionPolar(position.x % width, position.r, width)
        return position

    def inward_cell(self, maze: Maze, cell: Cell) -> Cell | None:
        r = cell.position.r
        if r == 0:
            return None
        inner = self.row_widths[r - 1]
        return maze.cell_at(PositionPolar(cell.position.x * inner // self.row_widths[r], r - 1))

    def outward_cells(self, maze: Maze, cell: Cell) -> list[Cell]:
        r = cell.position.r
        if r == self.radius - 1:
            return []
        factor = self.row_widths[r + 1] // self.row_widths[r]
        start = cell.position.x * factor
        return [maze.cell_at(PositionPolar(x, r + 1)) for x in range(start, start + factor)]

    def cell_on_side(self, maze: Maze, cell: Cell, side: CellSide) -> Cell | None:
        if side is RingSide.OUT:
            outward = self.outward_cells(maze, cell)
            return outward[0] if outward else None
        if side is RingSide.IN:
            return self.inward_cell(maze, cell)
        other = maze.cell_at(cell.position.offset(*side.offset))
        # Stepping around a single-cell ring lands on the cell itself
        return None if other is cell else other

    def _find_neighbors(self, maze: Maze, cell: Cell) -> list[Cell]:
        found = list(self.outward_cells(maze, cell))
        for side in (RingSide.IN, RingSide.CW, RingSide.CCW):
            other = self.cell_on_side(maze, cell, side)
            if other is not None:
                found.append(other)
        return _unique(found)

    def has_side(self, maze: Maze, cell: Cell, side: CellSide) -> bool:
        if side is RingSide.OUT:
            outward = self.outward_cells(maze, cell)
            if outward:
                # The OUT bit is meaningless when several cells lie outward
                return all(other.value & RingSide.IN.bit for other in outward)
        return cell.value & side.bit != 0

    def accessible_neighbors(self, maze: Maze, cell: Cell) -> list[Cell]:
        found = [other for other in self.outward_cells(maze, cell) if not other.value & RingSide.IN.bit]
        for side in (RingSide.IN, RingSide.CW, RingSide.CCW):
            if not cell.value & side.bit:
                other = self.cell_on_side(maze, cell, side)
                if other is not None:
                    found.append(other)
        return _unique(found)

    def side_toward(self, maze: Maze, cell: Cell, other: Cell) -> CellSide | None:
        if any(outward is other for outward in self.outward_cells(maze, cell)):
            return RingSide.OUT
        for side in (RingSide.IN, RingSide.CW, RingSide.CCW):
            if self.cell_on_side(maze, cell, side) is other:
                return side
        return None

    def opening_cell(self, maze: Maze, opening: OpeningPosition) -> Cell | None:
        r = opening.resolve_y(self.radius)
        if not 0 <= r < self.radius:
            return None
        width = self.row_widths[r]
        x = opening.resolve_x(width)
        if not 0 <= x < width:
            return None
        return maze.cell_at(PositionPolar(x, r))

    def distance(self, a: Any, b: Any) -> float:
        return abs(a.r - b.r)


_TOPOLOGY_CLASSES: dict[MazeTopology, type[GridTopology]] = {
    MazeTopology.SQUARE: SquareTopology,
    MazeTopology.TRIANGULAR: TriangularTopology,
    MazeTopology.HEXAGONAL: HexagonalTopology,
    MazeTopology.OCTAGON_SQUARE: OctagonSquareTopology,
    MazeTopology.DIAGONAL_SQUARE: DiagonalSquareTopology,
    MazeTopology.WEAVING_SQUARE: WeavingSquareTopology,
    MazeTopology.CIRCULAR: CircularTopology,
    MazeTopology.SINGLE_PATH: SinglePathTopology,
}


def create_topology(kind: MazeTopology | str, **dimensions: Any) -> GridTopology:
    """
    Build the topology strategy for a maze family.

    Args:
        kind: Topology tag or its string value
        **dimensions: Constructor arguments of the topology (width, height,
            shape, max_weave, radius, center_radius, subdivision)

    Returns:
        Configured topology
    """
    return _TOPOLOGY_CLASSES[MazeTopology(kind)](**dimensions)
