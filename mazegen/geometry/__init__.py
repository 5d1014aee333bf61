"""
Maze geometry: topologies, cells, mazes and boundary openings.

Topologies:
- SQUARE: rectangular grid, four sides per cell
- TRIANGULAR: triangles, three sides, shaped outlines
- HEXAGONAL: hexagons, six sides, shaped outlines
- OCTAGON_SQUARE: octagons with eight sides alternating with squares
- DIAGONAL_SQUARE: square grid with diagonal passages
- WEAVING_SQUARE: square grid with passages crossing under others
- CIRCULAR: concentric rings around a center cell
- SINGLE_PATH: square grid holding one path through every cell
"""

from __future__ import annotations

from .cell import Cell
from .export import distance_values, solution_mask, to_numpy_array, tunnel_distance_values, wall_values
from .maze import Maze, create_maze
from .openings import OpeningAnchor, OpeningPosition, create_opening, create_openings
from .positions import Position2D, PositionPolar
from .sides import CellSide, DiagonalSide, HexSide, RingSide, SquareSide, TriangleSide
from .single_path import apply_single_path
from .topology import (
    CircularTopology,
    DiagonalSquareTopology,
    GridTopology,
    HexagonalTopology,
    MazeShape,
    MazeTopology,
    OctagonSquareTopology,
    SinglePathTopology,
    SquareTopology,
    TriangularTopology,
    WeavingSquareTopology,
    create_topology,
)

__all__ = [
    # Core
    "Cell",
    "Maze",
    "create_maze",
    # Topologies
    "CircularTopology",
    "DiagonalSquareTopology",
    "GridTopology",
    "HexagonalTopology",
    "MazeShape",
    "MazeTopology",
    "OctagonSquareTopology",
    "SinglePathTopology",
    "SquareTopology",
    "TriangularTopology",
    "WeavingSquareTopology",
    "create_topology",
    # Positions and sides
    "CellSide",
    "DiagonalSide",
    "HexSide",
    "Position2D",
    "PositionPolar",
    "RingSide",
    "SquareSide",
    "TriangleSide",
    # Openings
    "OpeningAnchor",
    "OpeningPosition",
    "create_opening",
    "create_openings",
    # Transforms and export
    "apply_single_path",
    "distance_values",
    "solution_mask",
    "to_numpy_array",
    "tunnel_distance_values",
    "wall_values",
]
