"""
Read-only numpy views of a maze for renderers.

``to_numpy_array`` rasterizes square mazes; the per-cell arrays work for
every topology and are indexed like ``maze.cells``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from mazegen.utils.exceptions import UnsupportedTopologyError

from .sides import SquareSide
from .topology import MazeTopology

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from .maze import Maze

_RASTER_TOPOLOGIES = (MazeTopology.SQUARE, MazeTopology.SINGLE_PATH)


def to_numpy_array(maze: Maze, wall_thickness: int = 1) -> NDArray[np.int32]:
    """
    Convert a square maze to a raster.

    Args:
        maze: Square or single-path maze
        wall_thickness: Thickness of walls in pixels

    Returns:
        Array of shape ``(rows, cols)`` where 1 = wall, 0 = passage;
        openings show as gaps in the border
    """
    if maze.kind not in _RASTER_TOPOLOGIES:
        raise UnsupportedTopologyError("to_numpy_array", maze.kind, list(_RASTER_TOPOLOGIES))

    cell_size = 2 * wall_thickness + 1
    height = maze.topology.height * cell_size + wall_thickness
    width = maze.topology.width * cell_size + wall_thickness

    raster = np.ones((height, width), dtype=np.int32)

    for cell in maze.cells:
        r_start = cell.position.y * cell_size + wall_thickness
        c_start = cell.position.x * cell_size + wall_thickness
        span = slice(r_start, r_start + cell_size - wall_thickness)
        cols = slice(c_start, c_start + cell_size - wall_thickness)

        raster[span, cols] = 0

        if not cell.has_side(SquareSide.NORTH):
            raster[r_start - wall_thickness : r_start, cols] = 0
        if not cell.has_side(SquareSide.SOUTH):
            raster[span.stop : span.stop + wall_thickness, cols] = 0
        if not cell.has_side(SquareSide.WEST):
            raster[span, c_start - wall_thickness : c_start] = 0
        if not cell.has_side(SquareSide.EAST):
            raster[span, cols.stop : cols.stop + wall_thickness] = 0

    return raster


def wall_values(maze: Maze) -> NDArray[np.int32]:
    """Wall bitmask of every cell."""
    return np.array([cell.value for cell in maze.cells], dtype=np.int32)


def distance_values(maze: Maze) -> NDArray[np.int32]:
    """Distance map value of every cell, -1 where unreached or unmapped."""
    return np.array([cell.distance for cell in maze.cells], dtype=np.int32)


def tunnel_distance_values(maze: Maze) -> NDArray[np.int32]:
    """Distance map value of the tunnel under every cell, -1 where there is none."""
    return np.array([cell.tunnel_distance for cell in maze.cells], dtype=np.int32)


def solution_mask(maze: Maze) -> NDArray[np.bool_]:
    """Whether each cell lies on the solution path."""
    return np.array([cell.on_solution_path for cell in maze.cells], dtype=bool)
