"""
Single-path (unicursal) transform.

Every cell of a half-resolution perfect maze becomes a 2x2 block. The base
walls are kept and every base passage is split down the middle by a wall,
which turns the walls of the base maze into one loop visiting every cell.
Closing the south wall of the top-left cell cuts the loop into a path from
``(0, 0)`` to ``(0, 1)``.
"""

from __future__ import annotations

from collections import deque

from mazegen.utils.exceptions import ConfigurationError

from .maze import Maze
from .positions import Position2D
from .sides import SquareSide
from .topology import MazeTopology


def apply_single_path(target: Maze, base: Maze) -> None:
    """
    Write the single-path expansion of ``base`` into ``target``.

    Args:
        target: Single-path maze, twice as wide and tall as ``base``
        base: Generated square maze
    """
    width = base.topology.width
    height = base.topology.height
    if target.kind is not MazeTopology.SINGLE_PATH or (target.topology.width, target.topology.height) != (
        2 * width,
        2 * height,
    ):
        raise ConfigurationError(
            "base",
            base,
            component="single_path",
            reason="target must be a single-path maze twice the size of the base",
        )

    def block(x: int, y: int):
        return target.cell_at(Position2D(x, y))

    target.reset_all()

    # Copy the base walls onto the outline of each block
    for cell in base.cells:
        x, y = cell.position.x, cell.position.y
        nw, ne = block(2 * x, 2 * y), block(2 * x + 1, 2 * y)
        sw, se = block(2 * x, 2 * y + 1), block(2 * x + 1, 2 * y + 1)
        if cell.has_side(SquareSide.WEST):
            nw.close_side(SquareSide.WEST)
            sw.close_side(SquareSide.WEST)
        if cell.has_side(SquareSide.NORTH):
            nw.close_side(SquareSide.NORTH)
            ne.close_side(SquareSide.NORTH)
        if x == width - 1 and cell.has_side(SquareSide.EAST):
            ne.close_side(SquareSide.EAST)
            se.close_side(SquareSide.EAST)
        if y == height - 1 and cell.has_side(SquareSide.SOUTH):
            sw.close_side(SquareSide.SOUTH)
            se.close_side(SquareSide.SOUTH)

    # Split every base passage with a wall
    start = base.cell_at(Position2D(0, 0))
    seen = {start.index}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        x1, y1 = cell.position.x, cell.position.y
        for neighbor in cell.accessible_neighbors:
            if neighbor.index in seen:
                continue
            x2, y2 = neighbor.position.x, neighbor.position.y
            if y1 == y2:
                cx = x1 + x2
                block(cx, 2 * y1).close_side(SquareSide.SOUTH)
                block(cx + 1, 2 * y1).close_side(SquareSide.SOUTH)
            else:
                cy = y1 + y2
                block(2 * x1, cy).close_side(SquareSide.EAST)
                block(2 * x1, cy + 1).close_side(SquareSide.EAST)
            seen.add(neighbor.index)
            queue.append(neighbor)

    block(0, 0).close_side(SquareSide.SOUTH)
