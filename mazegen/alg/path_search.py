"""
Path search over generated mazes.

Provides the solver, an A* search from one cell to another through open
sides, and the distance map, a breadth-first labelling of every cell with
its number of moves from a start cell.

The A* heuristic is the topology's ``distance``, a lower bound on the
number of moves between two positions, so the solver returns a shortest
path on every topology including mazes with loops.
"""

from __future__ import annotations

import heapq
import itertools
from collections import deque
from typing import TYPE_CHECKING

from mazegen.geometry.openings import OpeningPosition
from mazegen.utils.exceptions import InvalidOpeningError, NoPathError, NotEnoughOpeningsError
from mazegen.utils.logging_decorators import logged_operation
from mazegen.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from mazegen.geometry.cell import Cell
    from mazegen.geometry.maze import Maze

    Endpoint = Cell | OpeningPosition | str | list | tuple

logger = get_logger(__name__)


def _resolve_endpoint(maze: Maze, endpoint: Endpoint) -> Cell:
    if not isinstance(endpoint, (OpeningPosition, str, list, tuple)):
        return endpoint
    opening = OpeningPosition.parse(endpoint)
    cell = maze.topology.opening_cell(maze, opening)
    if cell is None:
        raise InvalidOpeningError(opening, "position is outside the maze")
    return cell


def find_path(maze: Maze, start: Cell, end: Cell) -> list[Cell] | None:
    """
    Shortest path between two cells, or None if they are not connected.

    Does not annotate the maze.
    """
    topology = maze.topology
    counter = itertools.count()
    g_score = {start.index: 0}
    came_from: dict[int, Cell] = {}
    closed: set[int] = set()

    frontier = [(topology.distance(start.position, end.position), next(counter), start)]
    while frontier:
        _, _, cell = heapq.heappop(frontier)
        if cell is end:
            path = [cell]
            while cell.index in came_from:
                cell = came_from[cell.index]
                path.append(cell)
            path.reverse()
            return path
        if cell.index in closed:
            continue
        closed.add(cell.index)

        cost = g_score[cell.index] + 1
        for neighbor in cell.accessible_neighbors:
            if neighbor.index in closed or cost >= g_score.get(neighbor.index, cost + 1):
                continue
            g_score[neighbor.index] = cost
            came_from[neighbor.index] = cell
            f_score = cost + topology.distance(neighbor.position, end.position)
            heapq.heappush(frontier, (f_score, next(counter), neighbor))

    logger.debug(f"No path from {start} to {end}, explored {len(closed)} cells")
    return None


@logged_operation("solve")
def solve(maze: Maze, start: Endpoint | None = None, end: Endpoint | None = None) -> list[Cell]:
    """
    Solve a maze and mark the cells of the solution path.

    Args:
        maze: Generated maze
        start: Start cell or opening position; defaults to the first opening
        end: End cell or opening position; defaults to the second opening

    Returns:
        Cells of the path from start to end, both included

    Raises:
        NotEnoughOpeningsError: If an endpoint is omitted and the maze has
            fewer than two openings
        NoPathError: If no path joins the endpoints
    """
    if start is None or end is None:
        if len(maze.openings) < 2:
            raise NotEnoughOpeningsError(len(maze.openings))
        start = maze.openings[0] if start is None else start
        end = maze.openings[1] if end is None else end

    start_cell = _resolve_endpoint(maze, start)
    end_cell = _resolve_endpoint(maze, end)

    for cell in maze.cells:
        cell.on_solution_path = False
    maze.solution = None

    path = find_path(maze, start_cell, end_cell)
    if path is None:
        raise NoPathError(start_cell.position, end_cell.position, len(maze.cells))

    for cell in path:
        cell.on_solution_path = True
    maze.solution = path
    logger.debug(f"Solution of {maze!r}: {len(path)} cells")
    return path


@logged_operation("distance map")
def generate_distance_map(maze: Maze, start: Endpoint | None = None) -> int:
    """
    Label every reachable cell with its number of moves from ``start``.

    In weaving mazes, a move that passes under other cells also labels their
    ``tunnel_distance`` with the distance reached by that move.

    Args:
        maze: Generated maze
        start: Start cell or opening position; a random cell when None

    Returns:
        Largest distance found
    """
    origin = maze.random_cell() if start is None else _resolve_endpoint(maze, start)

    for cell in maze.cells:
        cell.distance = -1
        cell.tunnel_distance = -1
    origin.distance = 0

    topology = maze.topology
    max_distance = 0
    queue = deque([origin])
    while queue:
        cell = queue.popleft()
        for neighbor in cell.accessible_neighbors:
            for crossed in topology.crossed_cells(maze, cell, neighbor):
                if crossed.tunnel_distance < 0:
                    crossed.tunnel_distance = cell.distance + 1
            if neighbor.distance < 0:
                neighbor.distance = cell.distance + 1
                max_distance = max(max_distance, neighbor.distance)
                queue.append(neighbor)

    maze.has_distance_map = True
    return max_distance


def clear_distance_map(maze: Maze) -> None:
    for cell in maze.cells:
        cell.distance = -1
        cell.tunnel_distance = -1
    maze.has_distance_map = False
