"""
Structural checks of generated mazes.

Used by the tests and by the workflow's optional verification step.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mazegen.geometry.maze import Maze


def count_passages(maze: Maze) -> int:
    """Number of open connections between pairs of cells."""
    return sum(len(cell.accessible_neighbors) for cell in maze.cells) // 2


def is_consistent(maze: Maze) -> bool:
    """Whether every cell reachable from a cell can reach it back."""
    for cell in maze.cells:
        for neighbor in cell.accessible_neighbors:
            if not any(back is cell for back in neighbor.accessible_neighbors):
                return False
    return True


def verify_perfect_maze(maze: Maze) -> dict:
    """
    Verify that a maze is perfect (fully connected, no loops).

    A perfect maze must satisfy:
    1. Connectivity: All cells reachable from any cell
    2. Acyclicity: Exactly (n-1) passages for n cells

    Args:
        maze: Maze to verify

    Returns:
        Dictionary with verification results including:
        - is_perfect: Overall validity
        - is_connected: Connectivity check
        - is_no_loops: Acyclicity check
        - is_consistent: Every passage can be walked both ways
        - visited_cells: Number of reachable cells
        - total_cells: Total number of cells
        - passage_count: Number of passages
        - expected_passages: Expected passages for perfect maze
    """
    total_cells = maze.cell_count
    reached = {maze.cells[0].index}
    queue = deque([maze.cells[0]])
    while queue:
        current = queue.popleft()
        for neighbor in current.accessible_neighbors:
            if neighbor.index not in reached:
                reached.add(neighbor.index)
                queue.append(neighbor)

    visited_count = len(reached)
    is_connected = visited_count == total_cells

    passage_count = count_passages(maze)
    expected_passages = total_cells - 1
    is_no_loops = passage_count == expected_passages
    consistent = is_consistent(maze)

    return {
        "is_perfect": is_connected and is_no_loops and consistent,
        "is_connected": is_connected,
        "is_no_loops": is_no_loops,
        "is_consistent": consistent,
        "visited_cells": visited_count,
        "total_cells": total_cells,
        "passage_count": passage_count,
        "expected_passages": expected_passages,
    }


def count_dead_ends(maze: Maze) -> int:
    return len(maze.dead_ends())
