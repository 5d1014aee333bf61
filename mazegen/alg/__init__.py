"""
Maze algorithms: generators, braiding, path search and verification.
"""

from __future__ import annotations

from .braiding import Braiding, braid
from .generators import (
    ALGORITHM_ALIASES,
    BaseGenerator,
    MazeAlgorithm,
    generate_maze,
    get_generator,
    resolve_algorithm,
)
from .path_search import clear_distance_map, find_path, generate_distance_map, solve
from .verification import count_dead_ends, count_passages, is_consistent, verify_perfect_maze

__all__ = [
    # Generation
    "ALGORITHM_ALIASES",
    "BaseGenerator",
    "MazeAlgorithm",
    "generate_maze",
    "get_generator",
    "resolve_algorithm",
    # Post-processing
    "Braiding",
    "braid",
    # Search
    "clear_distance_map",
    "find_path",
    "generate_distance_map",
    "solve",
    # Verification
    "count_dead_ends",
    "count_passages",
    "is_consistent",
    "verify_perfect_maze",
]
