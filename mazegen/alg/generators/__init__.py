"""
Perfect maze generation algorithms.

All algorithms produce perfect mazes with two critical properties:
1. Fully Connected: Path exists between any two cells
2. No Loops: Exactly one unique path between any pair of cells

Implemented Algorithms (short alias in parentheses):
- Aldous-Broder (ab): uniform spanning trees, slow to finish
- Wilson's (wi): uniform spanning trees, loop-erased walks
- Recursive Backtracking (rb): long winding paths, few dead ends
- Hunt-and-Kill (hk): long passages, full scans on dead ends
- Prim's (pr): many short dead ends
- Growing Tree (gt): weighted mix of backtracking and Prim's
- Kruskal's (kr): shuffled edges with union-find
- Binary Tree (bt): square only, diagonal bias
- Sidewinder (sw): square only, vertical runs
- Eller's (el): square only, row-by-row sets
- Recursive Division (rd): square only, wall adder

Reference: Jamis Buck, "Mazes for Programmers" (2015)
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from mazegen.utils.exceptions import ConfigurationError

from .aldous_broder import AldousBroderGenerator
from .base_generator import ALL_TOPOLOGIES, DYNAMIC_TOPOLOGIES, SQUARE_ONLY, BaseGenerator, RandomPool
from .binary_tree import BinaryTreeBias, BinaryTreeGenerator
from .eller import EllerGenerator
from .growing_tree import GrowingTreeGenerator
from .hunt_and_kill import HuntAndKillGenerator
from .kruskal import DisjointSet, Edge, KruskalGenerator
from .prim import PrimGenerator
from .recursive_backtracker import RecursiveBacktrackerGenerator
from .recursive_division import RecursiveDivisionGenerator
from .sidewinder import SidewinderGenerator
from .wilson import WilsonGenerator


class MazeAlgorithm(Enum):
    """Available perfect maze generation algorithms."""

    ALDOUS_BRODER = "aldous_broder"
    WILSONS = "wilsons"
    RECURSIVE_BACKTRACKING = "recursive_backtracking"
    HUNT_AND_KILL = "hunt_and_kill"
    PRIMS = "prims"
    GROWING_TREE = "growing_tree"
    KRUSKALS = "kruskals"
    BINARY_TREE = "binary_tree"
    SIDEWINDER = "sidewinder"
    ELLERS = "ellers"
    RECURSIVE_DIVISION = "recursive_division"


GENERATOR_CLASSES: dict[MazeAlgorithm, type[BaseGenerator]] = {
    MazeAlgorithm.ALDOUS_BRODER: AldousBroderGenerator,
    MazeAlgorithm.WILSONS: WilsonGenerator,
    MazeAlgorithm.RECURSIVE_BACKTRACKING: RecursiveBacktrackerGenerator,
    MazeAlgorithm.HUNT_AND_KILL: HuntAndKillGenerator,
    MazeAlgorithm.PRIMS: PrimGenerator,
    MazeAlgorithm.GROWING_TREE: GrowingTreeGenerator,
    MazeAlgorithm.KRUSKALS: KruskalGenerator,
    MazeAlgorithm.BINARY_TREE: BinaryTreeGenerator,
    MazeAlgorithm.SIDEWINDER: SidewinderGenerator,
    MazeAlgorithm.ELLERS: EllerGenerator,
    MazeAlgorithm.RECURSIVE_DIVISION: RecursiveDivisionGenerator,
}

ALGORITHM_ALIASES: dict[str, MazeAlgorithm] = {
    "ab": MazeAlgorithm.ALDOUS_BRODER,
    "wi": MazeAlgorithm.WILSONS,
    "rb": MazeAlgorithm.RECURSIVE_BACKTRACKING,
    "hk": MazeAlgorithm.HUNT_AND_KILL,
    "pr": MazeAlgorithm.PRIMS,
    "gt": MazeAlgorithm.GROWING_TREE,
    "kr": MazeAlgorithm.KRUSKALS,
    "bt": MazeAlgorithm.BINARY_TREE,
    "sw": MazeAlgorithm.SIDEWINDER,
    "el": MazeAlgorithm.ELLERS,
    "rd": MazeAlgorithm.RECURSIVE_DIVISION,
}


def resolve_algorithm(name: MazeAlgorithm | str) -> MazeAlgorithm:
    """
    Resolve an algorithm from its enum, name or short alias.

    Names are case insensitive and accept ``-`` or spaces for ``_``.

    Raises:
        ConfigurationError: If the name is unknown
    """
    if isinstance(name, MazeAlgorithm):
        return name
    key = str(name).strip().lower().replace("-", "_").replace(" ", "_")
    if key in ALGORITHM_ALIASES:
        return ALGORITHM_ALIASES[key]
    try:
        return MazeAlgorithm(key)
    except ValueError as e:
        raise ConfigurationError(
            "algorithm",
            name,
            component="generators",
            reason=f"expected one of {', '.join(sorted(ALGORITHM_ALIASES))} or a full algorithm name",
        ) from e


def get_generator(name: MazeAlgorithm | str, **options: Any) -> BaseGenerator:
    """
    Create a configured generator.

    Args:
        name: Algorithm enum, name or short alias (e.g. ``"rb"``)
        **options: Algorithm options (``bias`` for binary tree,
            ``horizontal_bias``/``vertical_bias`` for Eller's,
            ``random_weight``/``newest_weight``/``oldest_weight`` for growing tree)

    Returns:
        Generator instance

    Raises:
        ConfigurationError: If the name or an option is invalid
    """
    algorithm = resolve_algorithm(name)
    generator_class = GENERATOR_CLASSES[algorithm]
    try:
        return generator_class(**options)
    except TypeError as e:
        raise ConfigurationError(
            "options", options, component=algorithm.value, reason=f"unsupported option for {algorithm.value}"
        ) from e


def generate_maze(maze, algorithm: MazeAlgorithm | str = MazeAlgorithm.RECURSIVE_BACKTRACKING, **options: Any):
    """
    Convenience function to generate a perfect maze in place.

    Args:
        maze: Maze to generate
        algorithm: Generation algorithm
        **options: Algorithm options

    Returns:
        The generated maze

    Example:
        >>> from mazegen.geometry import create_maze
        >>> maze = generate_maze(create_maze("square", width=20, height=20), "rb")
    """
    return get_generator(algorithm, **options).generate(maze)


__all__ = [
    "ALGORITHM_ALIASES",
    "ALL_TOPOLOGIES",
    "DYNAMIC_TOPOLOGIES",
    "GENERATOR_CLASSES",
    "SQUARE_ONLY",
    "AldousBroderGenerator",
    "BaseGenerator",
    "BinaryTreeBias",
    "BinaryTreeGenerator",
    "DisjointSet",
    "Edge",
    "EllerGenerator",
    "GrowingTreeGenerator",
    "HuntAndKillGenerator",
    "KruskalGenerator",
    "MazeAlgorithm",
    "PrimGenerator",
    "RandomPool",
    "RecursiveBacktrackerGenerator",
    "RecursiveDivisionGenerator",
    "SidewinderGenerator",
    "WilsonGenerator",
    "generate_maze",
    "get_generator",
    "resolve_algorithm",
]
