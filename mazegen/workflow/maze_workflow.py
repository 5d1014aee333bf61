"""
Batch maze generation workflow.

Runs every maze set of a configuration through the same pipeline:
create the maze, generate it, carve openings, braid, solve and compute the
distance map. Each set seeds the ``random`` module when it has a seed, so a
configuration with seeds always produces the same mazes.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from mazegen.alg.braiding import braid
from mazegen.alg.generators import get_generator
from mazegen.alg.path_search import generate_distance_map, solve
from mazegen.alg.verification import verify_perfect_maze
from mazegen.geometry.maze import Maze
from mazegen.geometry.openings import create_openings
from mazegen.utils.exceptions import MazeError
from mazegen.utils.maze_logging import (
    LoggedOperation,
    get_logger,
    log_generation_start,
    log_generation_summary,
    log_performance_metric,
    log_validation_error,
)

if TYPE_CHECKING:
    from mazegen.config.maze_config import MazeGenerationConfig, MazeSetConfig

logger = get_logger(__name__)


@dataclass
class GeneratedMaze:
    """A maze produced by the workflow with its processing statistics."""

    name: str
    set_name: str
    maze: Maze
    statistics: dict[str, Any] = field(default_factory=dict)


class MazeWorkflow:
    """
    Generate every maze described by a configuration.

    Args:
        config: Validated generation configuration
        verify: Check that each maze is perfect before braiding

    Example:
        >>> config = load_maze_config("mazes.yaml")
        >>> for result in MazeWorkflow(config).run():
        ...     print(result.name, result.statistics)
    """

    def __init__(self, config: MazeGenerationConfig, verify: bool = False):
        self.config = config
        self.verify = verify
        self.results: list[GeneratedMaze] = []

    def run(self) -> list[GeneratedMaze]:
        """Run all maze sets in order and return the generated mazes."""
        self.results = []
        start = time.perf_counter()
        for maze_set in self.config.mazes:
            self.results.extend(self.run_set(maze_set))
        metrics = {"sets": len(self.config.mazes), "mazes": len(self.results)}
        log_performance_metric(logger, "maze generation", time.perf_counter() - start, metrics)
        return self.results

    def run_set(self, maze_set: MazeSetConfig) -> list[GeneratedMaze]:
        """Generate the ``count`` mazes of one set."""
        log_generation_start(logger, maze_set.name, maze_set.model_dump(exclude_none=True, mode="json"))
        if maze_set.seed is not None:
            random.seed(maze_set.seed)

        try:
            generator = get_generator(maze_set.algorithm.name, **maze_set.algorithm.generator_options())
            topology = maze_set.build_topology()
        except MazeError as e:
            log_validation_error(logger, maze_set.name, str(e), e.suggested_action)
            raise

        results = []
        for i in range(maze_set.count):
            name = maze_set.name if maze_set.count == 1 else f"{maze_set.name}-{i + 1}"
            maze = Maze(topology)
            statistics = self._process(maze_set, generator, maze)
            log_generation_summary(logger, name, statistics)
            results.append(GeneratedMaze(name, maze_set.name, maze, statistics))
        return results

    def _process(self, maze_set: MazeSetConfig, generator, maze: Maze) -> dict[str, Any]:
        statistics: dict[str, Any] = {"cells": maze.cell_count}

        with LoggedOperation(logger, f"generate {maze!r}", logging.DEBUG) as op:
            generator.generate(maze)
        statistics["generation_time"] = round(op.duration, 4)

        if self.verify:
            report = verify_perfect_maze(maze)
            if not report["is_perfect"]:
                raise MazeError(
                    "Generated maze is not perfect",
                    component=generator.name,
                    error_code="IMPERFECT_MAZE",
                    diagnostic_data=report,
                )

        create_openings(maze, maze_set.opening_positions())

        braiding = maze_set.braiding()
        if braiding is not None:
            statistics["dead_ends_removed"] = braid(maze, braiding)
        statistics["dead_ends"] = len(maze.dead_ends())

        if maze_set.solve:
            statistics["solution_length"] = len(solve(maze))

        if maze_set.distance_map:
            statistics["max_distance"] = generate_distance_map(maze, maze_set.distance_map_origin())

        return statistics
