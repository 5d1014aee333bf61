"""
Dead-end removal (braiding).

Braiding connects dead ends to one of their closed neighbors, adding loops
to a perfect maze. Connecting a dead end to a cell that is not a dead end
removes exactly one dead end; connecting two dead ends removes two.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from mazegen.utils.exceptions import ConfigurationError, validate_parameter_value
from mazegen.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from mazegen.geometry.maze import Maze

logger = get_logger(__name__)


class Braiding:
    """
    Amount of dead ends to remove, as a count or a fraction of all dead ends.

    Use ``Braiding.by_count`` or ``Braiding.by_percentage``, or
    ``Braiding.parse`` for an int or a ``"NN%"`` string.
    """

    def __init__(self, value: int | float, by_count: bool):
        if by_count:
            validate_parameter_value(value, "braid_count", int, (0, float("inf")), component="braiding")
        else:
            validate_parameter_value(value, "braid_percentage", (int, float), (0, 1), component="braiding")
        self.value = value
        self.by_count = by_count

    @classmethod
    def by_count(cls, count: int) -> Braiding:
        return cls(count, by_count=True)

    @classmethod
    def by_percentage(cls, fraction: float) -> Braiding:
        """Braid a fraction of the dead ends, ``fraction`` in [0, 1]."""
        return cls(fraction, by_count=False)

    @classmethod
    def parse(cls, value: Braiding | int | float | str) -> Braiding:
        """
        Parse a braid setting.

        Examples:
            >>> Braiding.parse(10)       # ten dead ends
            >>> Braiding.parse("50%")    # half of the dead ends
            >>> Braiding.parse(0.25)     # a quarter of the dead ends
        """
        if isinstance(value, Braiding):
            return value
        if isinstance(value, str):
            text = value.strip()
            try:
                if text.endswith("%"):
                    return cls.by_percentage(float(text[:-1]) / 100)
                return cls.by_count(int(text))
            except ValueError as e:
                raise ConfigurationError("braid", value, reason="expected a count or a percentage") from e
        if isinstance(value, float):
            return cls.by_percentage(value)
        return cls.by_count(value)

    def target(self, dead_end_count: int) -> int:
        """Number of dead ends to remove out of ``dead_end_count``."""
        if self.by_count:
            return min(self.value, dead_end_count)
        return round(dead_end_count * self.value)

    def __repr__(self) -> str:
        return f"Braiding({self.value})" if self.by_count else f"Braiding({self.value:.0%})"


def braid(maze: Maze, braiding: Braiding | int | float | str) -> int:
    """
    Remove dead ends from a generated maze.

    Dead ends are visited in random order. Each one is connected to a random
    closed neighbor, preferring neighbors that are not dead ends; pairing two
    dead ends is only done while at least two removals are still owed. If
    the first pass falls short the dead ends are collected again. When only
    one removal is owed and every candidate would pair two dead ends, one
    pair is connected anyway, so the result may exceed the target by one.

    Args:
        maze: Generated maze
        braiding: Braid setting, see ``Braiding.parse``

    Returns:
        Number of dead ends removed
    """
    braiding = Braiding.parse(braiding)
    initial = len(maze.dead_ends())
    remaining = braiding.target(initial)

    while remaining > 0:
        dead_ends = maze.dead_ends()
        if not dead_ends:
            break
        random.shuffle(dead_ends)

        deferred = []
        progressed = False
        for cell in dead_ends:
            if remaining <= 0:
                break
            if not cell.is_dead_end:
                continue
            closed = cell.closed_neighbors
            if not closed:
                continue

            preferred = [other for other in closed if not other.is_dead_end]
            if preferred:
                cell.connect_with(random.choice(preferred))
                remaining -= 1
                progressed = True
            elif remaining >= 2:
                cell.connect_with(random.choice(closed))
                remaining -= 2
                progressed = True
            else:
                deferred.append(cell)

        if remaining > 0 and not progressed:
            for cell in deferred:
                closed = cell.closed_neighbors if cell.is_dead_end else []
                if closed:
                    cell.connect_with(random.choice(closed))
                    break
            break

    removed = initial - len(maze.dead_ends())
    logger.debug(f"Braided {removed} of {initial} dead ends ({braiding!r})")
    return removed
