"""
Unit tests for dead-end removal (braiding).
"""

import pytest

from mazegen.alg import Braiding, braid, count_dead_ends, generate_maze, verify_perfect_maze
from mazegen.geometry import create_maze
from mazegen.utils.exceptions import ConfigurationError


def _generated(kind="square", algorithm="rb", **dims):
    dims = dims or {"width": 12, "height": 12}
    return generate_maze(create_maze(kind, **dims), algorithm)


class TestBraidingSetting:
    """Test braid amounts."""

    def test_by_count_target(self):
        """Test that a count is capped by the available dead ends."""
        assert Braiding.by_count(5).target(10) == 5
        assert Braiding.by_count(20).target(7) == 7

    def test_by_percentage_target(self):
        """Test that a percentage is taken of the dead-end count."""
        assert Braiding.by_percentage(0.5).target(10) == 5
        assert Braiding.by_percentage(0.0).target(10) == 0
        assert Braiding.by_percentage(1.0).target(9) == 9

    @pytest.mark.parametrize(
        ("value", "by_count", "amount"),
        [(10, True, 10), ("50%", False, 0.5), (" 25% ", False, 0.25), ("7", True, 7), (0.3, False, 0.3)],
    )
    def test_parse(self, value, by_count, amount):
        """Test counts, percentage strings and fractions."""
        braiding = Braiding.parse(value)

        assert braiding.by_count is by_count
        assert braiding.value == pytest.approx(amount)

    @pytest.mark.parametrize("value", [-1, "abc", "150%", "-5%", 1.5, True])
    def test_invalid(self, value):
        """Test that negative, oversized and malformed amounts are rejected."""
        with pytest.raises(ConfigurationError):
            Braiding.parse(value)

    def test_repr(self):
        """Test the readable form."""
        assert repr(Braiding.by_count(3)) == "Braiding(3)"
        assert repr(Braiding.by_percentage(0.5)) == "Braiding(50%)"


class TestBraid:
    """Test dead-end removal on generated mazes."""

    @pytest.mark.parametrize("count", [1, 2, 5, 10])
    def test_removes_requested_count(self, count):
        """Test that braiding removes the target, overshooting by at most one."""
        maze = _generated()
        before = count_dead_ends(maze)

        removed = braid(maze, Braiding.by_count(count))

        assert min(count, before) <= removed <= min(count + 1, before)
        assert count_dead_ends(maze) == before - removed

    def test_never_adds_dead_ends(self):
        """Test that the dead-end count only goes down."""
        maze = _generated()
        before = count_dead_ends(maze)

        braid(maze, "30%")

        assert count_dead_ends(maze) <= before

    def test_full_braid(self):
        """Test that braiding every dead end leaves none."""
        maze = _generated()

        braid(maze, Braiding.by_percentage(1.0))

        assert count_dead_ends(maze) == 0

    def test_zero_braid_is_noop(self):
        """Test that braiding nothing leaves the maze unchanged."""
        maze = _generated()
        before = [cell.value for cell in maze.cells]

        assert braid(maze, Braiding.by_count(0)) == 0
        assert [cell.value for cell in maze.cells] == before

    def test_braided_maze_stays_connected(self):
        """Test that braiding adds loops but keeps every cell reachable."""
        maze = _generated()

        braid(maze, Braiding.by_percentage(0.5))
        verification = verify_perfect_maze(maze)

        assert verification["is_connected"]
        assert verification["is_consistent"]
        assert not verification["is_no_loops"]

    @pytest.mark.parametrize(
        ("kind", "dims"),
        [
            ("hexagonal", {"width": 6, "height": 6}),
            ("circular", {"radius": 5}),
            ("weaving_square", {"width": 8, "height": 8}),
            ("diagonal_square", {"width": 6, "height": 6}),
            ("triangular", {"width": 5, "height": 5}),
        ],
    )
    def test_other_topologies(self, kind, dims):
        """Test braiding on non-square grids."""
        maze = _generated(kind, "rb", **dims)
        before = count_dead_ends(maze)

        removed = braid(maze, "50%")

        assert removed >= round(before * 0.5)
        assert count_dead_ends(maze) == before - removed
        assert verify_perfect_maze(maze)["is_consistent"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
