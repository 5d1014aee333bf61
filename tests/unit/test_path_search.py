"""
Unit tests for the solver and the distance map.

The solver is checked against breadth-first distances on mazes with loops,
so it must return shortest paths and not just any path.
"""

from collections import deque

import pytest

from mazegen.alg import (
    braid,
    clear_distance_map,
    find_path,
    generate_distance_map,
    generate_maze,
    solve,
)
from mazegen.geometry import OpeningPosition, create_maze, create_openings
from mazegen.utils.exceptions import InvalidOpeningError, NoPathError, NotEnoughOpeningsError

TOPOLOGY_CASES = [
    ("square", {"width": 10, "height": 8}),
    ("triangular", {"width": 5, "height": 5}),
    ("hexagonal", {"width": 6, "height": 6}),
    ("octagon_square", {"width": 6, "height": 6}),
    ("diagonal_square", {"width": 6, "height": 6}),
    ("weaving_square", {"width": 8, "height": 8}),
    ("circular", {"radius": 5}),
    ("single_path", {"width": 8, "height": 6}),
]


def _bfs_distance(start, end):
    distances = {start.index: 0}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell is end:
            return distances[cell.index]
        for neighbor in cell.accessible_neighbors:
            if neighbor.index not in distances:
                distances[neighbor.index] = distances[cell.index] + 1
                queue.append(neighbor)
    return None


def _solved_square():
    maze = generate_maze(create_maze("square", width=10, height=10), "rb")
    create_openings(maze, [OpeningPosition.parse(["S", "S"]), OpeningPosition.parse(["E", "E"])])
    return maze


class TestSolve:
    """Test the solver."""

    def test_solution_marks_cells(self):
        """Test that the path is stored and its cells marked."""
        maze = _solved_square()

        path = solve(maze)

        assert maze.solution == path
        assert sum(cell.on_solution_path for cell in maze.cells) == len(path)
        assert all(cell.on_solution_path for cell in path)

    def test_path_is_walkable(self):
        """Test that consecutive path cells are connected."""
        maze = _solved_square()

        path = solve(maze)

        for a, b in zip(path, path[1:]):
            assert any(n is b for n in a.accessible_neighbors)

    def test_resolving_clears_previous_solution(self):
        """Test that a second solve replaces the marks of the first."""
        maze = _solved_square()
        solve(maze)

        path = solve(maze, start=maze.cell_at_xy(0, 0), end=maze.cell_at_xy(0, 1))

        assert sum(cell.on_solution_path for cell in maze.cells) == len(path)

    def test_explicit_positions(self):
        """Test endpoints given as opening positions."""
        maze = generate_maze(create_maze("square", width=6, height=6), "kr")

        path = solve(maze, ["S", "S"], ["E", "S"])

        assert path[0] is maze.cell_at_xy(0, 0)
        assert path[-1] is maze.cell_at_xy(5, 0)

    def test_start_equals_end(self):
        """Test a path from a cell to itself."""
        maze = generate_maze(create_maze("square", width=4, height=4), "rb")
        cell = maze.cell_at_xy(2, 2)

        assert solve(maze, cell, cell) == [cell]

    def test_not_enough_openings(self):
        """Test that solving without two openings fails."""
        maze = generate_maze(create_maze("square", width=5, height=5), "rb")
        create_openings(maze, [OpeningPosition.parse(["S", "S"])])

        with pytest.raises(NotEnoughOpeningsError):
            solve(maze)

    def test_endpoint_outside_maze(self):
        """Test that endpoint positions must lie inside the maze."""
        maze = generate_maze(create_maze("square", width=5, height=5), "rb")

        with pytest.raises(InvalidOpeningError):
            solve(maze, ["S", "S"], [9, 9])

    def test_no_path(self):
        """Test that a disconnected maze raises an invariant error."""
        maze = create_maze("square", width=5, height=5)

        with pytest.raises(NoPathError):
            solve(maze, maze.cell_at_xy(0, 0), maze.cell_at_xy(4, 4))
        with pytest.raises(AssertionError):
            solve(maze, maze.cell_at_xy(0, 0), maze.cell_at_xy(4, 4))

        assert maze.solution is None

    def test_find_path_does_not_annotate(self):
        """Test the annotation-free search."""
        maze = _solved_square()

        path = find_path(maze, maze.cells[0], maze.cells[-1])

        assert path is not None
        assert not any(cell.on_solution_path for cell in maze.cells)

        walled = create_maze("square", width=2, height=2)
        assert find_path(walled, walled.cells[0], walled.cells[-1]) is None

    @pytest.mark.parametrize(("kind", "dims"), TOPOLOGY_CASES)
    def test_shortest_path_on_braided_mazes(self, kind, dims):
        """Test that the solver matches breadth-first distances on mazes with loops."""
        maze = generate_maze(create_maze(kind, **dims), "rb")
        braid(maze, "60%")

        for start, end in [(maze.cells[0], maze.cells[-1]), (maze.cells[1], maze.cells[len(maze.cells) // 2])]:
            path = solve(maze, start, end)
            assert len(path) - 1 == _bfs_distance(start, end)


class TestDistanceMap:
    """Test breadth-first distance labelling."""

    @pytest.mark.parametrize(("kind", "dims"), TOPOLOGY_CASES)
    def test_every_cell_reached(self, kind, dims):
        """Test that every cell of a perfect maze gets a distance."""
        maze = generate_maze(create_maze(kind, **dims), "hk")

        max_distance = generate_distance_map(maze, maze.cells[0])

        assert maze.has_distance_map
        assert maze.cells[0].distance == 0
        assert all(cell.distance >= 0 for cell in maze.cells)
        assert max_distance == max(cell.distance for cell in maze.cells)

    def test_distances_differ_by_one_across_passages(self):
        """Test that adjacent connected cells are at most one apart."""
        maze = generate_maze(create_maze("square", width=8, height=8), "pr")
        braid(maze, "40%")

        generate_distance_map(maze, ["C", "C"])

        for cell in maze.cells:
            for neighbor in cell.accessible_neighbors:
                assert abs(cell.distance - neighbor.distance) <= 1

    def test_matches_solution_length(self):
        """Test that the distance to the end matches the solution."""
        maze = _solved_square()

        generate_distance_map(maze, ["S", "S"])
        path = solve(maze)

        assert path[-1].distance == len(path) - 1

    def test_unreachable_cells(self):
        """Test that cells cut off from the start keep the sentinel."""
        maze = create_maze("square", width=3, height=3)
        maze.cell_at_xy(0, 0).connect_with(maze.cell_at_xy(1, 0))

        assert generate_distance_map(maze, maze.cell_at_xy(0, 0)) == 1
        assert maze.cell_at_xy(2, 2).distance == -1

    def test_random_start(self):
        """Test that a random start still labels every cell."""
        maze = generate_maze(create_maze("square", width=6, height=6), "rb")

        generate_distance_map(maze)

        assert sum(cell.distance == 0 for cell in maze.cells) == 1

    def test_clear(self):
        """Test that clearing drops the map."""
        maze = generate_maze(create_maze("square", width=6, height=6), "rb")
        generate_distance_map(maze)

        clear_distance_map(maze)

        assert not maze.has_distance_map
        assert all(cell.distance == -1 for cell in maze.cells)


def _woven_maze():
    """A 3x3 weaving maze whose west-east passage tunnels under a north-south one."""
    maze = create_maze("weaving_square", width=3, height=3)
    cell = maze.cell_at_xy
    cell(1, 0).connect_with(cell(1, 1))
    cell(1, 1).connect_with(cell(1, 2))
    cell(0, 0).connect_with(cell(1, 0))
    cell(0, 0).connect_with(cell(0, 1))
    cell(0, 1).connect_with(cell(2, 1))
    return maze


class TestTunnelDistances:
    """Test distance labels of passages crossing under other cells."""

    def test_tunnel_is_labelled_by_its_passage(self):
        """Test that the tunnel gets the distance of the move passing under the cell."""
        maze = _woven_maze()
        bridge = maze.cell_at_xy(1, 1)

        generate_distance_map(maze, maze.cell_at_xy(1, 2))

        assert maze.topology.has_tunnel(bridge)
        assert bridge.distance == 1
        assert maze.cell_at_xy(0, 1).distance == 4
        assert maze.cell_at_xy(2, 1).distance == 5
        assert bridge.tunnel_distance == 5
        assert all(cell.tunnel_distance == -1 for cell in maze.cells if cell is not bridge)

    def test_unreached_tunnel(self):
        """Test that a tunnel outside the mapped region keeps the sentinel."""
        maze = create_maze("weaving_square", width=3, height=3)
        cell = maze.cell_at_xy
        cell(1, 0).connect_with(cell(1, 1))
        cell(1, 1).connect_with(cell(1, 2))
        cell(0, 1).connect_with(cell(2, 1))

        generate_distance_map(maze, cell(1, 0))

        assert cell(1, 1).distance == 1
        assert cell(1, 1).tunnel_distance == -1

    @pytest.mark.parametrize("max_weave", [1, 2])
    def test_tunnels_lie_between_their_ends(self, max_weave):
        """Test that every tunnel distance sits between the distances of its two ends."""
        maze = generate_maze(create_maze("weaving_square", width=10, height=10, max_weave=max_weave), "rb")
        topology = maze.topology

        generate_distance_map(maze, maze.cells[0])

        for cell in maze.cells:
            if not topology.has_tunnel(cell):
                assert cell.tunnel_distance == -1
            for neighbor in cell.accessible_neighbors:
                low, high = sorted((cell.distance, neighbor.distance))
                for crossed in topology.crossed_cells(maze, cell, neighbor):
                    assert low <= crossed.tunnel_distance <= high

    def test_clear(self):
        """Test that clearing drops tunnel distances too."""
        maze = _woven_maze()
        generate_distance_map(maze, maze.cells[0])

        clear_distance_map(maze)

        assert all(cell.tunnel_distance == -1 for cell in maze.cells)

    def test_other_topologies_have_no_tunnels(self):
        """Test that grids without weaving never label tunnels."""
        maze = generate_maze(create_maze("square", width=6, height=6), "rb")

        generate_distance_map(maze, maze.cells[0])

        assert all(cell.tunnel_distance == -1 for cell in maze.cells)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
