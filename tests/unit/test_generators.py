"""
Unit tests for perfect maze generation.

Tests every generator on every topology it supports for the perfect maze
properties (connectivity, acyclicity, walkable both ways), reproducibility
and option validation.
"""

import random

import pytest

from mazegen.alg import solve, verify_perfect_maze
from mazegen.alg.generators import (
    GENERATOR_CLASSES,
    BinaryTreeGenerator,
    DisjointSet,
    Edge,
    EllerGenerator,
    GrowingTreeGenerator,
    KruskalGenerator,
    MazeAlgorithm,
    RandomPool,
    WilsonGenerator,
    generate_maze,
    get_generator,
    resolve_algorithm,
)
from mazegen.geometry import MazeTopology, OpeningPosition, SquareSide, create_maze, create_openings
from mazegen.utils.exceptions import ConfigurationError, UnsupportedTopologyError

DIMENSIONS = {
    MazeTopology.SQUARE: {"width": 7, "height": 6},
    MazeTopology.TRIANGULAR: {"width": 4, "height": 4},
    MazeTopology.HEXAGONAL: {"width": 5, "height": 5},
    MazeTopology.OCTAGON_SQUARE: {"width": 5, "height": 5},
    MazeTopology.DIAGONAL_SQUARE: {"width": 5, "height": 5},
    MazeTopology.WEAVING_SQUARE: {"width": 6, "height": 6},
    MazeTopology.CIRCULAR: {"radius": 4},
    MazeTopology.SINGLE_PATH: {"width": 6, "height": 6},
}

SUPPORTED_PAIRS = [
    (algorithm, topology)
    for algorithm, generator_class in GENERATOR_CLASSES.items()
    for topology in MazeTopology
    if generator_class().supports(topology)
]


def _pair_id(pair):
    return f"{pair[0].value}-{pair[1].value}"


class TestPerfectMazes:
    """Test that every supported generator and topology pair yields a perfect maze."""

    @pytest.mark.parametrize("seed", [1, 2, 3])
    @pytest.mark.parametrize("pair", SUPPORTED_PAIRS, ids=_pair_id)
    def test_maze_is_perfect(self, pair, seed):
        """Test connectivity, acyclicity and two-way passages."""
        algorithm, topology = pair
        random.seed(seed)
        maze = create_maze(topology, **DIMENSIONS[topology])

        generate_maze(maze, algorithm)
        verification = verify_perfect_maze(maze)

        assert verification["is_perfect"], f"Maze is not perfect: {verification}"
        assert verification["is_connected"], "Maze is not fully connected"
        assert verification["is_no_loops"], "Maze has loops"
        assert verification["is_consistent"], "Maze has one-way passages"

    @pytest.mark.parametrize("pair", SUPPORTED_PAIRS, ids=_pair_id)
    def test_visited_flags_cleared(self, pair):
        """Test that generators leave no scratch state behind."""
        algorithm, topology = pair
        maze = create_maze(topology, **DIMENSIONS[topology])

        generate_maze(maze, algorithm)

        assert not any(cell.visited for cell in maze.cells)

    @pytest.mark.parametrize("algorithm", list(MazeAlgorithm))
    def test_reproducibility(self, algorithm):
        """Test that the same seed produces the same maze."""
        random.seed(42)
        first = generate_maze(create_maze("square", width=8, height=8), algorithm)
        random.seed(42)
        second = generate_maze(create_maze("square", width=8, height=8), algorithm)

        assert [cell.value for cell in first.cells] == [cell.value for cell in second.cells]

    def test_regeneration_discards_previous_maze(self, square_maze):
        """Test that generating twice still yields a perfect maze."""
        generate_maze(square_maze, "rb")
        generate_maze(square_maze, "prims")

        assert verify_perfect_maze(square_maze)["is_perfect"]

    def test_recursive_backtracker_example(self):
        """Test the 10x10 recursive backtracker maze end to end."""
        maze = generate_maze(create_maze("square", width=10, height=10), "rb")

        verification = verify_perfect_maze(maze)
        assert verification["passage_count"] == 99
        assert verification["visited_cells"] == 100

        create_openings(maze, [OpeningPosition.parse(["S", "S"]), OpeningPosition.parse(["E", "E"])])
        path = solve(maze)

        assert path[0] is maze.cell_at_xy(0, 0)
        assert path[-1] is maze.cell_at_xy(9, 9)
        assert len(path) >= 19

    @pytest.mark.parametrize(("width", "height"), [(1, 1), (1, 8), (8, 1), (2, 2)])
    @pytest.mark.parametrize("algorithm", list(MazeAlgorithm))
    def test_degenerate_sizes(self, algorithm, width, height):
        """Test single row, single column and tiny mazes."""
        maze = generate_maze(create_maze("square", width=width, height=height), algorithm)

        assert verify_perfect_maze(maze)["is_perfect"]


class TestUnsupportedTopologies:
    """Test topology restrictions."""

    def test_kruskal_on_weave_raises(self):
        """Test that Kruskal's refuses weaving mazes and leaves them untouched."""
        maze = create_maze("weaving_square", width=5, height=5)
        before = [cell.value for cell in maze.cells]

        with pytest.raises(UnsupportedTopologyError):
            KruskalGenerator().generate(maze)

        assert [cell.value for cell in maze.cells] == before

    @pytest.mark.parametrize("topology", [MazeTopology.WEAVING_SQUARE, MazeTopology.DIAGONAL_SQUARE])
    def test_wilson_on_dynamic_topologies_raises(self, topology):
        """Test that Wilson's refuses topologies with passage-dependent neighbors."""
        with pytest.raises(UnsupportedTopologyError):
            WilsonGenerator().generate(create_maze(topology, **DIMENSIONS[topology]))

    @pytest.mark.parametrize("algorithm", ["bt", "sw", "el", "rd"])
    @pytest.mark.parametrize("topology", [MazeTopology.HEXAGONAL, MazeTopology.CIRCULAR])
    def test_square_only_generators(self, algorithm, topology):
        """Test that square-only generators refuse other grids."""
        with pytest.raises(UnsupportedTopologyError):
            generate_maze(create_maze(topology, **DIMENSIONS[topology]), algorithm)

    def test_square_only_generators_support_single_path(self):
        """Test that single-path mazes are generated on a square base."""
        assert BinaryTreeGenerator().supports(MazeTopology.SINGLE_PATH)


class TestGeneratorOptions:
    """Test algorithm selection and option validation."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("rb", MazeAlgorithm.RECURSIVE_BACKTRACKING),
            ("RB", MazeAlgorithm.RECURSIVE_BACKTRACKING),
            ("wilsons", MazeAlgorithm.WILSONS),
            ("hunt-and-kill", MazeAlgorithm.HUNT_AND_KILL),
            ("Growing Tree", MazeAlgorithm.GROWING_TREE),
            (MazeAlgorithm.ELLERS, MazeAlgorithm.ELLERS),
        ],
    )
    def test_resolve_algorithm(self, name, expected):
        """Test names, aliases and enum values."""
        assert resolve_algorithm(name) is expected

    def test_unknown_algorithm(self):
        """Test that unknown names raise a configuration error."""
        with pytest.raises(ConfigurationError):
            get_generator("invalid_algorithm")

    def test_unknown_option(self):
        """Test that options an algorithm does not take are rejected."""
        with pytest.raises(ConfigurationError):
            get_generator("rb", bias="ne")

    @pytest.mark.parametrize("bias", [0, 0.0, -0.5, 1.5, float("nan")])
    def test_eller_invalid_bias(self, bias):
        """Test that Eller's biases must lie in (0, 1]."""
        with pytest.raises(ConfigurationError):
            EllerGenerator(horizontal_bias=bias)
        with pytest.raises(ConfigurationError):
            EllerGenerator(vertical_bias=bias)

    def test_eller_full_bias(self):
        """Test that a bias of 1 is accepted and still perfect."""
        maze = EllerGenerator(horizontal_bias=1.0, vertical_bias=1.0).generate(
            create_maze("square", width=6, height=6)
        )

        assert verify_perfect_maze(maze)["is_perfect"]

    def test_growing_tree_zero_weights(self):
        """Test that growing tree needs at least one positive weight."""
        with pytest.raises(ConfigurationError):
            GrowingTreeGenerator(0, 0, 0)

    def test_growing_tree_negative_weight(self):
        """Test that weights must be non-negative."""
        with pytest.raises(ConfigurationError):
            GrowingTreeGenerator(random_weight=-1)

    @pytest.mark.parametrize("weights", [(1, 0, 0), (0, 1, 0), (0, 0, 1), (2, 3, 1)])
    def test_growing_tree_weights(self, weights):
        """Test that every weight mix yields a perfect maze."""
        generator = GrowingTreeGenerator(*weights)
        maze = generator.generate(create_maze("hexagonal", width=5, height=5))

        assert verify_perfect_maze(maze)["is_perfect"]
        assert generator.options() == dict(zip(("random_weight", "newest_weight", "oldest_weight"), weights))

    def test_binary_tree_bias(self):
        """Test that a north-east bias opens the whole north row."""
        maze = BinaryTreeGenerator("ne").generate(create_maze("square", width=6, height=6))

        for x in range(5):
            assert not maze.cell_at_xy(x, 0).has_side(SquareSide.EAST)

    def test_binary_tree_invalid_bias(self):
        """Test that unknown bias pairs are rejected."""
        with pytest.raises(ConfigurationError):
            BinaryTreeGenerator("nn")

    def test_sidewinder_north_corridor(self):
        """Test that sidewinder carves the north row into one corridor."""
        maze = get_generator("sw").generate(create_maze("square", width=6, height=6))

        for x in range(5):
            assert not maze.cell_at_xy(x, 0).has_side(SquareSide.EAST)


class TestSupportStructures:
    """Test the helper collections used by generators."""

    def test_random_pool(self, square_maze):
        """Test insertion, removal and random picks."""
        cells = square_maze.cells[:5]
        pool = RandomPool(cells)

        pool.remove(cells[1])
        pool.remove(cells[4])
        pool.add(cells[0])

        assert len(pool) == 3
        assert cells[1] not in pool
        assert all(pool.random_item() in (cells[0], cells[2], cells[3]) for _ in range(20))

    def test_edge_is_unordered(self, square_maze):
        """Test that an edge equals its reverse."""
        a, b = square_maze.cells[0], square_maze.cells[1]

        assert Edge(a, b) == Edge(b, a)
        assert len({Edge(a, b), Edge(b, a)}) == 1

    def test_disjoint_set(self):
        """Test union and find."""
        sets = DisjointSet(5)

        assert sets.union(0, 1)
        assert sets.union(1, 2)
        assert not sets.union(0, 2)
        assert sets.find(2) == sets.find(0)
        assert sets.find(3) != sets.find(0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
