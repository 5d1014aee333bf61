from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mazegen")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .alg import (  # noqa: E402
    Braiding,
    MazeAlgorithm,
    braid,
    clear_distance_map,
    generate_distance_map,
    generate_maze,
    get_generator,
    solve,
    verify_perfect_maze,
)
from .config import (  # noqa: E402
    MazeGenerationConfig,
    MazeSetConfig,
    load_maze_config,
    save_maze_config,
)
from .geometry import (  # noqa: E402
    Cell,
    Maze,
    MazeShape,
    MazeTopology,
    OpeningAnchor,
    OpeningPosition,
    create_maze,
    create_opening,
    create_openings,
    to_numpy_array,
)
from .utils import (  # noqa: E402
    ConfigurationError,
    MazeError,
    configure_logging,
    get_logger,
)
from .workflow import MazeWorkflow  # noqa: E402

__all__ = [
    "Braiding",
    "Cell",
    "ConfigurationError",
    "Maze",
    "MazeAlgorithm",
    "MazeError",
    "MazeGenerationConfig",
    "MazeSetConfig",
    "MazeShape",
    "MazeTopology",
    "MazeWorkflow",
    "OpeningAnchor",
    "OpeningPosition",
    "__version__",
    "braid",
    "clear_distance_map",
    "configure_logging",
    "create_maze",
    "create_opening",
    "create_openings",
    "generate_distance_map",
    "generate_maze",
    "get_generator",
    "get_logger",
    "load_maze_config",
    "save_maze_config",
    "solve",
    "to_numpy_array",
    "verify_perfect_maze",
]
