"""
Configuration for batch maze generation.

Usage:
    >>> from mazegen.config import load_maze_config
    >>> config = load_maze_config("mazes.yaml")
"""

from __future__ import annotations

from .io import load_maze_config, save_maze_config, validate_yaml_config
from .maze_config import AlgorithmConfig, MazeGenerationConfig, MazeSetConfig, MazeSizeConfig

__all__ = [
    "AlgorithmConfig",
    "MazeGenerationConfig",
    "MazeSetConfig",
    "MazeSizeConfig",
    "load_maze_config",
    "save_maze_config",
    "validate_yaml_config",
]
