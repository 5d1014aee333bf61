"""
YAML I/O for maze generation configurations.

This module provides functions to load and save maze generation
configurations from/to YAML files with schema validation.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from .maze_config import MazeGenerationConfig


def load_maze_config(path: str | Path) -> MazeGenerationConfig:
    """
    Load a maze generation configuration from a YAML file.

    A file holding a single maze set (a mapping without a ``mazes`` key) or
    a bare list of sets is accepted as well.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated configuration

    Raises:
        FileNotFoundError: If the configuration file doesn't exist
        yaml.YAMLError: If the YAML syntax is invalid
        ValueError: If the configuration is invalid

    Example:
        >>> config = load_maze_config("configs/intro.yaml")
        >>> MazeWorkflow(config).run()

    YAML Format:
        mazes:
          - name: circles
            type: circular
            size: {radius: 8}
            algorithm: {name: wi}
            openings: [[S, E], [C, E]]
            solve: true
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Invalid YAML syntax in {path}: {e}") from e

    if data is None:
        data = {}
    if isinstance(data, list):
        data = {"mazes": data}
    elif isinstance(data, dict) and "mazes" not in data and data:
        data = {"mazes": [data]}

    try:
        return MazeGenerationConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {path}:\n{e}") from e


def save_maze_config(config: MazeGenerationConfig, path: str | Path) -> None:
    """
    Save a maze generation configuration to a YAML file.

    Args:
        config: Configuration to save
        path: Output file path; parent directories are created
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Dump config, excluding None values and using JSON-serializable format
    config_dict = config.model_dump(exclude_none=True, mode="json")

    with open(path, "w") as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False, indent=2, allow_unicode=True)


def validate_yaml_config(path: str | Path) -> tuple[bool, str]:
    """
    Validate a YAML configuration without running it.

    Returns:
        (is_valid, message) - True if valid, False with error message otherwise
    """
    try:
        config = load_maze_config(path)
    except (FileNotFoundError, yaml.YAMLError, ValueError) as e:
        return False, str(e)
    return True, f"Configuration is valid ({len(config.mazes)} sets, {config.total_mazes} mazes)"
