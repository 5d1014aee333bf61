"""Utilities for mazegen: structured exceptions and logging."""

from __future__ import annotations

from .exceptions import (
    ConfigurationError,
    InvalidCellOperationError,
    InvalidOpeningError,
    MazeError,
    MazeInvariantError,
    NoPathError,
    NotEnoughOpeningsError,
    UnsupportedTopologyError,
    validate_parameter_value,
)
from .maze_logging import LoggedOperation, configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "InvalidCellOperationError",
    "InvalidOpeningError",
    "LoggedOperation",
    "MazeError",
    "MazeInvariantError",
    "NoPathError",
    "NotEnoughOpeningsError",
    "UnsupportedTopologyError",
    "configure_logging",
    "get_logger",
    "validate_parameter_value",
]
