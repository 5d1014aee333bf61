"""
Logging utilities for mazegen.

Usage:
    >>> from mazegen.utils.maze_logging import get_logger, configure_logging
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("Generating mazes...")
"""

from __future__ import annotations

from .logger import (
    LoggedOperation,
    MazeFormatter,
    MazeLogger,
    configure_batch_logging,
    configure_development_logging,
    configure_logging,
    get_logger,
    log_generation_start,
    log_generation_summary,
    log_performance_metric,
    log_validation_error,
)

__all__ = [
    # Core logging
    "configure_logging",
    "get_logger",
    # Environment configurations
    "configure_batch_logging",
    "configure_development_logging",
    # Structured logging helpers
    "log_generation_start",
    "log_generation_summary",
    "log_performance_metric",
    "log_validation_error",
    # Classes
    "LoggedOperation",
    "MazeFormatter",
    "MazeLogger",
]
