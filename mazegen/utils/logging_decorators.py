"""
Logging decorators for mazegen.

Adds timed tracing to post-processing and search functions without
touching their logic.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable

from .maze_logging import LoggedOperation, get_logger


def logged_operation(
    operation_name: str | None = None,
    logger_name: str | None = None,
    log_level: str = "DEBUG",
    log_result: bool = False,
):
    """
    Decorator to add logging to any operation.

    Args:
        operation_name: Name of the operation (if None, uses function name)
        logger_name: Custom logger name (if None, uses module name)
        log_level: Logging level
        log_result: Whether to log return value
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger(logger_name) if logger_name else get_logger(func.__module__)
            op_name = operation_name or func.__name__

            with LoggedOperation(logger, op_name, getattr(logging, log_level.upper())):
                result = func(*args, **kwargs)

                if log_result:
                    logger.debug(f"{op_name} returned: {result}")

                return result

        return wrapper

    return decorator
