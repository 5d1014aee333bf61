"""
Exception classes for mazegen with helpful error messages and user guidance.

Errors fall in two groups:

- configuration errors (bad dimensions, bias, weights, openings, unsupported
  generator/topology pairs): the caller must supply corrected input;
- invariant violations (connecting non-adjacent cells, no path between two
  cells): these signal a topology or algorithm bug and also derive from
  ``AssertionError``.
"""

from __future__ import annotations

import math
from typing import Any


class MazeError(Exception):
    """
    Base exception for maze errors with helpful context and suggestions.

    This exception class provides structured error information including:
    - Clear error description
    - Component context information
    - Suggested actions for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.message = message
        self.component = component or "mazegen"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.component}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class ConfigurationError(MazeError):
    """Exception raised when a maze, generator or post-processing option is invalid."""

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        expected_type: type | None = None,
        valid_range: tuple | None = None,
        component: str | None = None,
        reason: str | None = None,
    ):
        self.parameter_name = parameter_name
        self.provided_value = provided_value

        diagnostic_data = {
            "parameter": parameter_name,
            "provided_value": str(provided_value),
            "provided_type": type(provided_value).__name__,
        }

        if expected_type:
            diagnostic_data["expected_type"] = expected_type.__name__

        if valid_range:
            diagnostic_data["valid_range"] = _format_range(valid_range)

        if reason:
            diagnostic_data["reason"] = reason

        suggested_action = _generate_configuration_suggestions(
            parameter_name, provided_value, expected_type, valid_range
        )

        message = f"Invalid configuration for parameter '{parameter_name}'"

        super().__init__(
            message=message,
            component=component,
            suggested_action=suggested_action,
            error_code="INVALID_CONFIGURATION",
            diagnostic_data=diagnostic_data,
        )


class UnsupportedTopologyError(MazeError):
    """Exception raised when a generator is run on a topology it cannot handle."""

    def __init__(self, generator_name: str, topology: Any, supported: list[Any] | None = None):
        self.generator_name = generator_name
        self.topology = topology

        topology_name = getattr(topology, "value", str(topology))
        diagnostic_data: dict[str, Any] = {"generator": generator_name, "topology": topology_name}
        if supported:
            diagnostic_data["supported_topologies"] = ", ".join(getattr(t, "value", str(t)) for t in supported)

        super().__init__(
            message=f"{generator_name} cannot generate a {topology_name} maze",
            component=generator_name,
            suggested_action="Choose a generator that supports this topology (recursive backtracking supports all)",
            error_code="UNSUPPORTED_TOPOLOGY",
            diagnostic_data=diagnostic_data,
        )


class InvalidOpeningError(MazeError):
    """Exception raised for duplicate or out-of-range opening positions."""

    def __init__(self, position: Any, reason: str):
        self.position = position
        self.reason = reason

        super().__init__(
            message=f"Invalid opening at {position}: {reason}",
            component="openings",
            suggested_action="Use positions inside the maze and do not repeat an opening",
            error_code="INVALID_OPENING",
            diagnostic_data={"position": str(position)},
        )


class NotEnoughOpeningsError(MazeError):
    """Exception raised when solving a maze that has fewer than two openings."""

    def __init__(self, found: int):
        self.found = found

        super().__init__(
            message=f"Solving requires two openings, found {found}",
            component="solver",
            suggested_action="Carve a start and an end opening before solving",
            error_code="NOT_ENOUGH_OPENINGS",
            diagnostic_data={"openings": found},
        )


class MazeInvariantError(MazeError, AssertionError):
    """Base class for violated structural invariants (programming errors)."""


class InvalidCellOperationError(MazeInvariantError):
    """Exception raised when connecting two cells that are not adjacent."""

    def __init__(self, operation: str, cell: Any, other: Any):
        super().__init__(
            message=f"Cannot {operation}: {other} is not adjacent to {cell}",
            component="cell",
            error_code="INVALID_CELL_OPERATION",
            diagnostic_data={"cell": str(cell), "other": str(other)},
        )


class NoPathError(MazeInvariantError):
    """Exception raised when the solver finds no path between two cells."""

    def __init__(self, start: Any, end: Any, explored: int):
        super().__init__(
            message=f"No path between {start} and {end}",
            component="solver",
            suggested_action="The maze is disconnected; regenerate it from a fully walled state",
            error_code="NO_PATH",
            diagnostic_data={"start": str(start), "end": str(end), "explored_cells": explored},
        )


# Helper functions for generating specific suggestions


def _format_range(valid_range: tuple) -> str:
    low, high = valid_range[0], valid_range[1]
    left = "(" if len(valid_range) > 2 and valid_range[2] == "open" else "["
    return f"{left}{low}, {high}]"


def _generate_configuration_suggestions(
    parameter_name: str,
    provided_value: Any,
    expected_type: type | None,
    valid_range: tuple | None,
) -> str:
    """Generate specific suggestions for configuration errors."""

    suggestions = []

    if expected_type and not isinstance(provided_value, expected_type):
        suggestions.append(f"Convert {parameter_name} to {expected_type.__name__}")

    if valid_range and isinstance(provided_value, (int, float)):
        if provided_value < valid_range[0] or (len(valid_range) > 2 and provided_value == valid_range[0]):
            suggestions.append(f"Increase {parameter_name} above {valid_range[0]}")
        elif provided_value > valid_range[1]:
            suggestions.append(f"Decrease {parameter_name} to at most {valid_range[1]}")

    if "bias" in parameter_name.lower() and isinstance(provided_value, (int, float)) and provided_value <= 0:
        suggestions.append("Bias is a probability and must be strictly positive")

    if "weight" in parameter_name.lower():
        suggestions.append("Weights are non-negative integers and at least one must be positive")

    return " | ".join(suggestions) if suggestions else f"Check {parameter_name} value and try again"


# Convenience functions for common error scenarios


def validate_parameter_value(
    value: Any,
    parameter_name: str,
    expected_type: type | tuple[type, ...] | None = None,
    valid_range: tuple | None = None,
    component: str | None = None,
    exclusive_minimum: bool = False,
):
    """Validate parameter value and type.

    Booleans are rejected where a number is expected.
    """
    if expected_type and (not isinstance(value, expected_type) or isinstance(value, bool)):
        raise ConfigurationError(
            parameter_name=parameter_name,
            provided_value=value,
            expected_type=expected_type if isinstance(expected_type, type) else expected_type[0],
            component=component,
        )

    if valid_range and isinstance(value, (int, float)):
        low, high = valid_range
        too_low = value <= low if exclusive_minimum else value < low
        if math.isnan(value) or too_low or value > high:
            raise ConfigurationError(
                parameter_name=parameter_name,
                provided_value=value,
                valid_range=(low, high, "open") if exclusive_minimum else (low, high),
                component=component,
            )
