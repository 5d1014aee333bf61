"""
Unit tests for mazegen exception classes.
"""

import pytest

from mazegen.geometry import MazeTopology
from mazegen.utils.exceptions import (
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


class TestMazeError:
    """Test the base error formatting."""

    def test_full_message(self):
        """Test that context, suggestion, code and diagnostics are all rendered."""
        error = MazeError(
            "Something broke",
            component="generator",
            suggested_action="Try again",
            error_code="BROKEN",
            diagnostic_data={"cells": 4},
        )

        text = str(error)

        assert text.startswith("[generator] Something broke")
        assert "Suggestion: Try again" in text
        assert "Error Code: BROKEN" in text
        assert "- cells: 4" in text

    def test_default_component(self):
        """Test the default component name."""
        error = MazeError("plain")

        assert str(error) == "[mazegen] plain"
        assert error.diagnostic_data == {}


class TestConfigurationError:
    """Test configuration errors."""

    def test_diagnostics(self):
        """Test the recorded parameter details."""
        error = ConfigurationError("width", -2, expected_type=int, valid_range=(1, 100))

        assert error.parameter_name == "width"
        assert error.error_code == "INVALID_CONFIGURATION"
        assert error.diagnostic_data["valid_range"] == "[1, 100]"
        assert "Increase width above 1" in error.suggested_action

    def test_bias_suggestion(self):
        """Test the bias-specific suggestion."""
        error = ConfigurationError("horizontal_bias", 0.0, valid_range=(0.0, 1.0, "open"))

        assert error.diagnostic_data["valid_range"] == "(0.0, 1.0]"
        assert "strictly positive" in error.suggested_action

    def test_reason(self):
        """Test that a free-form reason is kept."""
        error = ConfigurationError("opening", "X Y", reason="invalid coordinate 'X'")

        assert error.diagnostic_data["reason"] == "invalid coordinate 'X'"


class TestValidateParameterValue:
    """Test the parameter validation helper."""

    def test_accepts_valid_values(self):
        """Test values inside the range."""
        validate_parameter_value(5, "width", int, (1, 10))
        validate_parameter_value(0.5, "bias", (int, float), (0.0, 1.0), exclusive_minimum=True)

    def test_rejects_wrong_type(self):
        """Test that the type is checked."""
        with pytest.raises(ConfigurationError) as exc_info:
            validate_parameter_value("5", "width", int)

        assert exc_info.value.diagnostic_data["expected_type"] == "int"

    def test_rejects_booleans(self):
        """Test that booleans do not pass as numbers."""
        with pytest.raises(ConfigurationError):
            validate_parameter_value(True, "width", int, (0, 10))

    def test_range(self):
        """Test inclusive and exclusive lower bounds."""
        validate_parameter_value(0, "max_weave", int, (0, 10))

        with pytest.raises(ConfigurationError):
            validate_parameter_value(0.0, "bias", float, (0.0, 1.0), exclusive_minimum=True)
        with pytest.raises(ConfigurationError):
            validate_parameter_value(11, "max_weave", int, (0, 10))

    def test_rejects_nan(self):
        """Test that NaN fails the range check."""
        with pytest.raises(ConfigurationError):
            validate_parameter_value(float("nan"), "bias", float, (0.0, 1.0), exclusive_minimum=True)
        with pytest.raises(ConfigurationError):
            validate_parameter_value(float("nan"), "center_radius", float, (0.0, 10.0))


class TestSpecificErrors:
    """Test the remaining error types."""

    def test_unsupported_topology(self):
        """Test the generator and topology in the message."""
        error = UnsupportedTopologyError("sidewinder", MazeTopology.HEXAGONAL, [MazeTopology.SQUARE])

        assert "sidewinder cannot generate a hexagonal maze" in str(error)
        assert error.diagnostic_data["supported_topologies"] == "square"

    def test_invalid_opening(self):
        """Test the opening error."""
        error = InvalidOpeningError("(9, 9)", "position is outside the maze")

        assert error.reason == "position is outside the maze"
        assert "(9, 9)" in str(error)

    def test_not_enough_openings(self):
        """Test the solver error."""
        error = NotEnoughOpeningsError(1)

        assert error.found == 1
        assert not isinstance(error, AssertionError)

    def test_invariant_errors_are_assertions(self):
        """Test that invariant violations derive from AssertionError."""
        assert issubclass(MazeInvariantError, AssertionError)
        assert issubclass(NoPathError, MazeInvariantError)
        assert issubclass(InvalidCellOperationError, MazeInvariantError)

        error = NoPathError("(0, 0)", "(4, 4)", 1)

        assert error.diagnostic_data["explored_cells"] == 1
        assert isinstance(error, MazeError)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
