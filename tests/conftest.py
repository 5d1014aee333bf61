"""
Pytest configuration and shared fixtures for the mazegen test suite.

This module provides common fixtures, test configuration, and utilities
used across the entire test suite.
"""

import random
import shutil
import tempfile
from pathlib import Path

import pytest

from mazegen.geometry import create_maze

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


# =============================================================================
# Maze Fixtures
# =============================================================================

# Small dimensions for every topology
TOPOLOGY_DIMENSIONS = {
    "square": {"width": 6, "height": 5},
    "triangular": {"width": 5, "height": 4},
    "hexagonal": {"width": 5, "height": 4},
    "octagon_square": {"width": 5, "height": 5},
    "diagonal_square": {"width": 5, "height": 5},
    "weaving_square": {"width": 6, "height": 6, "max_weave": 1},
    "circular": {"radius": 4},
    "single_path": {"width": 6, "height": 4},
}


@pytest.fixture(autouse=True)
def seeded_random():
    """Seed the random module so every test is reproducible."""
    random.seed(42)


@pytest.fixture
def square_maze():
    """Fully walled 10x10 square maze."""
    return create_maze("square", width=10, height=10)


@pytest.fixture(params=sorted(TOPOLOGY_DIMENSIONS))
def any_maze(request):
    """Fully walled small maze of every topology."""
    return create_maze(request.param, **TOPOLOGY_DIMENSIONS[request.param])


# =============================================================================
# File System Fixtures
# =============================================================================


@pytest.fixture
def temp_directory():
    """Temporary directory for file operations."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)
