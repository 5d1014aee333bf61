"""Batch maze generation from configurations."""

from __future__ import annotations

from .maze_workflow import GeneratedMaze, MazeWorkflow

__all__ = ["GeneratedMaze", "MazeWorkflow"]
