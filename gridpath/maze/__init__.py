"""
Maze generation module.

Provides:
- MazeGenerator: Recursive backtracker carving perfect mazes into a Grid
- generate_maze: One-off convenience wrapper
"""

from gridpath.maze.generator import MazeGenerator, generate_maze

__all__ = ["MazeGenerator", "generate_maze"]
