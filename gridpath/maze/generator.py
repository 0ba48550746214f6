"""
Recursive-backtracker maze generation.

Odd-coordinate interior cells are rooms, the cells between two rooms
are doors. Carving a random depth-first spanning tree over the rooms
leaves a perfect maze: exactly one simple path between any two open cells.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from typing import TYPE_CHECKING

from gridpath.core.grid import DIRECTIONS

if TYPE_CHECKING:
    from gridpath.core.grid import Grid

logger = logging.getLogger(__name__)


class MazeGenerator:
    """
    Rewrites a grid's walls into a perfect maze.

    The generator keeps nothing between calls except its random source;
    the grid is modified in place. Carving uses an explicit stack, so
    grid size is not limited by the interpreter's recursion limit.
    """

    def __init__(self, seed: int | None = None) -> None:
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducible mazes
        """
        self._rng = random.Random(seed)

    def generate(self, grid: Grid) -> None:
        """
        Carve a maze into `grid`.

        Every cell becomes a wall, then rooms and doors are opened from a
        random root room. Start and goal, if set, are reopened afterwards
        even when that leaves a short stub off the maze body.
        """
        grid.fill_walls(True)

        room_rows = (grid.rows - 1) // 2
        room_cols = (grid.cols - 1) // 2
        if room_rows < 1 or room_cols < 1:
            logger.warning(
                f"Grid {grid.rows}x{grid.cols} has no interior room; leaving it walled"
            )
        else:
            root = (
                self._rng.randrange(room_rows) * 2 + 1,
                self._rng.randrange(room_cols) * 2 + 1,
            )
            rooms = self._carve(grid, root)
            logger.info(f"Maze {grid.rows}x{grid.cols} carved from {root}: {rooms} rooms")

        for endpoint in (grid.start_node, grid.goal_node):
            if endpoint is not None:
                grid.set_wall(endpoint.row, endpoint.col, False)

    def _carve(self, grid: Grid, root: tuple[int, int]) -> int:
        """Depth-first carve from root; returns the number of rooms opened."""
        grid.set_wall(*root, False)
        stack = [(root, self._shuffled_directions())]
        rooms = 1

        while stack:
            (row, col), directions = stack[-1]
            for dr, dc in directions:
                next_row, next_col = row + 2 * dr, col + 2 * dc
                if not self._is_interior(grid, next_row, next_col):
                    continue
                if not grid.is_wall(next_row, next_col):
                    continue

                grid.set_wall(row + dr, col + dc, False)
                grid.set_wall(next_row, next_col, False)
                stack.append(((next_row, next_col), self._shuffled_directions()))
                rooms += 1
                break
            else:
                # Every direction tried: backtrack
                stack.pop()

        return rooms

    def _shuffled_directions(self) -> Iterator[tuple[int, int]]:
        directions = list(DIRECTIONS)
        self._rng.shuffle(directions)
        return iter(directions)

    @staticmethod
    def _is_interior(grid: Grid, row: int, col: int) -> bool:
        return 1 <= row <= grid.rows - 2 and 1 <= col <= grid.cols - 2


def generate_maze(grid: Grid, seed: int | None = None) -> None:
    """Carve a maze into `grid` with a one-off generator."""
    MazeGenerator(seed).generate(grid)
