"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import heapq
import math
from pathlib import Path

import numpy as np
import pytest

from gridpath.core import DIRECTIONS, Grid


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def empty_grid() -> Grid:
    """Return a 5x5 grid with no walls, start (0,0) and goal (4,4)."""
    grid = Grid(5, 5)
    grid.place_start(0, 0)
    grid.place_goal(4, 4)
    return grid


@pytest.fixture
def corridor_grid() -> Grid:
    """Return a grid with a weight-5 corridor directly between start and goal."""
    return Grid.from_text(
        """
        .....
        S555G
        .....
        """
    )


@pytest.fixture
def make_weighted_grid():
    """Return a factory for seeded grids with random walls and weights."""

    def _make(
        seed: int,
        rows: int = 12,
        cols: int = 12,
        density: float = 0.25,
        weights: tuple[float, ...] = (1.0, 2.0, 3.0, 4.0, 5.0),
    ) -> Grid:
        grid = Grid(rows, cols)
        grid.random_walls(density, seed)
        rng = np.random.default_rng(seed + 1000)
        for node in grid:
            grid.set_weight(node.row, node.col, float(rng.choice(weights)))
        grid.place_start(0, 0)
        grid.place_goal(rows - 1, cols - 1)
        return grid

    return _make


@pytest.fixture
def reference_cost():
    """Return an independent uniform-cost search for checking optimality."""

    def _cost(grid: Grid, start, goal, weighted: bool = True) -> float:
        dist = {start.coord: 0.0}
        heap = [(0.0, start.coord)]
        while heap:
            d, (r, c) = heapq.heappop(heap)
            if (r, c) == goal.coord:
                return d
            if d > dist[(r, c)]:
                continue
            for dr, dc in DIRECTIONS:
                nr, nc = r + dr, c + dc
                if grid.is_wall(nr, nc):
                    continue
                step = grid.get_node(nr, nc).weight if weighted else 1.0
                if d + step < dist.get((nr, nc), math.inf):
                    dist[(nr, nc)] = d + step
                    heapq.heappush(heap, (d + step, (nr, nc)))
        return math.inf

    return _cost


@pytest.fixture
def path_cost():
    """Return a checker that validates a path's adjacency and sums its cost."""

    def _path_cost(grid: Grid, path) -> float:
        total = 0.0
        for prev, node in zip(path, path[1:]):
            assert abs(prev.row - node.row) + abs(prev.col - node.col) == 1
            assert not grid.is_wall(node.row, node.col)
            total += grid.movement_cost(prev, node)
        return total

    return _path_cost
