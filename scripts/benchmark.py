#!/usr/bin/env python3
"""
Benchmark to compare algorithms on seeded mazes and random grids.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --runs 50 --rows 41 --cols 61
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

import numpy as np
from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from gridpath.algorithms import ALGORITHMS, get_algorithm  # noqa: E402
from gridpath.config import BENCHMARK_RUNS, DEFAULT_COLS, DEFAULT_ROWS  # noqa: E402
from gridpath.core import Grid  # noqa: E402
from gridpath.maze import MazeGenerator  # noqa: E402

logging.basicConfig(level=logging.WARNING)  # Quiet mode


def build_maze(rows: int, cols: int, seed: int) -> Grid:
    grid = Grid(rows, cols)
    grid.place_start(1, 1)
    grid.place_goal(rows - 2, cols - 2)
    MazeGenerator(seed).generate(grid)
    return grid


def build_random(rows: int, cols: int, seed: int) -> Grid:
    grid = Grid(rows, cols)
    grid.random_walls(0.25, seed)
    grid.place_start(0, 0)
    grid.place_goal(rows - 1, cols - 1)
    return grid


def build_weighted(rows: int, cols: int, seed: int) -> Grid:
    """Random walls plus terrain weights 1-9."""
    grid = build_random(rows, cols, seed)
    weights = np.random.default_rng(seed).integers(1, 10, size=grid.shape)
    for node in grid:
        grid.set_weight(node.row, node.col, float(weights[node.row, node.col]))
    return grid


# Scenarios: (label, builder)
SCENARIOS = [
    ("Maze", build_maze),
    ("Random walls", build_random),
    ("Weighted terrain", build_weighted),
]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare pathfinding algorithms")
    parser.add_argument("--runs", type=int, default=BENCHMARK_RUNS, help="Grids per scenario")
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Grid rows")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="Grid columns")
    return parser.parse_args()


def run_benchmark(runs: int, rows: int, cols: int) -> None:
    print("=" * 70)
    print("Grid Pathfinding - Algorithm Comparison")
    print("=" * 70)
    print(f"\nTesting {len(ALGORITHMS)} algorithms on {runs} grids per scenario ({rows}x{cols})...")

    for label, build in SCENARIOS:
        print(f"\n{label}")
        print("-" * 70)

        for name in ALGORITHMS:
            algorithm = get_algorithm(name)
            found = 0
            explored = []
            costs = []
            elapsed = 0.0

            for seed in range(runs):
                grid = build(rows, cols, seed)
                start_time = time.perf_counter()
                result = algorithm.search(grid, grid.start_node, grid.goal_node)
                elapsed += time.perf_counter() - start_time

                explored.append(result.explored_count)
                if result.found:
                    found += 1
                    costs.append(result.cost)

            avg_cost = np.mean(costs) if costs else float("nan")
            print(
                f"  {name:10} : {found}/{runs} solved, "
                f"avg explored {np.mean(explored):7.1f}, "
                f"avg cost {avg_cost:7.2f}, "
                f"{1000 * elapsed / runs:6.2f} ms/grid"
            )


if __name__ == "__main__":
    args = parse_args()
    run_benchmark(args.runs, args.rows, args.cols)
