#!/usr/bin/env python3
"""
Grid solver CLI - build a grid, run a search, print the result as text.

Usage:
    python scripts/solve.py
    python scripts/solve.py --maze --seed 7
    python scripts/solve.py --rows 15 --cols 40 --density 0.3 --algorithm dijkstra
    python scripts/solve.py --maze --start 1,1 --goal 29,39 --algorithm bfs -v

Algorithms:
    astar     - A* with Manhattan heuristic (default)
    dijkstra  - Uniform-cost search
    bfs       - Breadth-first search (fewest moves, ignores weights)

Legend:
    S start, G goal, # wall, * path, . open
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from gridpath.algorithms import ALGORITHMS, get_algorithm  # noqa: E402
from gridpath.config import (  # noqa: E402
    DEFAULT_COLS,
    DEFAULT_ROWS,
    DEFAULT_SEED,
    LOG_LEVEL,
)
from gridpath.core import Grid  # noqa: E402
from gridpath.maze import MazeGenerator  # noqa: E402


def parse_coord(value: str) -> tuple[int, int]:
    """Parse 'row,col' into a tuple."""
    try:
        row, col = (int(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected 'row,col', got '{value}'") from None
    return row, col


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Solve a grid with a pathfinding algorithm",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help=f"Grid rows (default: {DEFAULT_ROWS})")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help=f"Grid columns (default: {DEFAULT_COLS})")
    parser.add_argument(
        "--algorithm",
        type=str,
        default="astar",
        choices=list(ALGORITHMS),
        help="Algorithm to use (default: astar)",
    )
    parser.add_argument("--maze", action="store_true", help="Carve a maze before solving")
    parser.add_argument(
        "--density",
        type=float,
        default=0.0,
        help="Random wall density, ignored with --maze (default: 0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help="Random seed for walls or maze (default: $GRIDPATH_SEED)",
    )
    parser.add_argument("--start", type=parse_coord, default=None, help="Start cell 'row,col' (default: 1,1)")
    parser.add_argument("--goal", type=parse_coord, default=None, help="Goal cell 'row,col' (default: opposite corner)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        grid = Grid(args.rows, args.cols)
        start = args.start or (min(1, args.rows - 1), min(1, args.cols - 1))
        goal = args.goal or (max(args.rows - 2, 0), max(args.cols - 2, 0))

        if args.maze:
            grid.place_start(*start)
            grid.place_goal(*goal)
            MazeGenerator(args.seed).generate(grid)
        elif args.density > 0:
            grid.random_walls(args.density, args.seed)
            # Random walls do not spare the endpoints
            grid.place_start(*start)
            grid.place_goal(*goal)
        else:
            grid.place_start(*start)
            grid.place_goal(*goal)

        algorithm = get_algorithm(args.algorithm, grid=grid)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    path = algorithm.find_path(grid, grid.start_node, grid.goal_node)
    result = algorithm.last_result

    print(grid.to_text(path))
    print()
    print("=" * 60)
    print(f"  Algorithm: {algorithm.name} - {algorithm.description}")
    print(f"  Grid:      {grid.rows}x{grid.cols}, {grid.wall_count()} walls")
    print(f"  Start:     {grid.start_node.coord}")
    print(f"  Goal:      {grid.goal_node.coord}")
    print(f"  Explored:  {result.explored_count}")
    if result.found:
        print(f"  Path:      {len(path) - 1} moves, cost {result.cost:g}")
    else:
        print(f"  Path:      none ({result.status.value})")
    print("=" * 60)

    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())
