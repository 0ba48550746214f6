"""
Configuration constants for the gridpath project.

All defaults and tunable parameters are defined here.
Environment variables override the runtime settings at the bottom.
"""

import os

# =============================================================================
# Grid Configuration
# =============================================================================

# Default grid dimensions (rows x cols), odd so mazes get a full border
DEFAULT_ROWS = 31
DEFAULT_COLS = 41

# Traversal cost of a plain cell
DEFAULT_WEIGHT = 1.0

# Probability of a cell becoming a wall in Grid.random_walls()
DEFAULT_WALL_DENSITY = 0.33

# =============================================================================
# Search Configuration
# =============================================================================

# Weighted A* factor on the heuristic
# priority(n) = g(n) + ASTAR_HEURISTIC_WEIGHT * h(n)
# 1.0 keeps A* optimal; > 1 trades optimality for fewer expansions
ASTAR_HEURISTIC_WEIGHT = 1.0

# =============================================================================
# Benchmark Configuration
# =============================================================================

# Number of grids per scenario in scripts/benchmark.py
BENCHMARK_RUNS = 20

# =============================================================================
# Runtime Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("GRIDPATH_LOG_LEVEL", "INFO")

# Seed for random walls and mazes in the scripts (unset = nondeterministic)
_seed = os.environ.get("GRIDPATH_SEED")
DEFAULT_SEED: int | None = int(_seed) if _seed else None
