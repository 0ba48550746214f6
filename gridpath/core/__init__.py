"""
Grid topology module.

Provides the cell matrix that every algorithm searches:
- Node: Cell identity, terrain weight and last-search scratch
- Grid: Walls, weights, start/goal and neighbor queries
"""

from gridpath.core.grid import DIRECTIONS, Grid
from gridpath.core.node import Node

__all__ = [
    "DIRECTIONS",
    "Grid",
    "Node",
]
