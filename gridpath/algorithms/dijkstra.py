"""
Dijkstra's algorithm: A* with no heuristic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridpath.algorithms.astar import AStarAlgorithm
from gridpath.heuristics import zero

if TYPE_CHECKING:
    from gridpath.core.grid import Grid


class DijkstraAlgorithm(AStarAlgorithm):
    """
    Uniform-cost search.

    Expands nodes strictly by cost from the start, so it stays optimal for
    any non-negative weights, including weights below 1.
    """

    def __init__(self, grid: Grid | None = None) -> None:
        super().__init__(grid, heuristic=zero, heuristic_weight=1.0)

    @property
    def name(self) -> str:
        return "dijkstra"

    @property
    def description(self) -> str:
        return "Uniform-cost search (no heuristic)"
