"""
A* search over a weighted 4-connected grid.

Uses a binary heap without decrease-key: an improved node is pushed
again and stale entries are skipped on pop once the node is closed.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import TYPE_CHECKING

from gridpath.algorithms.base import PathfindingAlgorithm
from gridpath.config import ASTAR_HEURISTIC_WEIGHT
from gridpath.heuristics import Heuristic, manhattan

if TYPE_CHECKING:
    from gridpath.algorithms.state import SearchState
    from gridpath.core.grid import Grid
    from gridpath.core.node import Node

logger = logging.getLogger(__name__)


class AStarAlgorithm(PathfindingAlgorithm):
    """
    Best-first search ordered by f = g + h with the Manhattan heuristic.

    Frontier entries are (priority, h, sequence, node). Among equal
    priorities the entry closer to the goal (lower h) wins, then the
    earlier push, so explored order and chosen path are reproducible.

    Optimality holds when every traversable weight is >= 1 and
    heuristic_weight is 1. Lower weights make Manhattan distance
    overestimate, and the returned path may then be suboptimal.
    """

    def __init__(
        self,
        grid: Grid | None = None,
        heuristic: Heuristic = manhattan,
        heuristic_weight: float = ASTAR_HEURISTIC_WEIGHT,
    ) -> None:
        """
        Initialize A*.

        Args:
            grid: Default grid for find_path(None, ...)
            heuristic: Estimate of remaining cost between two nodes
            heuristic_weight: Multiplier on h in the frontier priority
        """
        super().__init__(grid)
        self._heuristic = heuristic
        self._heuristic_weight = heuristic_weight

    @property
    def name(self) -> str:
        if self._heuristic_weight != 1.0:
            return f"astar-w{self._heuristic_weight:g}"
        return "astar"

    @property
    def description(self) -> str:
        if self._heuristic_weight != 1.0:
            return f"Weighted A* (h x {self._heuristic_weight:g}), not guaranteed optimal"
        return "A* with Manhattan heuristic"

    def heuristic(self, node: Node, goal: Node) -> float:
        return self._heuristic(node, goal)

    def _explore(self, grid: Grid, start: Node, goal: Node, state: SearchState) -> bool:
        sequence = itertools.count()
        weight = self._heuristic_weight

        start_h = self.heuristic(start, goal)
        state.relax(start, None, 0.0, start_h)

        open_heap = [(weight * start_h, start_h, next(sequence), start)]
        closed: set[tuple[int, int]] = set()

        while open_heap:
            _, _, _, current = heapq.heappop(open_heap)

            # Stale duplicate of a node already finalized
            if current.coord in closed:
                continue

            closed.add(current.coord)
            state.finalize(current)

            if current == goal:
                return True

            current_g = state.cost(current)
            for neighbor in grid.get_neighbors(current):
                if neighbor.coord in closed:
                    continue

                tentative_g = current_g + grid.movement_cost(current, neighbor)
                if tentative_g < state.cost(neighbor):
                    h = self.heuristic(neighbor, goal)
                    state.relax(neighbor, current, tentative_g, h)
                    heapq.heappush(
                        open_heap,
                        (tentative_g + weight * h, h, next(sequence), neighbor),
                    )

        logger.debug(f"{self.name}: frontier exhausted after {len(closed)} nodes")
        return False
