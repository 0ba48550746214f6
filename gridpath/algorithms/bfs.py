"""
Breadth-first search baseline - ignores terrain weights.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from gridpath.algorithms.base import PathfindingAlgorithm

if TYPE_CHECKING:
    from gridpath.algorithms.state import SearchState
    from gridpath.core.grid import Grid
    from gridpath.core.node import Node

logger = logging.getLogger(__name__)


class BreadthFirstAlgorithm(PathfindingAlgorithm):
    """
    FIFO search that finds the path with the fewest moves.

    Weights do not affect which path is chosen, but g still accumulates
    real movement costs so the reported cost is comparable with A*.
    """

    @property
    def name(self) -> str:
        return "bfs"

    @property
    def description(self) -> str:
        return "Breadth-first search (fewest moves, ignores weights)"

    def _explore(self, grid: Grid, start: Node, goal: Node, state: SearchState) -> bool:
        state.relax(start, None, 0.0, 0.0)
        queue = deque([start])
        discovered = {start.coord}

        while queue:
            current = queue.popleft()
            state.finalize(current)

            if current == goal:
                return True

            current_g = state.cost(current)
            for neighbor in grid.get_neighbors(current):
                if neighbor.coord in discovered:
                    continue
                discovered.add(neighbor.coord)
                state.relax(
                    neighbor,
                    current,
                    current_g + grid.movement_cost(current, neighbor),
                    0.0,
                )
                queue.append(neighbor)

        logger.debug(f"bfs: queue exhausted after {len(discovered)} discovered nodes")
        return False
