"""
Pathfinding algorithm base class.

All algorithms implement _explore(); the base class handles endpoint
validation, path reconstruction, result records and publishing scratch
values onto the grid.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from gridpath.algorithms.state import SearchResult, SearchState, SearchStatus

if TYPE_CHECKING:
    from gridpath.core.grid import Grid
    from gridpath.core.node import Node

logger = logging.getLogger(__name__)


class PathfindingAlgorithm(ABC):
    """
    Abstract base class for grid search strategies.

    Two entry points share one run:
    - search() returns a SearchResult and leaves the grid untouched, so
      several searches may read the same grid concurrently.
    - find_path() additionally publishes the run's scratch onto the grid's
      nodes and remembers the explored trace for explored_nodes().

    Every variant finalizes nodes one at a time and reports them in that
    order, which is the trace a visualizer replays.
    """

    def __init__(self, grid: Grid | None = None) -> None:
        """
        Initialize the algorithm.

        Args:
            grid: Default grid, used when find_path()/search() get grid=None
        """
        self._grid = grid
        self._explored: list[Node] = []
        self._last_result: SearchResult | None = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for the algorithm (e.g., 'astar', 'bfs')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the strategy."""
        ...

    @abstractmethod
    def _explore(self, grid: Grid, start: Node, goal: Node, state: SearchState) -> bool:
        """
        Run the search loop.

        Implementations record every finalized node with state.finalize()
        and every improved cost with state.relax().

        Args:
            grid: Grid to search (read only)
            start: Validated start node owned by grid
            goal: Validated goal node owned by grid
            state: Fresh scratch for this run

        Returns:
            True once goal has been finalized, False if the frontier ran dry
        """
        ...

    @property
    def last_result(self) -> SearchResult | None:
        """Result of the most recent find_path() call."""
        return self._last_result

    def search(self, grid: Grid | None, start: Node | None, goal: Node | None) -> SearchResult:
        """
        Search from start to goal without modifying the grid.

        Invalid endpoints (missing, out of bounds or on a wall) are reported
        as SearchStatus.INVALID_ENDPOINTS rather than raised.
        """
        grid = grid if grid is not None else self._grid
        endpoints = self._resolve_endpoints(grid, start, goal)
        if endpoints is None:
            logger.warning(f"{self.name}: invalid endpoints {start!r} -> {goal!r}")
            return SearchResult(status=SearchStatus.INVALID_ENDPOINTS, algorithm=self.name)

        start, goal = endpoints
        state = SearchState.for_grid(grid)

        if not self._explore(grid, start, goal, state):
            logger.info(
                f"{self.name}: no path from {start.coord} to {goal.coord} "
                f"({len(state.explored)} explored)"
            )
            return SearchResult(
                status=SearchStatus.NO_PATH,
                explored=list(state.explored),
                algorithm=self.name,
                state=state,
            )

        path = state.reconstruct_path(grid, goal)
        cost = state.cost(goal)
        logger.info(
            f"{self.name}: path {start.coord} -> {goal.coord}, "
            f"{len(path) - 1} moves, cost {cost:g}, {len(state.explored)} explored"
        )
        return SearchResult(
            status=SearchStatus.FOUND,
            path=path,
            explored=list(state.explored),
            cost=cost,
            algorithm=self.name,
            state=state,
        )

    def find_path(self, grid: Grid | None, start: Node | None, goal: Node | None) -> list[Node]:
        """
        Find a path and publish the run's scratch onto the grid's nodes.

        Returns:
            Nodes from start to goal inclusive, or an empty list when the
            goal is unreachable or the endpoints are invalid
        """
        result = self.search(grid, start, goal)
        self._last_result = result
        self._explored = result.explored

        if result.state is not None:
            result.state.publish(grid if grid is not None else self._grid)

        return list(result.path)

    def explored_nodes(self) -> list[Node]:
        """Nodes finalized by the most recent find_path(), in finalize order."""
        return list(self._explored)

    @staticmethod
    def _resolve_endpoints(
        grid: Grid | None, start: Node | None, goal: Node | None
    ) -> tuple[Node, Node] | None:
        """Map endpoints onto grid's own nodes, or None if unusable."""
        if grid is None or start is None or goal is None:
            return None
        for node in (start, goal):
            if not grid.in_bounds(node.row, node.col) or grid.is_wall(node.row, node.col):
                return None
        return grid.get_node(start.row, start.col), grid.get_node(goal.row, goal.col)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
