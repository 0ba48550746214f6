"""
Per-search scratch and result records.

A SearchState holds everything one algorithm run writes (g, h, parent,
visit order, explored trace) in arrays shaped like the grid, so the grid
itself stays read-only while a search is in flight.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from gridpath.core.grid import Grid
    from gridpath.core.node import Node


class SearchStatus(Enum):
    """Outcome of a search run."""

    FOUND = "found"
    NO_PATH = "no_path"
    INVALID_ENDPOINTS = "invalid_endpoints"


class SearchState:
    """
    Mutable scratch for a single search run.

    Attributes:
        g: Best known cost from start per cell (inf = unreached)
        h: Heuristic estimate per cell
        parent: (row, col) of each cell's predecessor, (-1, -1) = none
        visit_order: Finalize rank per cell, -1 = not finalized
        explored: Finalized nodes in finalize order
    """

    def __init__(self, rows: int, cols: int) -> None:
        self.g = np.full((rows, cols), np.inf)
        self.h = np.zeros((rows, cols))
        self.parent = np.full((rows, cols, 2), -1, dtype=np.int64)
        self.visit_order = np.full((rows, cols), -1, dtype=np.int64)
        self.explored: list[Node] = []

    @classmethod
    def for_grid(cls, grid: Grid) -> SearchState:
        return cls(grid.rows, grid.cols)

    @property
    def f(self) -> np.ndarray:
        """g + h for every cell."""
        return self.g + self.h

    def cost(self, node: Node) -> float:
        return float(self.g[node.row, node.col])

    def relax(self, node: Node, parent: Node | None, g: float, h: float) -> None:
        """Record an improved cost for `node` reached via `parent`."""
        self.g[node.row, node.col] = g
        self.h[node.row, node.col] = h
        if parent is not None:
            self.parent[node.row, node.col] = parent.coord

    def finalize(self, node: Node) -> int:
        """Assign the next visit order to `node` and append it to the trace."""
        order = len(self.explored)
        self.visit_order[node.row, node.col] = order
        self.explored.append(node)
        return order

    def parent_of(self, row: int, col: int) -> tuple[int, int] | None:
        pr, pc = self.parent[row, col]
        if pr < 0:
            return None
        return (int(pr), int(pc))

    def reconstruct_path(self, grid: Grid, goal: Node) -> list[Node]:
        """Follow parents from goal back to start; returns start -> goal."""
        path = []
        coord: tuple[int, int] | None = goal.coord
        while coord is not None:
            path.append(grid.get_node(*coord))
            coord = self.parent_of(*coord)
        path.reverse()
        return path

    def publish(self, grid: Grid) -> None:
        """
        Copy this run's scratch onto the grid's nodes.

        Previous scratch on every node is cleared first, so nodes this
        run never reached read as unvisited.
        """
        grid.reset_search_state()
        for row, col in np.argwhere(np.isfinite(self.g)):
            node = grid.get_node(int(row), int(col))
            node.g = float(self.g[row, col])
            node.h = float(self.h[row, col])
            node.parent = self.parent_of(row, col)
            node.visit_order = int(self.visit_order[row, col])


@dataclass
class SearchResult:
    """
    Complete record of a finished search.

    Attributes:
        status: FOUND, NO_PATH or INVALID_ENDPOINTS
        path: Nodes from start to goal inclusive (empty unless FOUND)
        explored: Finalized nodes in finalize order
        cost: Summed movement cost along the path (inf unless FOUND)
        algorithm: Name of the algorithm that ran
        state: Scratch of the run (None for invalid endpoints)
    """

    status: SearchStatus
    path: list[Node] = field(default_factory=list)
    explored: list[Node] = field(default_factory=list)
    cost: float = math.inf
    algorithm: str = ""
    state: SearchState | None = None

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND

    @property
    def explored_count(self) -> int:
        return len(self.explored)
