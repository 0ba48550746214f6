"""
Node: a single cell of the pathfinding grid.

Identity is the (row, col) coordinate. The remaining fields are either
terrain data (weight) or scratch values written by the last search run.
"""

from __future__ import annotations

import math

from gridpath.config import DEFAULT_WEIGHT


class Node:
    """
    A grid cell with its terrain weight and last-search scratch values.

    Attributes:
        weight: Traversal cost paid when entering this cell
        g: Best known cost from the start (inf until reached)
        h: Heuristic estimate to the goal
        parent: Coordinate of the predecessor toward the start, or None
        visit_order: Rank in which the last search finalized this node (-1 = never)
    """

    def __init__(self, row: int, col: int, weight: float = DEFAULT_WEIGHT) -> None:
        self._row = row
        self._col = col
        self.weight = weight
        self.g = math.inf
        self.h = 0.0
        self.parent: tuple[int, int] | None = None
        self.visit_order = -1

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def coord(self) -> tuple[int, int]:
        return (self._row, self._col)

    @property
    def f(self) -> float:
        """Total estimated cost through this node (g + h)."""
        return self.g + self.h

    @property
    def explored(self) -> bool:
        """Whether the last search finalized this node."""
        return self.visit_order >= 0

    def reset_search_state(self) -> None:
        """Clear search scratch, keeping position and weight."""
        self.g = math.inf
        self.h = 0.0
        self.parent = None
        self.visit_order = -1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.coord == other.coord

    def __hash__(self) -> int:
        return hash(self.coord)

    def __repr__(self) -> str:
        return (
            f"Node({self._row},{self._col}) g={self.g:.2f} h={self.h:.2f} "
            f"f={self.f:.2f} w={self.weight:.2f}"
        )
