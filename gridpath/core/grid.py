"""
Grid topology: a fixed-size matrix of nodes with walls, weights and endpoints.

Usage:
    from gridpath.core import Grid

    grid = Grid(rows=21, cols=31)
    grid.set_wall(3, 4)
    grid.place_start(1, 1)
    grid.place_goal(19, 29)
    neighbors = grid.get_neighbors(grid.get_node(1, 1))
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator

import numpy as np

from gridpath.config import DEFAULT_WEIGHT
from gridpath.core.node import Node

logger = logging.getLogger(__name__)

# Neighbor offsets in a fixed order: up, down, left, right
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Text form characters
WALL_CHAR = "#"
OPEN_CHAR = "."
START_CHAR = "S"
GOAL_CHAR = "G"
PATH_CHAR = "*"


class Grid:
    """
    Dense rows x cols cell matrix owning every Node.

    Walls live in a parallel boolean numpy matrix; weights live on the nodes.
    Start and goal are aliases of nodes in the matrix, never copies.
    Only search scratch is cleared between runs, walls and weights persist.

    Mutating a grid while a search or maze generation runs on it is not
    supported; callers keep a single writer.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """
        Allocate the grid. The node matrix is never reallocated afterwards.

        Args:
            rows: Number of rows (>= 1)
            cols: Number of columns (>= 1)

        Raises:
            ValueError: If either dimension is below 1
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be >= 1, got {rows}x{cols}")

        self._rows = rows
        self._cols = cols
        self._nodes: list[list[Node]] = [
            [Node(r, c) for c in range(cols)] for r in range(rows)
        ]
        self._walls = np.zeros((rows, cols), dtype=bool)

        self._start: Node | None = None
        self._goal: Node | None = None

    # =========================================================================
    # Dimensions and Node Access
    # =========================================================================

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def get_node(self, row: int, col: int) -> Node | None:
        """Get the node at (row, col), or None outside the grid."""
        if not self.in_bounds(row, col):
            return None
        return self._nodes[row][col]

    def __iter__(self) -> Iterator[Node]:
        """Iterate over all nodes in row-major order."""
        for row in self._nodes:
            yield from row

    # =========================================================================
    # Walls and Weights
    # =========================================================================

    @property
    def walls(self) -> np.ndarray:
        """Read-only view of the wall matrix."""
        view = self._walls.view()
        view.flags.writeable = False
        return view

    def is_wall(self, row: int, col: int) -> bool:
        """Anything outside the grid counts as a wall."""
        if not self.in_bounds(row, col):
            return True
        return bool(self._walls[row, col])

    def set_wall(self, row: int, col: int, wall: bool = True) -> None:
        if not self.in_bounds(row, col):
            return
        self._walls[row, col] = wall

    def toggle_wall(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            return
        self._walls[row, col] = not self._walls[row, col]

    def fill_walls(self, wall: bool = True) -> None:
        """Set every cell to wall (or open)."""
        self._walls.fill(wall)

    def wall_count(self) -> int:
        return int(self._walls.sum())

    def set_weight(self, row: int, col: int, weight: float) -> None:
        """
        Set the terrain cost of a cell. No-op outside the grid.

        Weights below 1 are accepted, but Manhattan-guided search is only
        guaranteed optimal when every weight is at least 1.

        Raises:
            ValueError: If weight is negative or NaN
        """
        if math.isnan(weight) or weight < 0:
            raise ValueError(f"Weight must be a non-negative number, got {weight}")
        if not self.in_bounds(row, col):
            return
        self._nodes[row][col].weight = float(weight)

    def random_walls(self, density: float, seed: int | None = None) -> None:
        """
        Independently turn each cell into a wall with probability `density`.

        Start and goal are not preserved; re-stamp them open with
        place_start()/place_goal() if needed.

        Args:
            density: Wall probability in [0, 1]
            seed: Random seed for reproducibility

        Raises:
            ValueError: If density is outside [0, 1]
        """
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"Wall density must be in [0, 1], got {density}")

        rng = np.random.default_rng(seed)
        self._walls[:] = rng.random(self.shape) < density
        logger.debug(f"Random walls (density={density}, seed={seed}): {self.wall_count()} walls")

    # =========================================================================
    # Start / Goal
    # =========================================================================

    @property
    def start_node(self) -> Node | None:
        return self._start

    @property
    def goal_node(self) -> Node | None:
        return self._goal

    def set_start_node(self, node: Node | None) -> None:
        """
        Set (or clear with None) the start node.

        Raises:
            ValueError: If the node lies outside the grid
        """
        self._start = self._own_node(node, "start")

    def set_goal_node(self, node: Node | None) -> None:
        """
        Set (or clear with None) the goal node.

        Raises:
            ValueError: If the node lies outside the grid
        """
        self._goal = self._own_node(node, "goal")

    def place_start(self, row: int, col: int) -> Node:
        """Set the start at (row, col) and clear any wall under it."""
        node = self._node_or_raise(row, col, "start")
        self._walls[row, col] = False
        self._start = node
        return node

    def place_goal(self, row: int, col: int) -> Node:
        """Set the goal at (row, col) and clear any wall under it."""
        node = self._node_or_raise(row, col, "goal")
        self._walls[row, col] = False
        self._goal = node
        return node

    def _own_node(self, node: Node | None, role: str) -> Node | None:
        if node is None:
            return None
        return self._node_or_raise(node.row, node.col, role)

    def _node_or_raise(self, row: int, col: int, role: str) -> Node:
        if not self.in_bounds(row, col):
            raise ValueError(
                f"{role} ({row}, {col}) out of bounds for {self._rows}x{self._cols} grid"
            )
        return self._nodes[row][col]

    # =========================================================================
    # Search Support
    # =========================================================================

    def get_neighbors(self, node: Node | None) -> list[Node]:
        """
        Passable 4-directional neighbors in the order up, down, left, right.

        The fixed order keeps exploration order reproducible.
        """
        if node is None:
            return []

        neighbors = []
        for dr, dc in DIRECTIONS:
            r, c = node.row + dr, node.col + dc
            if not self.in_bounds(r, c) or self._walls[r, c]:
                continue
            neighbors.append(self._nodes[r][c])
        return neighbors

    def movement_cost(self, from_node: Node | None, to_node: Node | None) -> float:
        """Cost of stepping from one node into an adjacent one: the target's weight."""
        if from_node is None or to_node is None:
            return math.inf
        return to_node.weight

    def reset_search_state(self) -> None:
        """Clear search scratch on every node; walls, weights and endpoints stay."""
        for node in self:
            node.reset_search_state()

    def reset_all(self, clear_start_goal: bool = True) -> None:
        """Clear walls, weights and search scratch, optionally the endpoints too."""
        self._walls.fill(False)
        for node in self:
            node.reset_search_state()
            node.weight = DEFAULT_WEIGHT
        if clear_start_goal:
            self._start = None
            self._goal = None
        logger.debug(f"Grid reset (clear_start_goal={clear_start_goal})")

    # =========================================================================
    # Text Form
    # =========================================================================

    def to_text(self, path: Iterable[Node] | None = None) -> str:
        """
        Render the grid as text, one line per row.

        S = start, G = goal, # = wall, * = path, 2-9 = integral weight, . = open
        """
        on_path = {node.coord for node in path} if path else set()
        lines = []
        for r in range(self._rows):
            chars = []
            for c in range(self._cols):
                node = self._nodes[r][c]
                if self._start is not None and self._start.coord == (r, c):
                    chars.append(START_CHAR)
                elif self._goal is not None and self._goal.coord == (r, c):
                    chars.append(GOAL_CHAR)
                elif self._walls[r, c]:
                    chars.append(WALL_CHAR)
                elif (r, c) in on_path:
                    chars.append(PATH_CHAR)
                elif 2 <= node.weight <= 9 and float(node.weight).is_integer():
                    chars.append(str(int(node.weight)))
                else:
                    chars.append(OPEN_CHAR)
            lines.append("".join(chars))
        return "\n".join(lines)

    @classmethod
    def from_text(cls, text: str) -> Grid:
        """
        Build a grid from the text form produced by to_text().

        Path markers (*) are read as open cells.

        Raises:
            ValueError: If the text is empty, ragged or has unknown characters
        """
        lines = [line.strip() for line in text.strip().splitlines()]
        lines = [line for line in lines if line]
        if not lines:
            raise ValueError("Grid text is empty")

        width = len(lines[0])
        for i, line in enumerate(lines):
            if len(line) != width:
                raise ValueError(f"Row {i} has {len(line)} cells, expected {width}")

        grid = cls(len(lines), width)
        for r, line in enumerate(lines):
            for c, char in enumerate(line):
                if char == WALL_CHAR:
                    grid.set_wall(r, c)
                elif char == START_CHAR:
                    grid.place_start(r, c)
                elif char == GOAL_CHAR:
                    grid.place_goal(r, c)
                elif char in "23456789":
                    grid.set_weight(r, c, float(char))
                elif char not in (OPEN_CHAR, PATH_CHAR, "1"):
                    raise ValueError(f"Unknown grid character {char!r} at ({r}, {c})")
        return grid

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols}, walls={self.wall_count()})"
