"""
Heuristics module.

Provides distance estimates for guiding grid search:
- manhattan: |drow| + |dcol|, admissible on 4-connected grids with weights >= 1
- zero: Always 0, turns best-first search into uniform-cost search
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from gridpath.core.node import Node

Heuristic = Callable[["Node", "Node"], float]


def manhattan(a: Node, b: Node) -> float:
    """Manhattan distance between two cells."""
    return float(abs(a.row - b.row) + abs(a.col - b.col))


def zero(a: Node, b: Node) -> float:
    """No estimate."""
    return 0.0


__all__ = ["Heuristic", "manhattan", "zero"]
