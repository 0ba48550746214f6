"""
Algorithms module.

Provides search strategies sharing the PathfindingAlgorithm contract:
- AStarAlgorithm: Best-first search with Manhattan heuristic
- DijkstraAlgorithm: Uniform-cost search (A* without heuristic)
- BreadthFirstAlgorithm: Fewest-moves baseline, ignores weights
"""

from gridpath.algorithms.astar import AStarAlgorithm
from gridpath.algorithms.base import PathfindingAlgorithm
from gridpath.algorithms.bfs import BreadthFirstAlgorithm
from gridpath.algorithms.dijkstra import DijkstraAlgorithm
from gridpath.algorithms.state import SearchResult, SearchState, SearchStatus

__all__ = [
    "PathfindingAlgorithm",
    "AStarAlgorithm",
    "DijkstraAlgorithm",
    "BreadthFirstAlgorithm",
    "SearchResult",
    "SearchState",
    "SearchStatus",
    "ALGORITHMS",
    "get_algorithm",
]

ALGORITHMS = {
    "astar": AStarAlgorithm,
    "dijkstra": DijkstraAlgorithm,
    "bfs": BreadthFirstAlgorithm,
}


def get_algorithm(name: str, **kwargs) -> PathfindingAlgorithm:
    """
    Get an algorithm by name.

    Args:
        name: Algorithm identifier (astar, dijkstra, bfs)
        **kwargs: Additional arguments passed to the constructor (e.g., grid, heuristic_weight)

    Returns:
        Instantiated algorithm

    Raises:
        ValueError: If algorithm name is unknown
    """
    if name not in ALGORITHMS:
        available = ", ".join(ALGORITHMS.keys())
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}")

    return ALGORITHMS[name](**kwargs)
