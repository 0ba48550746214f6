"""
Unit tests for AStarAlgorithm.
"""

import math

import pytest

from gridpath.algorithms import AStarAlgorithm, SearchStatus
from gridpath.core import Grid, Node
from gridpath.heuristics import manhattan


@pytest.fixture
def astar() -> AStarAlgorithm:
    return AStarAlgorithm()


class TestScenarios:
    """Test the reference scenarios."""

    def test_empty_grid_corner_to_corner(self, astar, empty_grid, path_cost):
        """5x5 empty grid: 8 moves, at most 25 explored."""
        path = astar.find_path(empty_grid, empty_grid.start_node, empty_grid.goal_node)
        assert len(path) == 9
        assert path[0] == empty_grid.start_node
        assert path[-1] == empty_grid.goal_node
        assert path_cost(empty_grid, path) == 8.0
        assert len(astar.explored_nodes()) <= 25

    def test_wall_column_blocks(self, astar):
        """A full wall column with no gap leaves the goal unreachable."""
        grid = Grid.from_text(
            """
            S.#..
            ..#..
            ..#..
            ..#.G
            """
        )
        assert astar.find_path(grid, grid.start_node, grid.goal_node) == []
        assert astar.last_result.status is SearchStatus.NO_PATH
        explored = {node.coord for node in astar.explored_nodes()}
        assert explored == {(r, c) for r in range(4) for c in range(2)}

    def test_weighted_corridor_detour(self, astar, corridor_grid, path_cost):
        """The cheaper detour beats the direct weight-5 corridor."""
        grid = corridor_grid
        path = astar.find_path(grid, grid.start_node, grid.goal_node)
        assert path_cost(grid, path) == 6.0
        assert all(node.weight == 1.0 for node in path)
        assert len(path) == 7
        assert astar.last_result.cost == 6.0


class TestEndpoints:
    """Test degenerate and invalid endpoints."""

    def test_start_equals_goal(self, astar, empty_grid):
        start = empty_grid.get_node(2, 2)
        assert astar.find_path(empty_grid, start, start) == [start]
        assert astar.explored_nodes() == [start]
        assert astar.last_result.cost == 0.0

    def test_start_on_wall(self, astar, empty_grid):
        empty_grid.set_wall(0, 0)
        assert astar.find_path(empty_grid, empty_grid.start_node, empty_grid.goal_node) == []
        assert astar.last_result.status is SearchStatus.INVALID_ENDPOINTS

    def test_goal_on_wall(self, astar, empty_grid):
        empty_grid.set_wall(4, 4)
        assert astar.find_path(empty_grid, empty_grid.start_node, empty_grid.goal_node) == []
        assert astar.last_result.status is SearchStatus.INVALID_ENDPOINTS

    def test_out_of_bounds(self, astar, empty_grid):
        assert astar.find_path(empty_grid, empty_grid.start_node, Node(9, 9)) == []
        assert astar.find_path(empty_grid, Node(-1, 0), empty_grid.goal_node) == []
        assert astar.explored_nodes() == []

    def test_missing_endpoint(self, astar, empty_grid):
        assert astar.find_path(empty_grid, None, empty_grid.goal_node) == []

    def test_missing_grid(self, astar):
        assert astar.find_path(None, Node(0, 0), Node(1, 1)) == []

    def test_foreign_nodes_resolve_to_grid(self, astar, empty_grid):
        """Endpoints from another source map onto the grid's own nodes."""
        path = astar.find_path(empty_grid, Node(0, 0), Node(0, 2))
        assert path[0] is empty_grid.get_node(0, 0)
        assert path[-1] is empty_grid.get_node(0, 2)


class TestOptimality:
    """Test path validity, optimality and heuristic admissibility."""

    @pytest.mark.parametrize("seed", range(10))
    def test_matches_reference_cost(self, astar, seed, make_weighted_grid, reference_cost, path_cost):
        grid = make_weighted_grid(seed)
        expected = reference_cost(grid, grid.start_node, grid.goal_node)
        path = astar.find_path(grid, grid.start_node, grid.goal_node)

        if math.isinf(expected):
            assert path == []
        else:
            assert path[0] == grid.start_node
            assert path[-1] == grid.goal_node
            assert path_cost(grid, path) == pytest.approx(expected)
            assert astar.last_result.cost == pytest.approx(expected)

    @pytest.mark.parametrize("seed", range(5))
    def test_heuristic_admissible(self, seed, reference_cost):
        """On unit weights Manhattan distance never exceeds the true cost."""
        grid = Grid(10, 10)
        grid.random_walls(0.2, seed)
        start = grid.place_start(0, 0)
        for node in grid:
            if grid.is_wall(node.row, node.col):
                continue
            true_cost = reference_cost(grid, start, node)
            if not math.isinf(true_cost):
                assert manhattan(start, node) <= true_cost


class TestExploredTrace:
    """Test the explored-order trace."""

    @pytest.mark.parametrize("seed", range(5))
    def test_unique_and_f_ordered(self, astar, seed, make_weighted_grid):
        grid = make_weighted_grid(seed, rows=15, cols=15)
        astar.find_path(grid, grid.start_node, grid.goal_node)
        explored = astar.explored_nodes()

        coords = [node.coord for node in explored]
        assert len(coords) == len(set(coords))

        f_values = [node.f for node in explored]
        for prev, cur in zip(f_values, f_values[1:]):
            assert prev <= cur + 1e-9

    def test_tie_break_prefers_goal_side(self, astar, empty_grid):
        """Equal f is broken by lower h, then push order."""
        astar.find_path(empty_grid, empty_grid.start_node, empty_grid.goal_node)
        coords = [node.coord for node in astar.explored_nodes()]
        assert coords == [
            (0, 0), (1, 0), (2, 0), (3, 0), (4, 0),
            (4, 1), (4, 2), (4, 3), (4, 4),
        ]

    def test_deterministic(self, make_weighted_grid):
        grid = make_weighted_grid(3)
        first, second = AStarAlgorithm(), AStarAlgorithm()
        path_a = first.find_path(grid, grid.start_node, grid.goal_node)
        path_b = second.find_path(grid, grid.start_node, grid.goal_node)
        assert [n.coord for n in path_a] == [n.coord for n in path_b]
        assert [n.coord for n in first.explored_nodes()] == [
            n.coord for n in second.explored_nodes()
        ]

    def test_empty_before_first_run(self, astar):
        assert astar.explored_nodes() == []
        assert astar.last_result is None

    def test_returns_copy(self, astar, empty_grid):
        astar.find_path(empty_grid, empty_grid.start_node, empty_grid.goal_node)
        astar.explored_nodes().clear()
        assert len(astar.explored_nodes()) == 9


class TestScratchPublishing:
    """Test how search scratch reaches the grid's nodes."""

    def test_find_path_publishes_scratch(self, astar, empty_grid):
        path = astar.find_path(empty_grid, empty_grid.start_node, empty_grid.goal_node)

        assert path[0].parent is None
        assert path[0].g == 0.0
        for prev, node in zip(path, path[1:]):
            assert node.parent == prev.coord

        goal = empty_grid.goal_node
        assert goal.g == 8.0
        assert goal.h == 0.0
        assert goal.f == 8.0

        for order, node in enumerate(astar.explored_nodes()):
            assert node.visit_order == order
            assert node.explored

    def test_unreached_nodes_stay_clean(self, astar, empty_grid):
        astar.find_path(empty_grid, empty_grid.start_node, empty_grid.goal_node)
        corner = empty_grid.get_node(0, 4)
        assert corner.visit_order == -1
        assert not corner.explored

    def test_previous_run_is_cleared(self, astar, empty_grid):
        astar.find_path(empty_grid, empty_grid.start_node, empty_grid.goal_node)
        astar.find_path(empty_grid, empty_grid.start_node, empty_grid.get_node(0, 1))
        assert empty_grid.get_node(4, 4).visit_order == -1
        assert empty_grid.get_node(4, 4).g == math.inf

    def test_search_leaves_grid_untouched(self, astar, empty_grid):
        """search() keeps its scratch private."""
        result = astar.search(empty_grid, empty_grid.start_node, empty_grid.goal_node)
        assert result.found
        assert all(node.g == math.inf for node in empty_grid)
        assert all(node.visit_order == -1 for node in empty_grid)
        assert astar.explored_nodes() == []

    def test_default_grid(self, empty_grid):
        astar = AStarAlgorithm(empty_grid)
        path = astar.find_path(None, empty_grid.start_node, empty_grid.goal_node)
        assert len(path) == 9
        assert empty_grid.goal_node.explored


class TestWeightedAStar:
    """Test the heuristic weight option."""

    def test_name(self):
        assert AStarAlgorithm().name == "astar"
        assert AStarAlgorithm(heuristic_weight=2.0).name == "astar-w2"

    @pytest.mark.parametrize("seed", range(5))
    def test_valid_but_not_cheaper_than_optimal(self, seed, make_weighted_grid, reference_cost, path_cost):
        grid = make_weighted_grid(seed)
        expected = reference_cost(grid, grid.start_node, grid.goal_node)
        path = AStarAlgorithm(heuristic_weight=2.0).find_path(grid, grid.start_node, grid.goal_node)
        if math.isinf(expected):
            assert path == []
        else:
            assert path_cost(grid, path) >= expected - 1e-9
