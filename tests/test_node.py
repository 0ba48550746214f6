"""
Unit tests for Node.
"""

import math

import pytest

from gridpath.core import Node


class TestScratchFields:
    """Test search scratch defaults and derived fields."""

    def test_defaults(self):
        """A new node is unreached and unvisited."""
        node = Node(2, 3)
        assert node.g == math.inf
        assert node.h == 0.0
        assert node.f == math.inf
        assert node.parent is None
        assert node.visit_order == -1
        assert node.explored is False
        assert node.weight == 1.0

    def test_f_follows_g_and_h(self):
        """f is always g + h."""
        node = Node(0, 0)
        node.g = 2.0
        node.h = 3.0
        assert node.f == 5.0
        node.g = 4.0
        assert node.f == 7.0

    def test_explored_mirrors_visit_order(self):
        """explored is true exactly when visit_order >= 0."""
        node = Node(0, 0)
        node.visit_order = 0
        assert node.explored is True
        node.visit_order = -1
        assert node.explored is False

    def test_reset_keeps_weight(self):
        """Resetting clears scratch but not terrain weight."""
        node = Node(1, 1, weight=4.0)
        node.g, node.h, node.parent, node.visit_order = 3.0, 1.0, (0, 1), 7
        node.reset_search_state()
        assert node.g == math.inf
        assert node.h == 0.0
        assert node.parent is None
        assert node.visit_order == -1
        assert node.weight == 4.0


class TestIdentity:
    """Test coordinate identity."""

    def test_equality_ignores_other_fields(self):
        """Nodes with the same coordinates are equal regardless of scratch."""
        a = Node(1, 2)
        b = Node(1, 2, weight=9.0)
        b.g = 5.0
        assert a == b
        assert hash(a) == hash(b)
        assert b in {a}

    def test_different_coordinates_not_equal(self):
        assert Node(1, 2) != Node(2, 1)

    def test_not_equal_to_tuple(self):
        assert Node(1, 2) != (1, 2)

    def test_coordinates_read_only(self):
        """Row and column cannot be reassigned."""
        node = Node(1, 2)
        with pytest.raises(AttributeError):
            node.row = 5
        with pytest.raises(AttributeError):
            node.col = 5
        assert node.coord == (1, 2)

    def test_repr(self):
        assert repr(Node(1, 2)).startswith("Node(1,2)")
