"""
Unit tests for GraphStore.
"""

import pytest

from bfs_routing.graph import GraphStore, NodeNotFoundError


class TestAddEdge:
    """Test edge insertion."""

    def test_creates_both_endpoints(self, store):
        """Adding an edge should create missing endpoints."""
        store.add_edge("A", "B", 3)
        assert store.has_node("A")
        assert store.has_node("B")

    def test_edge_is_directed(self, store):
        """Only the source should list the target as a neighbor."""
        store.add_edge("A", "B", 3)
        assert store.neighbors("A") == {"B": 3}
        assert store.neighbors("B") == {}

    def test_overwrite_keeps_single_edge(self, store):
        """Re-adding an edge should replace its weight, not duplicate it."""
        store.add_edge("A", "B", 1)
        store.add_edge("A", "B", 7)
        assert store.neighbors("A") == {"B": 7}
        assert store.edge_count() == 1

    def test_reciprocal_edges_are_separate(self, store):
        """An undirected link is two independent edges."""
        store.add_edge("A", "B", 1)
        store.add_edge("B", "A", 2)
        assert store.weight("A", "B") == 1
        assert store.weight("B", "A") == 2
        assert store.edge_count() == 2

    def test_self_loop_allowed(self, store):
        """Self-loops should be stored like any other edge."""
        store.add_edge("A", "A", 1)
        assert store.neighbors("A") == {"A": 1}

    @pytest.mark.parametrize("weight", [0, -4, 10**9])
    def test_any_integer_weight(self, store, weight):
        """Weights are not validated for sign or range."""
        store.add_edge("A", "B", weight)
        assert store.weight("A", "B") == weight


class TestDeleteNode:
    """Test node deletion and its cascade."""

    def test_removes_node(self, triangle):
        """Deleted node should no longer exist."""
        assert triangle.delete_node("B") is True
        assert not triangle.has_node("B")

    def test_removes_incoming_and_outgoing_edges(self, triangle):
        """No edge may reference a deleted node."""
        triangle.delete_node("B")
        for source, target, _ in triangle.edges():
            assert "B" not in (source, target)
        assert triangle.neighbors("A") == {"C": 5}

    def test_absent_node_is_noop(self, triangle):
        """Deleting a missing node should not raise or change anything."""
        before = triangle.to_dict()
        assert triangle.delete_node("Z") is False
        assert triangle.delete_node("Z") is False
        assert triangle.to_dict() == before

    def test_neighbors_survive_as_isolated_nodes(self, store):
        """Endpoints of dropped edges stay in the graph."""
        store.add_edge("A", "B", 1)
        store.delete_node("A")
        assert store.nodes() == ["B"]
        assert store.neighbors("B") == {}

    def test_self_loop_node_deleted(self, store):
        """Deleting a node with a self-loop leaves nothing behind."""
        store.add_edge("A", "A", 1)
        store.delete_node("A")
        assert len(store) == 0
        assert store.edge_count() == 0


class TestQueries:
    """Test read-only accessors."""

    def test_neighbors_unknown_node_raises(self, store):
        """neighbors() should raise NodeNotFoundError for unknown nodes."""
        with pytest.raises(NodeNotFoundError) as excinfo:
            store.neighbors("missing")
        assert excinfo.value.node == "missing"

    def test_node_not_found_is_key_error(self, store):
        """NodeNotFoundError can be caught as KeyError."""
        with pytest.raises(KeyError):
            store.neighbors("missing")

    def test_neighbors_returns_copy(self, triangle):
        """Mutating the returned mapping must not touch the store."""
        neighbors = triangle.neighbors("A")
        neighbors["Z"] = 99
        assert "Z" not in triangle.neighbors("A")
        assert not triangle.has_node("Z")

    def test_has_node_and_contains(self, triangle):
        """has_node and `in` should agree."""
        assert triangle.has_node("A") and "A" in triangle
        assert not triangle.has_node("Z") and "Z" not in triangle

    def test_add_node_isolated(self, store):
        """add_node should create a node without edges, idempotently."""
        store.add_node("A")
        store.add_node("A")
        assert store.nodes() == ["A"]
        assert store.edge_count() == 0

    def test_counts_and_edges(self, triangle):
        """Counts and edge listing should reflect insertion order."""
        assert triangle.node_count() == 3
        assert triangle.edge_count() == 3
        assert triangle.edges() == [("A", "B", 1), ("A", "C", 5), ("B", "C", 1)]

    def test_weight_missing_edge(self, triangle):
        """weight() should be None when there is no such edge."""
        assert triangle.weight("C", "A") is None
        assert triangle.weight("Z", "A") is None
        assert triangle.has_edge("A", "C")
        assert not triangle.has_edge("C", "A")

    def test_clear(self, triangle):
        """clear() should empty the graph."""
        triangle.clear()
        assert len(triangle) == 0
        assert triangle.edges() == []

    def test_repr(self, triangle):
        assert repr(triangle) == "GraphStore(nodes=3, edges=3)"


def test_independent_instances():
    """Stores should not share state."""
    first = GraphStore()
    second = GraphStore()
    first.add_edge("A", "B", 1)
    assert len(second) == 0
