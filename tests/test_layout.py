"""
Unit tests for NodeLayout placement and dragging.
"""

import pytest

from bfs_routing.config import NODE_HIT_RADIUS
from bfs_routing.graph import GraphStore
from bfs_routing.layout import NodeLayout


@pytest.fixture
def layout() -> NodeLayout:
    return NodeLayout(seed=7)


class TestPlacement:
    def test_placed_inside_box(self, layout):
        """Random placement stays inside the placement box."""
        for i in range(50):
            x, y = layout.place_if_absent(f"n{i}")
            assert 100 <= x < 700
            assert 50 <= y < 400

    def test_existing_position_kept(self, layout):
        first = layout.place_if_absent("A")
        assert layout.place_if_absent("A") == first

    def test_seed_is_deterministic(self):
        a = NodeLayout(seed=3)
        b = NodeLayout(seed=3)
        assert a.place_if_absent("A") == b.place_if_absent("A")

    def test_remove_and_position(self, layout):
        layout.place_if_absent("A")
        layout.remove("A")
        layout.remove("A")
        assert layout.position("A") is None
        assert len(layout) == 0

    def test_move_unknown_raises(self, layout):
        with pytest.raises(KeyError):
            layout.move("A", 1, 2)

    def test_sync_with_store(self, layout):
        """sync() drops deleted nodes and places new ones."""
        store = GraphStore()
        store.add_edge("A", "B", 1)
        layout.place_if_absent("Gone")
        layout.sync(store)
        assert sorted(layout.nodes()) == ["A", "B"]


class TestDragging:
    def test_hit_test_radius(self, layout):
        layout.place_if_absent("A")
        layout.move("A", 200, 200)
        assert layout.hit_test(200 + NODE_HIT_RADIUS - 1, 200) == "A"
        assert layout.hit_test(200 + NODE_HIT_RADIUS, 200) is None

    def test_drag_keeps_grab_offset(self, layout):
        """The node moves with the pointer, keeping the offset where it was grabbed."""
        layout.place_if_absent("A")
        layout.move("A", 200, 200)
        assert layout.begin_drag(205, 198) == "A"
        assert layout.offset == (5, -2)

        assert layout.drag_to(305, 298) is True
        assert layout.position("A") == (300, 300)

        layout.end_drag()
        assert layout.selected is None
        assert layout.drag_to(0, 0) is False
        assert layout.position("A") == (300, 300)

    def test_press_on_empty_space(self, layout):
        layout.place_if_absent("A")
        layout.move("A", 200, 200)
        assert layout.begin_drag(600, 50) is None
        assert layout.selected is None

    def test_removing_selected_node_ends_drag(self, layout):
        layout.place_if_absent("A")
        layout.move("A", 200, 200)
        layout.begin_drag(200, 200)
        layout.remove("A")
        assert layout.selected is None
