"""
Node positions for drawing, kept apart from the graph topology.

The layout is a side table keyed by node label. Whoever deletes a node
from a GraphStore is responsible for removing it here too (RoutingSession
does this).
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from bfs_routing.config import (
    NODE_HIT_RADIUS,
    PLACEMENT_X_MIN,
    PLACEMENT_X_SPAN,
    PLACEMENT_Y_MIN,
    PLACEMENT_Y_SPAN,
)

if TYPE_CHECKING:
    from bfs_routing.graph.store import GraphStore

logger = logging.getLogger(__name__)


class NodeLayout:
    """
    Mutable (x, y) positions plus mouse-drag state.

    Attributes:
        selected: Node currently being dragged, or None
        offset: Grab offset (pointer minus node centre) of the drag
    """

    def __init__(self, seed: int | None = None) -> None:
        """
        Initialize an empty layout.

        Args:
            seed: Seed for random placement (None for nondeterministic)
        """
        self._rng = np.random.default_rng(seed)
        self._positions: dict[str, tuple[float, float]] = {}
        self.selected: str | None = None
        self.offset: tuple[float, float] = (0.0, 0.0)

    # =========================================================================
    # Positions
    # =========================================================================

    def place_if_absent(self, node: str) -> tuple[float, float]:
        """Give node a random position unless it already has one."""
        if node not in self._positions:
            x = PLACEMENT_X_MIN + self._rng.random() * PLACEMENT_X_SPAN
            y = PLACEMENT_Y_MIN + self._rng.random() * PLACEMENT_Y_SPAN
            self._positions[node] = (float(x), float(y))
            logger.debug(f"Placed '{node}' at ({x:.1f}, {y:.1f})")
        return self._positions[node]

    def position(self, node: str) -> tuple[float, float] | None:
        """Position of node, or None if it has not been placed."""
        return self._positions.get(node)

    def move(self, node: str, x: float, y: float) -> None:
        """Move a placed node. Raises KeyError for unplaced nodes."""
        if node not in self._positions:
            raise KeyError(node)
        self._positions[node] = (float(x), float(y))

    def remove(self, node: str) -> None:
        """Forget a node's position. Unknown nodes are ignored."""
        self._positions.pop(node, None)
        if self.selected == node:
            self.end_drag()

    def nodes(self) -> list[str]:
        return list(self._positions)

    def positions(self) -> dict[str, tuple[float, float]]:
        """Copy of all positions."""
        return dict(self._positions)

    def sync(self, store: GraphStore) -> None:
        """Drop positions of deleted nodes and place any new ones."""
        for node in list(self._positions):
            if not store.has_node(node):
                self.remove(node)
        for node in store.nodes():
            self.place_if_absent(node)

    def clear(self) -> None:
        self._positions.clear()
        self.end_drag()

    # =========================================================================
    # Dragging
    # =========================================================================

    def hit_test(self, x: float, y: float) -> str | None:
        """First node whose centre lies within the grab radius of (x, y)."""
        for node, (nx, ny) in self._positions.items():
            if math.hypot(x - nx, y - ny) < NODE_HIT_RADIUS:
                return node
        return None

    def begin_drag(self, x: float, y: float) -> str | None:
        """Select the node under the pointer and remember the grab offset."""
        node = self.hit_test(x, y)
        if node is not None:
            nx, ny = self._positions[node]
            self.selected = node
            self.offset = (x - nx, y - ny)
        return node

    def drag_to(self, x: float, y: float) -> bool:
        """Move the selected node with the pointer. Returns False if nothing is selected."""
        if self.selected is None:
            return False
        dx, dy = self.offset
        self._positions[self.selected] = (float(x - dx), float(y - dy))
        return True

    def end_drag(self) -> None:
        self.selected = None
        self.offset = (0.0, 0.0)

    def __len__(self) -> int:
        return len(self._positions)
