"""
Routing session: the controller behind the visualizer.

Holds one graph, its layout, the most recent path and the message log
shown to the user. Every operation takes raw text, as typed into a form
or passed on the command line.
"""

from __future__ import annotations

import logging
import threading

from bfs_routing.config import BFS_NEIGHBOR_ORDER
from bfs_routing.graph.errors import NodeNotFoundError
from bfs_routing.graph.search import PathFinder, PathResult
from bfs_routing.graph.store import GraphStore
from bfs_routing.inputs import InvalidInputError, parse_label, parse_weight
from bfs_routing.layout import NodeLayout

logger = logging.getLogger(__name__)

MISSING_NODE_MESSAGE = "Start or goal node does not exist."


class RoutingSession:
    """
    Graph, layout and log for one visualizer.

    The session does not lock on its own. Hosts serving several threads
    (the Flask app) wrap calls in `with session.lock:`.

    Attributes:
        store: The graph being edited
        layout: Node positions for drawing
        path: Path from the last successful search, highlighted when drawing
        log: Messages from the last search
        last_result: Full result of the last search, if any
    """

    def __init__(
        self,
        store: GraphStore | None = None,
        layout: NodeLayout | None = None,
        neighbor_order: str = BFS_NEIGHBOR_ORDER,
    ) -> None:
        self.store = store if store is not None else GraphStore()
        self.layout = layout if layout is not None else NodeLayout()
        self.finder = PathFinder(self.store, neighbor_order=neighbor_order)
        self.path: list[str] | None = None
        self.log: list[str] = []
        self.last_result: PathResult | None = None
        self.lock = threading.RLock()

        self.layout.sync(self.store)

    # =========================================================================
    # Operations
    # =========================================================================

    def add_edge(
        self,
        source_text: str | None,
        target_text: str | None,
        weight_text: str | int | None = None,
    ) -> bool:
        """
        Add or overwrite an edge from form input.

        Empty labels are ignored. A weight that is not an integer falls
        back to the configured default.

        Returns:
            True if an edge was added
        """
        try:
            source = parse_label(source_text)
            target = parse_label(target_text)
        except InvalidInputError:
            logger.debug("Ignoring edge with empty endpoint")
            return False

        weight = parse_weight(weight_text)
        self.store.add_edge(source, target, weight)
        self.layout.place_if_absent(source)
        self.layout.place_if_absent(target)
        self.path = None

        logger.info(f"Edge '{source}' -> '{target}' = {weight}")
        return True

    def run_bfs(self, start_text: str | None, goal_text: str | None) -> PathResult | None:
        """
        Search for a path and rewrite the log.

        Returns:
            The search result, or None if start or goal does not exist
        """
        self.log = []
        self.path = None
        self.last_result = None

        start = (start_text or "").strip()
        goal = (goal_text or "").strip()

        try:
            result = self.finder.find_path(start, goal)
        except NodeNotFoundError as e:
            logger.warning(f"Cannot search: {e}")
            self.log.append(MISSING_NODE_MESSAGE)
            return None

        self.log.extend(f"Visiting: {node}" for node in result.visitation_log)
        self.log.append(result.describe())
        self.path = result.path
        self.last_result = result
        return result

    def delete_node(self, node_text: str | None) -> bool:
        """
        Delete a node, its edges and its position.

        Returns:
            True if the node existed
        """
        node = (node_text or "").strip()
        if not self.store.delete_node(node):
            return False

        self.layout.remove(node)
        self.path = None
        logger.info(f"Deleted node '{node}'")
        return True

    def reset(self) -> None:
        """Start over with an empty graph."""
        self.store.clear()
        self.layout.clear()
        self.path = None
        self.log = []
        self.last_result = None

    # =========================================================================
    # Views
    # =========================================================================

    def path_edges(self) -> set[tuple[str, str]]:
        """Edges on the highlighted path."""
        if not self.path:
            return set()
        return set(zip(self.path, self.path[1:]))

    def snapshot(self) -> dict:
        """JSON-friendly view of the whole session."""
        nodes = []
        for node in self.store.nodes():
            x, y = self.layout.position(node) or (None, None)
            nodes.append({"id": node, "x": x, "y": y})

        on_path = self.path_edges()
        edges = [
            {
                "source": source,
                "target": target,
                "weight": weight,
                "on_path": (source, target) in on_path,
            }
            for source, target, weight in self.store.edges()
        ]

        return {
            "nodes": nodes,
            "edges": edges,
            "path": list(self.path) if self.path else None,
            "log": list(self.log),
            "selected": self.layout.selected,
        }

    def log_text(self) -> str:
        return "\n".join(self.log)

    def __repr__(self) -> str:
        return f"RoutingSession({self.store!r})"
