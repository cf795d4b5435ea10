"""
Breadth-first path finding over a GraphStore.

Finds the path with the fewest edges between two nodes. Edge weights are
ignored. Each call is a fresh traversal of the store as it is at call time.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from bfs_routing.config import BFS_NEIGHBOR_ORDER, validate_neighbor_order
from bfs_routing.graph.errors import NodeNotFoundError

if TYPE_CHECKING:
    from bfs_routing.graph.store import GraphStore

logger = logging.getLogger(__name__)

PATH_SEPARATOR = " → "


@dataclass
class PathResult:
    """
    Outcome of a single BFS run.

    Attributes:
        start: Start node label
        goal: Goal node label
        path: Node labels from start to goal, or None if unreachable
        visitation_log: Nodes in the order they were dequeued
        found: Whether the goal was reached
    """

    start: str
    goal: str
    path: list[str] | None
    visitation_log: list[str] = field(default_factory=list)
    found: bool = False

    @property
    def hops(self) -> int | None:
        """Number of edges on the path, or None if no path."""
        if self.path is None:
            return None
        return len(self.path) - 1

    def path_edges(self) -> list[tuple[str, str]]:
        """Consecutive (source, target) pairs along the path."""
        if not self.path:
            return []
        return list(zip(self.path, self.path[1:]))

    def contains_edge(self, source: str, target: str) -> bool:
        """Whether source -> target is one of the path's edges."""
        return (source, target) in self.path_edges()

    def total_weight(self, store: GraphStore) -> int | None:
        """
        Sum of stored weights along the path.

        Informational only: the search itself never looks at weights, so
        this is not necessarily the lightest route.
        """
        if self.path is None:
            return None
        return sum(store.weight(a, b) or 0 for a, b in self.path_edges())

    def describe(self) -> str:
        """One-line summary suitable for showing to a user."""
        if not self.found:
            return f"No path found from {self.start} to {self.goal}."
        return f"Path found: {PATH_SEPARATOR.join(self.path)}"


class PathFinder:
    """
    Unweighted shortest path search (BFS).

    Neighbors are examined in the store's adjacency order, which is the
    order edges were added. When several shortest paths exist the one
    returned depends on that order. Pass neighbor_order="lexicographic" to
    expand neighbors sorted by label, which makes the choice canonical.
    """

    def __init__(self, store: GraphStore, neighbor_order: str = BFS_NEIGHBOR_ORDER) -> None:
        """
        Initialize the path finder.

        Args:
            store: Graph to search
            neighbor_order: "insertion" or "lexicographic"
        """
        self.store = store
        self.neighbor_order = validate_neighbor_order(neighbor_order)

    def _ordered_neighbors(self, node: str) -> list[str]:
        neighbors = list(self.store.iter_neighbors(node))
        if self.neighbor_order == "lexicographic":
            neighbors.sort()
        return neighbors

    def find_path(self, start: str, goal: str) -> PathResult:
        """
        Find the shortest path by edge count from start to goal.

        Args:
            start: Start node label
            goal: Goal node label

        Returns:
            PathResult. When the goal is unreachable, path is None and the
            visitation log holds every node reachable from start.

        Raises:
            NodeNotFoundError: If start or goal is not in the store
        """
        for node in (start, goal):
            if not self.store.has_node(node):
                logger.warning(f"BFS aborted: node '{node}' not in graph")
                raise NodeNotFoundError(node)

        queue = deque([start])
        visited = {start}
        parent: dict[str, str | None] = {start: None}
        visitation_log: list[str] = []

        while queue:
            current = queue.popleft()
            visitation_log.append(current)
            logger.debug(f"Visiting: {current}")

            if current == goal:
                break

            for neighbor in self._ordered_neighbors(current):
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                parent[neighbor] = current
                queue.append(neighbor)

        if goal not in parent:
            logger.info(
                f"No path from '{start}' to '{goal}' "
                f"({len(visitation_log)} node(s) visited)"
            )
            return PathResult(
                start=start,
                goal=goal,
                path=None,
                visitation_log=visitation_log,
                found=False,
            )

        path = []
        node: str | None = goal
        while node is not None:
            path.append(node)
            node = parent[node]
        path.reverse()

        logger.info(f"Found path ({len(path) - 1} hops): {PATH_SEPARATOR.join(path)}")
        return PathResult(
            start=start,
            goal=goal,
            path=path,
            visitation_log=visitation_log,
            found=True,
        )


def find_path(
    store: GraphStore,
    start: str,
    goal: str,
    neighbor_order: str = BFS_NEIGHBOR_ORDER,
) -> PathResult:
    """Convenience wrapper around PathFinder(store).find_path(start, goal)."""
    return PathFinder(store, neighbor_order=neighbor_order).find_path(start, goal)
