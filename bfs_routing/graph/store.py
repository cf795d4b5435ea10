"""
Graph store: nodes and directed, weighted edges held in memory.

Usage:
    from bfs_routing.graph import GraphStore

    store = GraphStore()
    store.add_edge("A", "B", 1)
    store.neighbors("A")   # {"B": 1}
    store.delete_node("B") # also drops A -> B
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from bfs_routing.graph.errors import NodeNotFoundError

logger = logging.getLogger(__name__)


class GraphStore:
    """
    Directed, weighted graph keyed by node label.

    The adjacency mapping is `label -> {neighbor label -> weight}`. Every
    edge endpoint is a key of the mapping, so an edge never points at a
    node that does not exist. Weights are stored as given and play no part
    in path finding.

    The store does no locking. Hosts that share one store between threads
    must serialize calls themselves.
    """

    def __init__(self) -> None:
        self._adjacency: dict[str, dict[str, int]] = {}

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_node(self, node: str) -> None:
        """Create an isolated node if it does not exist yet."""
        if node not in self._adjacency:
            self._adjacency[node] = {}
            logger.debug(f"Added node '{node}'")

    def add_edge(self, source: str, target: str, weight: int) -> None:
        """
        Set the directed edge source -> target, creating both endpoints.

        Adding an edge that already exists overwrites its weight.

        Args:
            source: Label of the tail node
            target: Label of the head node
            weight: Integer weight (any sign, not used by the search)
        """
        self.add_node(source)
        self.add_node(target)

        previous = self._adjacency[source].get(target)
        self._adjacency[source][target] = weight

        if previous is None:
            logger.debug(f"Added edge '{source}' -> '{target}' (weight {weight})")
        else:
            logger.debug(
                f"Updated edge '{source}' -> '{target}' (weight {previous} -> {weight})"
            )

    def delete_node(self, node: str) -> bool:
        """
        Remove a node and every edge that starts or ends at it.

        Deleting a node that does not exist is a no-op.

        Returns:
            True if the node existed and was removed
        """
        if node not in self._adjacency:
            return False

        del self._adjacency[node]
        dropped = 0
        for neighbors in self._adjacency.values():
            if neighbors.pop(node, None) is not None:
                dropped += 1

        logger.debug(f"Deleted node '{node}' and {dropped} incoming edge(s)")
        return True

    def clear(self) -> None:
        """Remove all nodes and edges."""
        self._adjacency.clear()

    # =========================================================================
    # Queries
    # =========================================================================

    def has_node(self, node: str) -> bool:
        """Check if a node exists."""
        return node in self._adjacency

    def neighbors(self, node: str) -> dict[str, int]:
        """
        Get the outgoing edges of a node.

        Returns:
            Copy of the mapping neighbor label -> weight (empty if no edges)

        Raises:
            NodeNotFoundError: If node does not exist
        """
        try:
            return dict(self._adjacency[node])
        except KeyError:
            raise NodeNotFoundError(node) from None

    def iter_neighbors(self, node: str) -> Iterator[str]:
        """Iterate over neighbor labels in adjacency order without copying."""
        try:
            return iter(self._adjacency[node])
        except KeyError:
            raise NodeNotFoundError(node) from None

    def weight(self, source: str, target: str) -> int | None:
        """Get the weight of source -> target, or None if there is no such edge."""
        return self._adjacency.get(source, {}).get(target)

    def has_edge(self, source: str, target: str) -> bool:
        """Check if the directed edge source -> target exists."""
        return target in self._adjacency.get(source, {})

    def nodes(self) -> list[str]:
        """All node labels in insertion order."""
        return list(self._adjacency)

    def edges(self) -> list[tuple[str, str, int]]:
        """All edges as (source, target, weight) tuples."""
        return [
            (source, target, weight)
            for source, neighbors in self._adjacency.items()
            for target, weight in neighbors.items()
        ]

    def node_count(self) -> int:
        """Number of nodes."""
        return len(self._adjacency)

    def edge_count(self) -> int:
        """Number of directed edges."""
        return sum(len(neighbors) for neighbors in self._adjacency.values())

    def to_dict(self) -> dict[str, dict[str, int]]:
        """Copy of the adjacency mapping."""
        return {node: dict(neighbors) for node, neighbors in self._adjacency.items()}

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"GraphStore(nodes={self.node_count()}, edges={self.edge_count()})"
