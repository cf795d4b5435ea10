"""
Graph module.

Provides the in-memory graph and the breadth-first path finder:
- GraphStore: Directed, weighted adjacency mapping
- PathFinder: BFS shortest path by edge count
- PathResult: Path plus visitation log
- NodeNotFoundError: Raised for unknown node labels
"""

from bfs_routing.graph.errors import NodeNotFoundError
from bfs_routing.graph.search import PathFinder, PathResult, find_path
from bfs_routing.graph.store import GraphStore

__all__ = [
    "GraphStore",
    "PathFinder",
    "PathResult",
    "find_path",
    "NodeNotFoundError",
]
