"""
Data loading module.

Reads seed edge lists (JSON or msgpack) into a GraphStore.

Usage:
    from bfs_routing.data import load_edge_list, build_store

    store = build_store(load_edge_list("data/example.json"))
"""

from bfs_routing.data.loader import EdgeRow, build_store, load_edge_list, parse_rows

__all__ = ["EdgeRow", "build_store", "load_edge_list", "parse_rows"]
