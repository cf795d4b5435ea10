"""
BFS Routing.

An in-memory directed, weighted graph with a breadth-first path finder,
plus a small web visualizer for building graphs and watching the search.
"""

__version__ = "0.1.0"
