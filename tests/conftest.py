"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import importlib.util
from pathlib import Path

import pytest

from bfs_routing.graph import GraphStore
from bfs_routing.layout import NodeLayout
from bfs_routing.session import RoutingSession


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def store() -> GraphStore:
    """Return an empty graph."""
    return GraphStore()


@pytest.fixture
def triangle() -> GraphStore:
    """A->B(1), B->C(1), A->C(5): one hop beats two regardless of weight."""
    store = GraphStore()
    store.add_edge("A", "B", 1)
    store.add_edge("B", "C", 1)
    store.add_edge("A", "C", 5)
    return store


@pytest.fixture
def diamond() -> GraphStore:
    """A->B, A->C, B->D, C->D: two shortest paths from A to D."""
    store = GraphStore()
    store.add_edge("A", "C", 1)
    store.add_edge("A", "B", 1)
    store.add_edge("C", "D", 1)
    store.add_edge("B", "D", 1)
    return store


@pytest.fixture
def session() -> RoutingSession:
    """Return an empty session with deterministic placement."""
    return RoutingSession(layout=NodeLayout(seed=42))


@pytest.fixture
def route_cli(project_root: Path):
    """Load scripts/route.py as a module."""
    spec = importlib.util.spec_from_file_location("route_cli", project_root / "scripts" / "route.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
