"""
Configuration constants for BFS Routing.

All tunable parameters are defined here. Values that differ between
deployments can be overridden through environment variables (a `.env`
file at the project root is picked up by the entry points).
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of bfs_routing/
PROJECT_ROOT = Path(__file__).parent.parent

# Optional directory for seed edge lists used by the CLI
DATA_DIR = PROJECT_ROOT / "data"

# Environment file loaded by entry points
ENV_PATH = PROJECT_ROOT / ".env"

# =============================================================================
# Graph Configuration
# =============================================================================

# Weight used when an edge weight is missing or cannot be parsed
DEFAULT_EDGE_WEIGHT = 1

# Neighbor iteration order for BFS:
#   "insertion"     - adjacency order (order edges were added)
#   "lexicographic" - sorted by label, canonical among equal-length paths
BFS_NEIGHBOR_ORDER = os.environ.get("BFS_NEIGHBOR_ORDER", "insertion")

NEIGHBOR_ORDERS = ("insertion", "lexicographic")

# =============================================================================
# Canvas / Layout Configuration
# =============================================================================

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 450

# New nodes are placed uniformly at random inside this box
PLACEMENT_X_MIN = 100.0
PLACEMENT_X_SPAN = 600.0
PLACEMENT_Y_MIN = 50.0
PLACEMENT_Y_SPAN = 350.0

# Node circle radius (pixels) and drag grab distance
NODE_RADIUS = 10
NODE_HIT_RADIUS = 15

# Label offset above the node centre
NODE_LABEL_OFFSET = 15

EDGE_WIDTH = 2

# =============================================================================
# Colors
# =============================================================================

EDGE_COLOR = "gold"
PATH_EDGE_COLOR = "red"
NODE_COLOR = "lightblue"
LABEL_COLOR = "black"

# =============================================================================
# Web App Configuration
# =============================================================================

SECRET_KEY = os.environ.get("SECRET_KEY", "bfs-routing-dev-key")
FLASK_HOST = os.environ.get("FLASK_HOST", "127.0.0.1")
FLASK_PORT = int(os.environ.get("FLASK_PORT", "5000"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_neighbor_order(order: str) -> str:
    """Return order if it is a known neighbor order, else raise ValueError."""
    if order not in NEIGHBOR_ORDERS:
        available = ", ".join(NEIGHBOR_ORDERS)
        raise ValueError(f"Unknown neighbor order '{order}'. Available: {available}")
    return order
