#!/usr/bin/env python3
"""
BFS Routing CLI - build a graph and find the path with the fewest hops.

Usage:
    python scripts/route.py --edge A B 1 --edge B C 1 --edge A C 5 --start A --goal C
    python scripts/route.py --edges data/example.json --start A --goal D
    python scripts/route.py --edges data/example.msgpack --delete B --start A --goal C -v
    python scripts/route.py --edge A B --edge A C --edge B D --edge C D --start A --goal D --lexicographic

Edge list files:
    JSON or msgpack, a list of [source, target, weight] rows or
    {"source": ..., "target": ..., "weight": ...} objects. Weight is optional.

Exit codes:
    0 - path found
    1 - no path, or start/goal does not exist
    2 - bad input (unreadable edge list, invalid weight)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv  # noqa: E402

load_dotenv(project_root / ".env")

from bfs_routing.config import BFS_NEIGHBOR_ORDER, DEFAULT_EDGE_WEIGHT, LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL  # noqa: E402
from bfs_routing.data import build_store, load_edge_list  # noqa: E402
from bfs_routing.inputs import InvalidInputError, parse_label, parse_weight  # noqa: E402
from bfs_routing.session import RoutingSession  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find the shortest (fewest hops) path in a directed graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--edge",
        nargs="+",
        action="append",
        default=[],
        metavar="FROM TO [WEIGHT]",
        help="Add a directed edge (repeatable, weight defaults to 1)",
    )
    parser.add_argument(
        "--edges",
        type=Path,
        default=None,
        help="JSON or msgpack edge list to load before --edge arguments",
    )
    parser.add_argument(
        "--delete",
        action="append",
        default=[],
        metavar="NODE",
        help="Delete a node after all edges are added (repeatable)",
    )
    parser.add_argument(
        "--start",
        type=str,
        required=True,
        help="Start node label",
    )
    parser.add_argument(
        "--goal",
        type=str,
        required=True,
        help="Goal node label",
    )
    parser.add_argument(
        "--lexicographic",
        action="store_true",
        help="Expand neighbors in label order instead of insertion order",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def build_session(args: argparse.Namespace) -> RoutingSession:
    """
    Create a session from --edges, --edge and --delete.

    Raises:
        InvalidInputError: If an --edge argument is malformed
        ValueError: If the edge list file is malformed
        FileNotFoundError: If the edge list file does not exist
    """
    order = "lexicographic" if args.lexicographic else BFS_NEIGHBOR_ORDER
    store = build_store(load_edge_list(args.edges)) if args.edges else None
    session = RoutingSession(store=store, neighbor_order=order)

    for values in args.edge:
        if len(values) not in (2, 3):
            raise InvalidInputError(f"--edge takes FROM TO [WEIGHT], got {' '.join(values)}")
        source = parse_label(values[0])
        target = parse_label(values[1])
        weight = parse_weight(values[2], default=None) if len(values) == 3 else DEFAULT_EDGE_WEIGHT
        session.add_edge(source, target, weight)

    for node in args.delete:
        if not session.delete_node(node):
            logging.getLogger(__name__).info(f"Node '{node}' not in graph, nothing to delete")

    return session


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    try:
        session = build_session(args)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print("\n" + "=" * 60)
    print("BFS Routing")
    print("=" * 60)
    print(f"  Nodes:  {session.store.node_count()}")
    print(f"  Edges:  {session.store.edge_count()}")
    print(f"  Start:  {args.start}")
    print(f"  Goal:   {args.goal}")
    print("=" * 60 + "\n")

    result = session.run_bfs(args.start, args.goal)

    for line in session.log:
        print(line)

    if result is None or not result.found:
        return 1

    print(f"\nHops: {result.hops}")
    print(f"Stored weight along path: {result.total_weight(session.store)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
