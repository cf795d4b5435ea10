"""
Edge list files for seeding a graph.

Accepted layouts (JSON or msgpack), weight optional in both:

    [["A", "B", 3], ["B", "C"]]
    [{"source": "A", "target": "B", "weight": 3}, {"source": "B", "target": "C"}]

Files are only read. Graph state is never written back.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

import msgpack

from bfs_routing.config import DEFAULT_EDGE_WEIGHT
from bfs_routing.graph.store import GraphStore
from bfs_routing.inputs import InvalidInputError, parse_label, parse_weight

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EdgeRow:
    """One directed edge read from a file."""

    source: str
    target: str
    weight: int = DEFAULT_EDGE_WEIGHT


def _parse_row(index: int, row: object) -> EdgeRow:
    if isinstance(row, dict):
        fields = [row.get("source"), row.get("target")]
        if "weight" in row:
            fields.append(row["weight"])
    elif isinstance(row, (list, tuple)) and 2 <= len(row) <= 3:
        fields = list(row)
    else:
        raise ValueError(f"Row {index}: expected [source, target, weight?] or an object")

    try:
        source = parse_label(fields[0] if isinstance(fields[0], str) else None)
        target = parse_label(fields[1] if isinstance(fields[1], str) else None)
        weight = DEFAULT_EDGE_WEIGHT
        if len(fields) == 3:
            weight = parse_weight(fields[2], default=None)
    except InvalidInputError as e:
        raise ValueError(f"Row {index}: {e}") from e

    return EdgeRow(source=source, target=target, weight=weight)


def parse_rows(rows: object) -> list[EdgeRow]:
    """Validate decoded file contents into EdgeRows."""
    if not isinstance(rows, list):
        raise ValueError("Edge list must be a list of rows")
    return [_parse_row(i, row) for i, row in enumerate(rows)]


def load_edge_list(path: str | Path) -> list[EdgeRow]:
    """
    Read an edge list file.

    The format is chosen by extension: `.msgpack`/`.mpk` for msgpack,
    anything else is read as JSON.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the contents are not a valid edge list
    """
    path = Path(path)
    logger.info(f"Loading edge list from {path}...")

    if path.suffix.lower() in (".msgpack", ".mpk"):
        with open(path, "rb") as f:
            raw = msgpack.load(f)
    else:
        with open(path, encoding="utf-8") as f:
            try:
                raw = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e

    rows = parse_rows(raw)
    logger.info(f"Loaded {len(rows):,} edges")
    return rows


def build_store(rows: list[EdgeRow], store: GraphStore | None = None) -> GraphStore:
    """Apply rows to store (a new one if not given) in file order."""
    store = store if store is not None else GraphStore()
    for row in rows:
        store.add_edge(row.source, row.target, row.weight)
    return store
