"""
Exceptions raised by the graph core.
"""

from __future__ import annotations


class NodeNotFoundError(KeyError):
    """A node label was looked up that is not present in the store."""

    def __init__(self, node: str) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"Node '{self.node}' does not exist"
