"""
Parsing of raw text input (form fields, CLI arguments) into core values.

The graph core assumes clean labels and integer weights. Everything typed
by a user goes through these helpers first.
"""

from __future__ import annotations

import logging

from bfs_routing.config import DEFAULT_EDGE_WEIGHT

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when user input cannot be turned into a label or weight."""


def parse_label(text: str | None) -> str:
    """
    Strip a node label and reject empty ones.

    Raises:
        InvalidInputError: If the label is empty after stripping
    """
    label = (text or "").strip()
    if not label:
        raise InvalidInputError("Node label must not be empty")
    return label


def parse_weight(text: str | int | None, default: int | None = DEFAULT_EDGE_WEIGHT) -> int:
    """
    Parse an edge weight.

    Args:
        text: Raw weight text (ints pass through unchanged)
        default: Value used when text is not an integer. None makes an
            unparseable weight an error instead.

    Returns:
        Integer weight

    Raises:
        InvalidInputError: If parsing fails and default is None
    """
    if isinstance(text, int) and not isinstance(text, bool):
        return text

    raw = "" if text is None else str(text).strip()
    try:
        return int(raw)
    except ValueError:
        if default is None:
            raise InvalidInputError(f"Invalid weight '{raw}'") from None
        logger.warning(f"Could not parse weight '{raw}', using {default}")
        return default
