"""Mapping between vertex indices and display labels.

Labels follow spreadsheet column naming: 0 -> 'A', 25 -> 'Z', 26 -> 'AA',
27 -> 'AB' and so on.
"""

from typing import List

from ..constants import GraphPolicy


def index_to_label(index: int) -> str:
    """Convert a vertex index to its label.

    Args:
        index: Zero-based vertex index

    Returns:
        Label string

    Raises:
        ValueError: If index is negative
    """
    if index < 0:
        raise ValueError(f"Vertex index must be >= 0, got {index}")

    label = ""
    value = index + 1
    while value > 0:
        value, remainder = divmod(value - 1, GraphPolicy.LABEL_ALPHABET)
        label = chr(GraphPolicy.LABEL_BASE + remainder) + label
    return label


def label_to_index(label: str) -> int:
    """Convert a label back to its vertex index.

    Args:
        label: Label made of letters A-Z (case-insensitive)

    Returns:
        Zero-based index, or -1 if the label is malformed
    """
    if not label or not label.isalpha() or not label.isascii():
        return -1

    value = 0
    for char in label.upper():
        value = value * GraphPolicy.LABEL_ALPHABET + (ord(char) - GraphPolicy.LABEL_BASE + 1)
    return value - 1


def make_labels(n: int) -> List[str]:
    """Build the ordered label list for n vertices."""
    return [index_to_label(i) for i in range(n)]
