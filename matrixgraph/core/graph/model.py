"""Mutable owner of the raw adjacency matrix.

GraphModel holds the node count and the raw tokens exactly as the user
entered them. Engines never read it directly; they receive a Graph snapshot
from snapshot(). Codecs replace its state through load() on a successful
parse.
"""

from typing import List, Optional

import numpy as np
from loguru import logger

from ..constants import Defaults, GraphPolicy
from ..exceptions import NodeLookupError
from .labels import index_to_label, label_to_index, make_labels
from .structures import Graph, RawCell, RawMatrix


class GraphModel:
    """Raw matrix state with snapshot derivation.

    Attributes:
        num_nodes: Vertex count
        raw_matrix: Raw cell tokens (numbers or strings)
        zero_as_no_edge: Whether a zero weight means "no connection"
    """

    def __init__(self, num_nodes: int = Defaults.NUM_NODES,
                 raw_matrix: Optional[RawMatrix] = None,
                 zero_as_no_edge: bool = Defaults.ZERO_AS_NO_EDGE):
        """Initialize the model.

        Args:
            num_nodes: Vertex count
            raw_matrix: Optional initial matrix; an empty grid is created if None
            zero_as_no_edge: Whether a zero weight means "no connection"
        """
        if num_nodes < 0:
            raise ValueError(f"num_nodes must be >= 0, got {num_nodes}")
        self.num_nodes = num_nodes
        self.zero_as_no_edge = zero_as_no_edge
        self.raw_matrix: RawMatrix = []
        if raw_matrix is None:
            self.create_grid()
        else:
            self.raw_matrix = [list(row) for row in raw_matrix]

    @property
    def node_labels(self) -> List[str]:
        """Get the ordered vertex labels."""
        return make_labels(self.num_nodes)

    @staticmethod
    def _empty_cell(i: int, j: int) -> RawCell:
        return 0 if i == j else GraphPolicy.EMPTY_CELL

    def create_grid(self) -> None:
        """Reset to an empty n x n grid (0 on the diagonal, empty elsewhere)."""
        n = self.num_nodes
        self.raw_matrix = [[self._empty_cell(i, j) for j in range(n)] for i in range(n)]

    def resize(self, num_nodes: int) -> None:
        """Change the vertex count, keeping the overlapping cells.

        Args:
            num_nodes: New vertex count

        Raises:
            ValueError: If num_nodes is negative
        """
        if num_nodes < 0:
            raise ValueError(f"num_nodes must be >= 0, got {num_nodes}")

        # Already the right shape (e.g. right after an import)
        if (len(self.raw_matrix) == num_nodes
                and all(len(row) == num_nodes for row in self.raw_matrix)):
            self.num_nodes = num_nodes
            return

        old = self.raw_matrix
        new_matrix = []
        for i in range(num_nodes):
            row = []
            for j in range(num_nodes):
                if i < len(old) and j < len(old[i]):
                    row.append(old[i][j])
                else:
                    row.append(self._empty_cell(i, j))
            new_matrix.append(row)

        logger.debug(f"Resized matrix from {self.num_nodes} to {num_nodes} nodes")
        self.num_nodes = num_nodes
        self.raw_matrix = new_matrix

    def clear(self) -> None:
        """Reset every cell without changing the vertex count."""
        self.create_grid()

    def generate_random(self, probability: float = Defaults.RANDOM_PROBABILITY,
                        max_weight: int = Defaults.RANDOM_MAX_WEIGHT,
                        seed: Optional[int] = None) -> None:
        """Fill the off-diagonal cells with random integer weights.

        Args:
            probability: Chance that a given cell holds a connection
            max_weight: Largest weight drawn; weights lie in [1, max_weight]
            seed: Random seed for reproducibility

        Raises:
            ValueError: If probability is outside [0, 1] or max_weight < 1
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability must be in [0, 1], got {probability}")
        if max_weight < 1:
            raise ValueError(f"max_weight must be >= 1, got {max_weight}")

        rng = np.random.RandomState(seed)
        n = self.num_nodes
        matrix = []
        for i in range(n):
            row = []
            for j in range(n):
                if i == j:
                    row.append(0)
                elif rng.random_sample() < probability:
                    row.append(int(rng.randint(1, max_weight + 1)))
                else:
                    row.append(GraphPolicy.EMPTY_CELL)
            matrix.append(row)
        self.raw_matrix = matrix

    def set_cell(self, i: int, j: int, value: RawCell) -> None:
        """Set one raw cell.

        Raises:
            IndexError: If (i, j) lies outside the matrix
        """
        if not (0 <= i < self.num_nodes and 0 <= j < self.num_nodes):
            raise IndexError(f"Cell ({i}, {j}) outside {self.num_nodes}x{self.num_nodes} matrix")
        self.resize(self.num_nodes)
        self.raw_matrix[i][j] = value

    def load(self, num_nodes: int, raw_matrix: RawMatrix) -> None:
        """Replace the whole state at once (used by successful imports)."""
        self.num_nodes = num_nodes
        self.raw_matrix = [list(row) for row in raw_matrix]

    def snapshot(self) -> Graph:
        """Derive the normalized Graph for the current state."""
        return Graph.from_raw(self.num_nodes, self.raw_matrix, self.zero_as_no_edge)

    def to_index(self, label: str) -> int:
        """Get the index of a label.

        Raises:
            NodeLookupError: If the label is not a vertex of this graph
        """
        index = label_to_index(label) if isinstance(label, str) else -1
        if not 0 <= index < self.num_nodes:
            raise NodeLookupError(label, self.node_labels)
        return index

    def to_label(self, index: int) -> str:
        """Get the label of an index.

        Raises:
            NodeLookupError: If the index is not a vertex of this graph
        """
        if not 0 <= index < self.num_nodes:
            raise NodeLookupError(index, self.node_labels)
        return index_to_label(index)
