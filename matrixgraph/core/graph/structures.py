"""Graph snapshot for MatrixGraph.

This module provides the immutable Graph value that every engine consumes.
A snapshot is derived from the raw matrix once per computation and never
mutated afterwards.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

import networkx as nx
import numpy as np

from ..constants import GraphPolicy
from ..exceptions import NodeLookupError
from .labels import make_labels
from .weights import NO_EDGE, Weight, parse_number, to_float


RawCell = Any
RawMatrix = List[List[RawCell]]


def is_connection(value: RawCell, zero_as_no_edge: bool = True) -> bool:
    """Decide whether a raw cell declares a connection.

    A cell is not a connection if it is empty, non-numeric, equal to -1, or
    equal to 0 while zero_as_no_edge is active.

    Args:
        value: Raw cell token
        zero_as_no_edge: Whether a zero weight means "no connection"

    Returns:
        True if the cell declares a connection
    """
    number = parse_number(value)
    if number is None:
        return False
    if number == GraphPolicy.NO_CONNECTION_VALUE:
        return False
    if number == 0 and zero_as_no_edge:
        return False
    return True


@dataclass(frozen=True)
class Graph:
    """Normalized snapshot of a weighted graph.

    Attributes:
        n: Vertex count
        node_labels: Ordered vertex labels
        weights: n x n weights, NO_EDGE where there is no edge, 0 on the diagonal
        has_arc: n x n booleans, True iff i != j and a connection was declared
        is_symmetric: True iff has_arc equals its transpose
        raw_values: Raw tokens as entered, used by the codecs
        loops: Per vertex, True iff the raw diagonal cell declares a connection
    """

    n: int
    node_labels: Tuple[str, ...]
    weights: Tuple[Tuple[Weight, ...], ...]
    has_arc: Tuple[Tuple[bool, ...], ...]
    is_symmetric: bool
    raw_values: Tuple[Tuple[RawCell, ...], ...]
    loops: Tuple[bool, ...] = ()

    @classmethod
    def from_raw(cls, num_nodes: int, raw_matrix: Sequence[Sequence[RawCell]],
                 zero_as_no_edge: bool = True) -> 'Graph':
        """Build a snapshot from a raw matrix.

        Missing cells (a raw matrix smaller than num_nodes) are treated as empty.

        Args:
            num_nodes: Vertex count
            raw_matrix: Raw cell tokens, row-major
            zero_as_no_edge: Whether a zero weight means "no connection"

        Returns:
            New Graph snapshot
        """
        n = max(0, int(num_nodes))
        raw_rows = []
        weights = []
        has_arc = []
        loops = []

        for i in range(n):
            source_row = raw_matrix[i] if i < len(raw_matrix) else []
            raw_row = []
            weight_row = []
            arc_row = []
            for j in range(n):
                value = source_row[j] if j < len(source_row) else GraphPolicy.EMPTY_CELL
                raw_row.append(value)
                connected = is_connection(value, zero_as_no_edge)
                if i == j:
                    weight_row.append(0)
                    arc_row.append(False)
                    loops.append(connected)
                elif connected:
                    weight_row.append(parse_number(value))
                    arc_row.append(True)
                else:
                    weight_row.append(NO_EDGE)
                    arc_row.append(False)
            raw_rows.append(tuple(raw_row))
            weights.append(tuple(weight_row))
            has_arc.append(tuple(arc_row))

        is_symmetric = all(
            has_arc[i][j] == has_arc[j][i]
            for i in range(n) for j in range(i + 1, n)
        )

        return cls(
            n=n,
            node_labels=tuple(make_labels(n)),
            weights=tuple(weights),
            has_arc=tuple(has_arc),
            is_symmetric=is_symmetric,
            raw_values=tuple(raw_rows),
            loops=tuple(loops),
        )

    # Basic graph properties

    @property
    def arc_count(self) -> int:
        """Number of declared arcs (each undirected edge counts twice)."""
        return sum(sum(row) for row in self.has_arc)

    @property
    def edge_count(self) -> int:
        """Number of edges; arcs are halved when the graph is symmetric."""
        arcs = self.arc_count
        return arcs // 2 if self.is_symmetric else arcs

    def index_of(self, label: str) -> int:
        """Get the vertex index of a label.

        Args:
            label: Vertex label

        Returns:
            Zero-based index

        Raises:
            NodeLookupError: If the label is not in the graph
        """
        try:
            return self.node_labels.index(label)
        except ValueError:
            raise NodeLookupError(label, list(self.node_labels)) from None

    def find_index(self, label: Optional[str]) -> int:
        """Get the vertex index of a label, or -1 if it is not in the graph."""
        if label in self.node_labels:
            return self.node_labels.index(label)
        return -1

    def neighbors(self, label: str) -> List[str]:
        """Get out-neighbour labels in index order.

        Args:
            label: Vertex label

        Returns:
            Labels of vertices reachable through one arc
        """
        i = self.index_of(label)
        return [self.node_labels[j] for j in range(self.n) if self.has_arc[i][j]]

    def undirected_adjacent(self, u: int, v: int) -> bool:
        """Check adjacency in the undirected view of the graph."""
        return self.has_arc[u][v] or self.has_arc[v][u]

    # Export

    def weight_array(self) -> np.ndarray:
        """Get the weights as a float array with infinity for missing edges."""
        return np.array([[to_float(w) for w in row] for row in self.weights],
                        dtype=float).reshape(self.n, self.n)

    def to_networkx(self) -> nx.Graph:
        """Convert to a NetworkX graph labelled by node label.

        Returns:
            nx.Graph when symmetric, nx.DiGraph otherwise, with 'weight' on edges
        """
        graph = nx.Graph() if self.is_symmetric else nx.DiGraph()
        graph.add_nodes_from(self.node_labels)
        for i in range(self.n):
            for j in range(self.n):
                if self.has_arc[i][j]:
                    graph.add_edge(self.node_labels[i], self.node_labels[j],
                                   weight=self.weights[i][j])
        return graph
