"""MatrixGraph graph infrastructure module.

Core Components:
- weights: NoEdge sentinel and weight arithmetic
- labels: index <-> label mapping
- structures: immutable Graph snapshot
- model: GraphModel owning the raw matrix

Quick Start:
    from matrixgraph.core.graph import GraphModel

    model = GraphModel(3, [[0, 3, ""], [3, 0, 1], ["", 1, 0]])
    graph = model.snapshot()
"""

from .weights import NO_EDGE, NoEdge, Weight, is_edge, parse_number, format_weight
from .labels import index_to_label, label_to_index, make_labels
from .structures import Graph, RawMatrix, is_connection
from .model import GraphModel

__all__ = [
    # Weights
    'NO_EDGE',
    'NoEdge',
    'Weight',
    'is_edge',
    'parse_number',
    'format_weight',

    # Labels
    'index_to_label',
    'label_to_index',
    'make_labels',

    # Structures
    'Graph',
    'RawMatrix',
    'is_connection',
    'GraphModel',
]
