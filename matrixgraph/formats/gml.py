"""GML (Graph Modelling Language) format."""

import networkx as nx

from ..core.constants import FormatNames
from ..core.exceptions import GrammarError, StructuralError
from ..core.graph import Graph, format_weight, parse_number
from .base import DecodedMatrix, GraphFormat
from .registry import register_format


DEFAULT_WEIGHT = "1"


@register_format(FormatNames.GML)
class GmlFormat(GraphFormat):
    """'graph [ directed 0|1 node [...] edge [...] ]' with numeric node ids.

    Node ids are the vertex indices and carry the vertex label. On import
    the node ids are sorted ascending to assign matrix indices, a missing
    weight defaults to 1, a zero weight means no edge, and edges are
    mirrored when the graph is undirected.
    """

    name = FormatNames.GML
    mime = "text/plain"
    ext = "gml"
    accept = ".gml"

    def serialize(self, graph: Graph) -> str:
        lines = ["graph [", f"  directed {0 if graph.is_symmetric else 1}"]
        for i, label in enumerate(graph.node_labels):
            lines.extend([
                "  node [",
                f"    id {i}",
                f'    label "{label}"',
                "  ]",
            ])

        edge_count = 0
        for i in range(graph.n):
            for j in range(graph.n):
                if not graph.has_arc[i][j] or (graph.is_symmetric and j < i):
                    continue
                lines.extend([
                    "  edge [",
                    f"    id {edge_count}",
                    f"    source {i}",
                    f"    target {j}",
                    f"    weight {format_weight(graph.weights[i][j])}",
                    "  ]",
                ])
                edge_count += 1
        lines.append("]")
        return "\n".join(lines)

    def decode(self, text: str) -> DecodedMatrix:
        if not text or not text.strip():
            raise StructuralError(self.name, "empty input")

        parsed = nx.parse_gml(text, label="id")
        for node in parsed.nodes():
            if isinstance(node, bool) or not isinstance(node, int):
                raise GrammarError(self.name, f"node id {node!r} is not an integer")
        nodes = sorted(parsed.nodes())
        if not nodes:
            raise StructuralError(self.name, "no nodes found")

        index = {node: i for i, node in enumerate(nodes)}
        matrix = self.empty_matrix(len(nodes))
        for source, target, data in parsed.edges(data=True):
            weight = str(data.get("weight", DEFAULT_WEIGHT)).strip()
            u, v = index[source], index[target]
            self.require_number(weight, u, v)
            if parse_number(weight) == 0:
                weight = ""
            matrix[u][v] = weight
            if not parsed.is_directed():
                matrix[v][u] = weight

        return len(nodes), self.force_diagonal(matrix)
