"""GraphML format.

Writing is done by hand to keep the exact element layout; reading goes
through networkx.parse_graphml.
"""

from xml.sax.saxutils import quoteattr, escape

import networkx as nx

from ..core.constants import FormatNames
from ..core.exceptions import CellValueError, StructuralError
from ..core.graph import Graph, format_weight
from .base import DecodedMatrix, GraphFormat
from .registry import register_format


XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>'
GRAPHML_NS = "http://graphml.graphdrawing.org/xmlns"
DEFAULT_WEIGHT = "1"


def node_id(index: int) -> str:
    return f"n{index}"


@register_format(FormatNames.GRAPHML)
class GraphMLFormat(GraphFormat):
    """Nodes n0..n(k-1) in order, edges carrying a 'weight' data element.

    Symmetric graphs are written with edgedefault="undirected" and one edge
    per pair; directed graphs get one edge per arc. On import a missing
    weight defaults to 1 and undirected edges are mirrored.
    """

    name = FormatNames.GRAPHML
    mime = "application/xml"
    ext = "graphml"
    accept = ".graphml,.xml"

    def serialize(self, graph: Graph) -> str:
        edgedefault = "undirected" if graph.is_symmetric else "directed"
        lines = [
            XML_HEADER,
            f'<graphml xmlns="{GRAPHML_NS}">',
            '  <key id="weight" for="edge" attr.name="weight"/>',
            f'  <graph id="G" edgedefault="{edgedefault}">',
        ]
        for i in range(graph.n):
            lines.append(f'    <node id="{node_id(i)}"/>')
        for i in range(graph.n):
            for j in range(graph.n):
                if not graph.has_arc[i][j] or (graph.is_symmetric and j < i):
                    continue
                weight = escape(format_weight(graph.weights[i][j]))
                lines.append(
                    f'    <edge source={quoteattr(node_id(i))} target={quoteattr(node_id(j))}>'
                    f'<data key="weight">{weight}</data></edge>'
                )
        lines.append('  </graph>')
        lines.append('</graphml>')
        return "\n".join(lines)

    def decode(self, text: str) -> DecodedMatrix:
        if not text or not text.strip():
            raise StructuralError(self.name, "empty input")

        try:
            parsed = nx.parse_graphml(text)
        except (ValueError, TypeError) as e:
            # Typed keys are converted by networkx while reading
            raise CellValueError(self.name, str(e)) from e

        nodes = list(parsed.nodes())
        if not nodes:
            raise StructuralError(self.name, "no nodes found")

        index = {node: i for i, node in enumerate(nodes)}
        matrix = self.empty_matrix(len(nodes))
        for source, target, data in parsed.edges(data=True):
            weight = str(data.get("weight", DEFAULT_WEIGHT)).strip()
            u, v = index[source], index[target]
            self.require_number(weight, u, v)
            matrix[u][v] = weight
            if not parsed.is_directed():
                matrix[v][u] = weight

        return len(nodes), self.force_diagonal(matrix)
