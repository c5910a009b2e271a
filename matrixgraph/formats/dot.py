"""Graphviz Dot format.

Only the edge statements matter on import. The accepted grammar is exactly

    word ( '--' | '->' ) word '[label="' digits '"]'

with optional whitespace between the four parts; everything else in the
text is skipped. The node set is the sorted union of all endpoints seen.
"""

import re
from dataclasses import dataclass
from typing import Iterator, List, NamedTuple

from ..core.constants import FormatNames
from ..core.exceptions import StructuralError
from ..core.graph import Graph, format_weight
from .base import DecodedMatrix, GraphFormat
from .registry import register_format


UNDIRECTED_OP = "--"
DIRECTED_OP = "->"


class Token(NamedTuple):
    kind: str
    value: str


TOKEN_SPEC = [
    ('LABEL', r'\[label="(?P<weight>\d+)"\]'),
    ('OP', r'--|->'),
    ('WORD', r'\w+'),
    ('SPACE', r'\s+'),
    ('OTHER', r'.'),
]
TOKEN_PATTERN = re.compile('|'.join(f'(?P<{kind}>{pattern})' for kind, pattern in TOKEN_SPEC), re.DOTALL)


def tokenize(text: str) -> Iterator[Token]:
    """Split Dot text into tokens, dropping whitespace."""
    for match in TOKEN_PATTERN.finditer(text):
        kind = match.lastgroup
        if kind == 'SPACE':
            continue
        if kind == 'LABEL':
            yield Token(kind, match.group('weight'))
        else:
            yield Token(kind, match.group())


@dataclass(frozen=True)
class DotEdge:
    source: str
    target: str
    weight: str
    undirected: bool


def parse_edges(text: str) -> List[DotEdge]:
    """Extract every 'word op word [label="digits"]' statement."""
    tokens = list(tokenize(text))
    edges = []
    i = 0
    while i + 3 < len(tokens):
        source, op, target, label = tokens[i:i + 4]
        if (source.kind == 'WORD' and op.kind == 'OP'
                and target.kind == 'WORD' and label.kind == 'LABEL'):
            edges.append(DotEdge(source.value, target.value, label.value,
                                 undirected=op.value == UNDIRECTED_OP))
            i += 4
        else:
            i += 1
    return edges


@register_format(FormatNames.DOT)
class DotFormat(GraphFormat):
    """'graph G { A -- B [label="w"]; }' when symmetric, 'digraph' with '->' otherwise."""

    name = FormatNames.DOT
    mime = "text/plain"
    ext = "dot"
    accept = ".dot,.gv"

    def serialize(self, graph: Graph) -> str:
        lines = ["graph G {" if graph.is_symmetric else "digraph G {"]
        labels = graph.node_labels
        for i in range(graph.n):
            for j in range(graph.n):
                if not graph.has_arc[i][j]:
                    continue
                weight = format_weight(graph.weights[i][j])
                if graph.is_symmetric and i < j:
                    lines.append(f'  {labels[i]} {UNDIRECTED_OP} {labels[j]} [label="{weight}"];')
                elif not graph.is_symmetric:
                    lines.append(f'  {labels[i]} {DIRECTED_OP} {labels[j]} [label="{weight}"];')
        lines.append("}")
        return "\n".join(lines)

    def decode(self, text: str) -> DecodedMatrix:
        if not text or not text.strip():
            raise StructuralError(self.name, "empty input")

        edges = parse_edges(text)
        nodes = sorted({e.source for e in edges} | {e.target for e in edges})
        if not nodes:
            raise StructuralError(self.name, "no edges found")

        index = {label: i for i, label in enumerate(nodes)}
        matrix = self.empty_matrix(len(nodes))
        for edge in edges:
            u, v = index[edge.source], index[edge.target]
            matrix[u][v] = edge.weight
            if edge.undirected:
                matrix[v][u] = edge.weight

        return len(nodes), self.force_diagonal(matrix)
