"""Minimum spanning tree (Kruskal) with a uniqueness verdict."""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from ..core.constants import Symbols
from ..core.enums import MSTUniqueness
from ..core.graph import Graph, is_edge
from ..core.graph.weights import Number


@dataclass(frozen=True)
class WeightedEdge:
    """Undirected edge between two vertex indices."""
    u: int
    v: int
    weight: Number
    id: str

    @property
    def sort_key(self) -> Tuple[Number, str]:
        return (self.weight, self.id)


@dataclass(frozen=True)
class MSTResult:
    """Output of the spanning tree engine.

    Attributes:
        cost: Sum of the selected edge weights
        edges: Selected edge ids joined with ', '
        uniqueness: NOT_CONNECTED, UNIQUE_YES or UNIQUE_NO
        edge_ids: Selected edge ids in (weight, id) order
    """
    cost: Number
    edges: str
    uniqueness: MSTUniqueness
    edge_ids: Tuple[str, ...] = ()


class UnionFind:
    """Disjoint sets over vertex indices with iterative path compression."""

    def __init__(self, n: int):
        self.parent = list(range(n))

    def find(self, i: int) -> int:
        root = i
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[i] != root:
            self.parent[i], i = root, self.parent[i]
        return root

    def union(self, i: int, j: int) -> bool:
        """Merge the sets of i and j; False if they were already joined."""
        root_i = self.find(i)
        root_j = self.find(j)
        if root_i == root_j:
            return False
        self.parent[root_i] = root_j
        return True


def edge_id(label_a: str, label_b: str) -> str:
    """Build an edge id from its endpoint labels, sorted lexicographically."""
    return label_a + label_b if label_a < label_b else label_b + label_a


def collect_edges(graph: Graph) -> List[WeightedEdge]:
    """Enumerate upper-triangle edges sorted by (weight, id).

    Args:
        graph: Graph snapshot

    Returns:
        Edges (i, j) with i < j that carry a weight
    """
    edges = []
    for i in range(graph.n):
        for j in range(i + 1, graph.n):
            weight = graph.weights[i][j]
            if is_edge(weight):
                edges.append(WeightedEdge(
                    u=i, v=j, weight=weight,
                    id=edge_id(graph.node_labels[i], graph.node_labels[j]),
                ))
    edges.sort(key=lambda e: e.sort_key)
    return edges


def _run_kruskal(n: int, edges: Sequence[WeightedEdge],
                 skip: Optional[int] = None) -> Tuple[List[WeightedEdge], Number, UnionFind]:
    union_find = UnionFind(n)
    selected = []
    cost: Number = 0
    for index, edge in enumerate(edges):
        if index == skip:
            continue
        if union_find.union(edge.u, edge.v):
            selected.append(edge)
            cost += edge.weight
    return selected, cost, union_find


def compute_kruskal(graph: Graph) -> MSTResult:
    """Build a minimum spanning tree and decide whether it is unique.

    The graph is read as undirected through its upper triangle; for a
    non-symmetric graph this ignores the lower triangle.

    The uniqueness check removes each tree edge in turn and reruns Kruskal;
    an alternative spanning tree with the same cost means the MST is not
    unique.

    An empty graph (n == 0) has nothing to span and is reported as
    NOT_CONNECTED rather than UNIQUE_YES.

    Args:
        graph: Graph snapshot

    Returns:
        MSTResult
    """
    n = graph.n
    if not graph.is_symmetric:
        logger.warning("Spanning tree computed on a non-symmetric matrix; using the upper triangle only")

    edges = collect_edges(graph)
    logger.debug(f"Running Kruskal on {n} nodes, {len(edges)} edges")

    selected, cost, union_find = _run_kruskal(n, edges)
    selected.sort(key=lambda e: e.sort_key)
    edge_ids = tuple(e.id for e in selected)
    edge_string = Symbols.EDGE_SEPARATOR.join(edge_ids)

    roots = {union_find.find(i) for i in range(n)}
    if len(roots) != 1:
        return MSTResult(cost=cost, edges=edge_string,
                         uniqueness=MSTUniqueness.NOT_CONNECTED, edge_ids=edge_ids)

    uniqueness = MSTUniqueness.UNIQUE_YES
    selected_positions = [index for index, edge in enumerate(edges) if edge in selected]
    for position in selected_positions:
        alternative, alternative_cost, _ = _run_kruskal(n, edges, skip=position)
        if len(alternative) == n - 1 and math.isclose(alternative_cost, cost):
            uniqueness = MSTUniqueness.UNIQUE_NO
            break

    return MSTResult(cost=cost, edges=edge_string, uniqueness=uniqueness, edge_ids=edge_ids)
