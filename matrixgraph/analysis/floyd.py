"""All-pairs shortest paths (Floyd-Warshall) with per-pivot snapshots."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd
from loguru import logger

from ..core.constants import Symbols
from ..core.enums import PathStatus
from ..core.exceptions import NodeLookupError
from ..core.graph import Graph, Weight, is_edge
from ..core.graph.weights import add_weights, is_shorter, to_float


DistanceMatrix = Tuple[Tuple[Weight, ...], ...]


def _freeze(matrix: List[List[Weight]]) -> DistanceMatrix:
    return tuple(tuple(row) for row in matrix)


@dataclass(frozen=True)
class FloydStep:
    """Distance matrix after relaxing through one pivot.

    Attributes:
        pivot: Pivot index k, or -1 for the initial matrix
        matrix: Full n x n distance matrix at that point
    """
    pivot: int
    matrix: DistanceMatrix


@dataclass(frozen=True)
class PathQuery:
    """Answer to a start/end shortest path query."""
    status: PathStatus
    cost: Optional[Weight] = None
    path: Tuple[str, ...] = ()

    @property
    def path_string(self) -> str:
        """Path rendered as 'A → B → C', or '-' if there is none."""
        if not self.path:
            return Symbols.NONE
        return Symbols.PATH_SEPARATOR.join(self.path)


@dataclass(frozen=True)
class FloydResult:
    """Output of the Floyd-Warshall engine.

    Attributes:
        labels: Vertex labels the matrices are indexed by
        steps: Initial snapshot followed by one snapshot per pivot
        dist: Final distance matrix (NO_EDGE where unreachable)
        next_hop: Index of the next vertex on the shortest i -> j path,
            None if i == j or j is unreachable
        diameter: Largest finite distance over distinct pairs
        has_inf_pairs: Whether any distinct pair is unreachable
    """
    labels: Tuple[str, ...]
    steps: Tuple[FloydStep, ...]
    dist: DistanceMatrix
    next_hop: Tuple[Tuple[Optional[int], ...], ...]
    diameter: Weight
    has_inf_pairs: bool = field(default=False)

    def distance(self, start: str, end: str) -> Weight:
        """Get the final distance between two labels."""
        return self.dist[self._index(start)][self._index(end)]

    def _index(self, label: str) -> int:
        if label not in self.labels:
            raise NodeLookupError(label, list(self.labels))
        return self.labels.index(label)

    def query(self, start: str, end: str) -> PathQuery:
        """Reconstruct the shortest path between two labels.

        Args:
            start: Start label
            end: End label

        Returns:
            PathQuery with the cost and the label sequence (both endpoints
            included), or status UNREACHABLE

        Raises:
            NodeLookupError: If either label is not in the graph
        """
        u = self._index(start)
        v = self._index(end)

        if not is_edge(self.dist[u][v]):
            return PathQuery(status=PathStatus.UNREACHABLE)

        path = [self.labels[u]]
        current = u
        # A simple path has at most n - 1 hops; more means a negative cycle
        for _ in range(len(self.labels)):
            if current == v:
                break
            current = self.next_hop[current][v]
            if current is None:
                break
            path.append(self.labels[current])

        if current != v:
            logger.warning(f"Path {start} -> {end} could not be reconstructed (negative cycle?)")
            return PathQuery(status=PathStatus.UNREACHABLE)

        return PathQuery(status=PathStatus.OK, cost=self.dist[u][v], path=tuple(path))

    def as_array(self, step: Optional[int] = None) -> np.ndarray:
        """Get a distance matrix as a float array (infinity where unreachable).

        Args:
            step: Index into steps, or None for the final matrix
        """
        matrix = self.dist if step is None else self.steps[step].matrix
        n = len(self.labels)
        return np.array([[to_float(d) for d in row] for row in matrix], dtype=float).reshape(n, n)

    def as_frame(self, step: Optional[int] = None) -> pd.DataFrame:
        """Get a distance matrix as a labelled DataFrame."""
        return pd.DataFrame(self.as_array(step), index=list(self.labels), columns=list(self.labels))


def compute_floyd(graph: Graph) -> FloydResult:
    """Run Floyd-Warshall on a graph snapshot.

    The initial snapshot is the weight matrix with 0 on the diagonal; one
    more snapshot is captured after each pivot k = 0..n-1. Negative weights
    are accepted but negative cycles are not detected.

    Args:
        graph: Graph snapshot

    Returns:
        FloydResult with n + 1 snapshots
    """
    n = graph.n
    logger.debug(f"Running Floyd-Warshall on {n} nodes")

    dist = [list(row) for row in graph.weights]
    for i in range(n):
        dist[i][i] = 0

    next_hop: List[List[Optional[int]]] = [
        [j if (i != j and is_edge(dist[i][j])) else None for j in range(n)]
        for i in range(n)
    ]

    steps = [FloydStep(pivot=-1, matrix=_freeze(dist))]

    for k in range(n):
        for i in range(n):
            for j in range(n):
                through_k = add_weights(dist[i][k], dist[k][j])
                if is_shorter(through_k, dist[i][j]):
                    dist[i][j] = through_k
                    next_hop[i][j] = next_hop[i][k]
        steps.append(FloydStep(pivot=k, matrix=_freeze(dist)))

    diameter: Weight = 0
    has_inf_pairs = False
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            if not is_edge(dist[i][j]):
                has_inf_pairs = True
            elif dist[i][j] > diameter:
                diameter = dist[i][j]

    if has_inf_pairs:
        logger.info("Some vertex pairs are unreachable")

    return FloydResult(
        labels=graph.node_labels,
        steps=tuple(steps),
        dist=_freeze(dist),
        next_hop=tuple(tuple(row) for row in next_hop),
        diameter=diameter,
        has_inf_pairs=has_inf_pairs,
    )
