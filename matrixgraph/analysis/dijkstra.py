"""Single-source shortest path (Dijkstra) with a step-by-step trace.

The pivot is chosen by a linear scan (lowest tentative distance, ties to the
lowest index). Each step records the distances as they stand *before* the
pivot is relaxed, together with the indices changed by the previous step's
relaxation, so step 0 always has an empty change set. Negative weights are
not validated.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from loguru import logger

from ..core.constants import Symbols
from ..core.enums import PathStatus
from ..core.graph import Graph, NO_EDGE, Weight, is_edge, format_weight
from ..core.graph.weights import add_weights, is_shorter


@dataclass(frozen=True)
class DijkstraStep:
    """One iteration of Dijkstra.

    Attributes:
        step: Iteration number, starting at 0
        dists: Tentative distances before this step's relaxation
        pivot: Label of the selected vertex, None if no reachable vertex remains
        changes: Indices whose distance the previous step updated
    """
    step: int
    dists: Tuple[Weight, ...]
    pivot: Optional[str]
    changes: Tuple[int, ...]

    def display_dists(self) -> List[str]:
        """Distances rendered for display, '∞' where unreachable."""
        return [format_weight(d) if is_edge(d) else Symbols.INFINITY for d in self.dists]


@dataclass(frozen=True)
class DijkstraResult:
    """Output of the Dijkstra engine."""
    status: PathStatus
    steps: Tuple[DijkstraStep, ...] = ()
    cost: Optional[Weight] = None
    path: Tuple[str, ...] = ()

    @property
    def path_string(self) -> str:
        """Path rendered as 'A → B → C', or '-' if there is none."""
        if not self.path:
            return Symbols.NONE
        return Symbols.PATH_SEPARATOR.join(self.path)


def compute_dijkstra(graph: Graph, start: str, end: str) -> DijkstraResult:
    """Run Dijkstra from start and reconstruct the path to end.

    Args:
        graph: Graph snapshot
        start: Start label
        end: End label

    Returns:
        DijkstraResult; an unknown start or end label gives status
        UNREACHABLE with an empty trace
    """
    n = graph.n
    start_idx = graph.find_index(start)
    end_idx = graph.find_index(end)

    if start_idx < 0 or end_idx < 0:
        logger.warning(f"Dijkstra called with unknown label(s): {start!r}, {end!r}")
        return DijkstraResult(status=PathStatus.UNREACHABLE)

    logger.debug(f"Running Dijkstra {start} -> {end} on {n} nodes")

    dist: List[Weight] = [NO_EDGE] * n
    visited = [False] * n
    parent: List[Optional[int]] = [None] * n
    steps = []

    dist[start_idx] = 0
    previous_changes: List[int] = []

    for step in range(n):
        pivot = -1
        for v in range(n):
            if not visited[v] and is_edge(dist[v]):
                if pivot < 0 or dist[v] < dist[pivot]:
                    pivot = v

        steps.append(DijkstraStep(
            step=step,
            dists=tuple(dist),
            pivot=graph.node_labels[pivot] if pivot >= 0 else None,
            changes=tuple(previous_changes),
        ))

        if pivot < 0:
            break

        visited[pivot] = True
        previous_changes = []

        for v in range(n):
            weight = graph.weights[pivot][v]
            if visited[v] or not is_edge(weight):
                continue
            candidate = add_weights(dist[pivot], weight)
            if is_shorter(candidate, dist[v]):
                dist[v] = candidate
                parent[v] = pivot
                previous_changes.append(v)

    if not is_edge(dist[end_idx]):
        return DijkstraResult(status=PathStatus.UNREACHABLE, steps=tuple(steps))

    path_indices = []
    current: Optional[int] = end_idx
    while current is not None:
        path_indices.append(current)
        current = parent[current]
    path_indices.reverse()

    return DijkstraResult(
        status=PathStatus.OK,
        steps=tuple(steps),
        cost=dist[end_idx],
        path=tuple(graph.node_labels[i] for i in path_indices),
    )
