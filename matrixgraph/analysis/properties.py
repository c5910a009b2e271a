"""Structural classification of a graph snapshot.

All functions are pure; analyze_graph() recomputes the whole GraphAnalysis
record at once.
"""

from collections import deque
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Sequence, Tuple

from loguru import logger

from ..core.constants import GraphPolicy
from ..core.enums import EulerianType, Hamiltonicity, StructureType
from ..core.graph import Graph


AdjacencyTest = Callable[[int, int], bool]


@dataclass(frozen=True)
class GraphAnalysis:
    """Flat record of every structural property of a graph."""
    order: int
    size: int
    is_symmetric: bool
    max_edges: int
    density: float
    is_complete: bool
    out_degrees: Tuple[int, ...]
    in_degrees: Tuple[int, ...]
    degree_sequence: Tuple[int, ...]
    min_degree: int
    max_degree: int
    is_regular: bool
    isolated: int
    components: int
    is_connected: bool
    is_bipartite: bool
    has_cycles: bool
    is_tree: bool
    is_forest: bool
    eulerian_type: EulerianType
    hamiltonian: Hamiltonicity
    structure_type: StructureType
    complement_order: int
    complement_size: int
    complement_components: int
    adjacency: Dict[str, Tuple[str, ...]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten to plain values (enums become their string values)."""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, Enum):
                data[key] = value.value
        return data


# Degrees

def out_degrees(graph: Graph) -> List[int]:
    """Count outgoing arcs per vertex."""
    return [sum(row) for row in graph.has_arc]


def in_degrees(graph: Graph) -> List[int]:
    """Count incoming arcs per vertex."""
    return [sum(graph.has_arc[i][j] for i in range(graph.n)) for j in range(graph.n)]


def degrees(graph: Graph) -> List[int]:
    """Vertex degrees: out-degree when symmetric, out + in otherwise."""
    outs = out_degrees(graph)
    if graph.is_symmetric:
        return outs
    ins = in_degrees(graph)
    return [o + i for o, i in zip(outs, ins)]


def degree_sequence(graph: Graph) -> List[int]:
    """Degrees sorted in descending order."""
    return sorted(degrees(graph), reverse=True)


# Connectivity

def _components(n: int, adjacent: AdjacencyTest) -> List[List[int]]:
    visited = [False] * n
    components = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        queue = deque([start])
        members = []
        while queue:
            u = queue.popleft()
            members.append(u)
            for v in range(n):
                if not visited[v] and (adjacent(u, v) or adjacent(v, u)):
                    visited[v] = True
                    queue.append(v)
        components.append(members)
    return components


def connected_components(graph: Graph) -> List[List[int]]:
    """Components of the undirected view, as lists of vertex indices."""
    return _components(graph.n, lambda u, v: graph.has_arc[u][v])


def complement_components(graph: Graph) -> List[List[int]]:
    """Components of the complement graph (i != j and no arc in the original)."""
    return _components(graph.n, lambda u, v: u != v and not graph.has_arc[u][v])


def is_bipartite(graph: Graph) -> bool:
    """Two-colour the undirected view; any self-loop rules bipartiteness out."""
    if any(graph.loops):
        return False

    n = graph.n
    colour = [-1] * n
    for start in range(n):
        if colour[start] != -1:
            continue
        colour[start] = 0
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in range(n):
                if not graph.undirected_adjacent(u, v):
                    continue
                if colour[v] == -1:
                    colour[v] = 1 - colour[u]
                    queue.append(v)
                elif colour[v] == colour[u]:
                    return False
    return True


# Eulerian

def _edges_in_one_component(graph: Graph, total_degrees: Sequence[int]) -> bool:
    """Check that every non-isolated vertex lies in the same component."""
    active = {i for i in range(graph.n) if total_degrees[i] > 0}
    return any(active <= set(component) for component in connected_components(graph))


def eulerian_type(graph: Graph) -> EulerianType:
    """Classify the graph as having an Eulerian cycle, path, or neither.

    Symmetric graphs use vertex parity (all even: cycle, exactly two odd:
    path). Directed graphs use the in/out balance rule. Either way the
    edges must lie in a single component and there must be at least one edge,
    so an edgeless graph is NONE even though every degree is even.
    """
    if graph.edge_count == 0:
        return EulerianType.NONE

    outs = out_degrees(graph)
    ins = in_degrees(graph)
    total = [o + i for o, i in zip(outs, ins)]
    if not _edges_in_one_component(graph, total):
        return EulerianType.NONE

    if graph.is_symmetric:
        odd = sum(1 for d in outs if d % 2 == 1)
        if odd == 0:
            return EulerianType.CYCLE
        if odd == 2:
            return EulerianType.PATH
        return EulerianType.NONE

    balance = [o - i for o, i in zip(outs, ins)]
    if all(b == 0 for b in balance):
        return EulerianType.CYCLE
    unbalanced = sorted(b for b in balance if b != 0)
    if unbalanced == [-1, 1]:
        return EulerianType.PATH
    return EulerianType.NONE


# Hamiltonian

def hamiltonian(graph: Graph, limit: int = GraphPolicy.HAMILTONIAN_LIMIT) -> Hamiltonicity:
    """Search for a Hamiltonian cycle by backtracking over vertex orders.

    The search starts from vertex 0 and follows existing arcs only. It is
    exponential, so graphs with more than `limit` vertices are not searched.

    Args:
        graph: Graph snapshot
        limit: Largest order that is searched

    Returns:
        YES, NO, or NP_LIMIT when the graph exceeds the limit
    """
    n = graph.n
    if n > limit:
        logger.info(f"Hamiltonian check skipped: {n} nodes exceed the limit of {limit}")
        return Hamiltonicity.NP_LIMIT
    if n < 3:
        return Hamiltonicity.NO

    arcs = graph.has_arc
    path = [0]
    used = [False] * n
    used[0] = True

    def extend() -> bool:
        if len(path) == n:
            return arcs[path[-1]][0]
        last = path[-1]
        for v in range(1, n):
            if used[v] or not arcs[last][v]:
                continue
            used[v] = True
            path.append(v)
            if extend():
                return True
            path.pop()
            used[v] = False
        return False

    return Hamiltonicity.from_bool(extend())


# Classification

def classify_structure(is_symmetric: bool, is_connected: bool, has_cycles: bool) -> StructureType:
    """Combine connectivity and cycle presence into a structural tag."""
    if is_symmetric:
        if is_connected:
            return StructureType.CONNECTED_CYCLIC if has_cycles else StructureType.TREE
        return StructureType.DISCONNECTED_CYCLIC if has_cycles else StructureType.FOREST

    if not is_connected:
        return StructureType.DISCONNECTED
    if has_cycles:
        return StructureType.WEAK_CONNECTED_CYCLIC
    return StructureType.WEAK_CONNECTED_ACYCLIC


def analyze_graph(graph: Graph, hamiltonian_limit: int = GraphPolicy.HAMILTONIAN_LIMIT) -> GraphAnalysis:
    """Compute the full structural record of a graph.

    Args:
        graph: Graph snapshot
        hamiltonian_limit: Largest order for the Hamiltonian search

    Returns:
        GraphAnalysis
    """
    n = graph.n
    logger.debug(f"Analyzing graph with {n} nodes")

    size = graph.edge_count
    max_edges = n * (n - 1) // 2 if graph.is_symmetric else n * (n - 1)
    density = size / max_edges if max_edges > 0 else 0.0

    outs = out_degrees(graph)
    ins = in_degrees(graph)
    vertex_degrees = degrees(graph)
    sequence = sorted(vertex_degrees, reverse=True)
    min_degree = min(vertex_degrees) if vertex_degrees else 0
    max_degree = max(vertex_degrees) if vertex_degrees else 0
    isolated = sum(1 for o, i in zip(outs, ins) if o + i == 0)

    components = len(connected_components(graph))
    is_connected = components == 1
    # A spanning forest has n - components edges; anything beyond closes a cycle
    has_cycles = size > n - components

    complement_size = max(0, max_edges - size)

    return GraphAnalysis(
        order=n,
        size=size,
        is_symmetric=graph.is_symmetric,
        max_edges=max_edges,
        density=density,
        is_complete=size == max_edges,
        out_degrees=tuple(outs),
        in_degrees=tuple(ins),
        degree_sequence=tuple(sequence),
        min_degree=min_degree,
        max_degree=max_degree,
        is_regular=min_degree == max_degree,
        isolated=isolated,
        components=components,
        is_connected=is_connected,
        is_bipartite=is_bipartite(graph),
        has_cycles=has_cycles,
        is_tree=is_connected and not has_cycles,
        is_forest=not has_cycles,
        eulerian_type=eulerian_type(graph),
        hamiltonian=hamiltonian(graph, hamiltonian_limit),
        structure_type=classify_structure(graph.is_symmetric, is_connected, has_cycles),
        complement_order=n,
        complement_size=complement_size,
        complement_components=len(complement_components(graph)),
        adjacency={label: tuple(graph.neighbors(label)) for label in graph.node_labels},
    )
