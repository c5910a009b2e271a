"""Report builder running every engine over one snapshot.

GraphReport is the entry point the CLI uses: it takes the engine
configuration, runs the requested computations on a single Graph snapshot
and renders the results as pandas tables.
"""

from typing import Any, Dict, Optional

import pandas as pd
from loguru import logger

from ..core.config_spec import EngineConfig
from ..core.graph import Graph, format_weight, is_edge
from ..core.constants import Symbols
from .dijkstra import DijkstraResult, compute_dijkstra
from .floyd import FloydResult, compute_floyd
from .kruskal import MSTResult, compute_kruskal
from .properties import GraphAnalysis, analyze_graph


class GraphReport:
    """Runs the path, spanning tree and property engines on a snapshot."""

    def __init__(self, config: Optional[EngineConfig] = None):
        """Initialize report with engine configuration.

        Args:
            config: Engine configuration; defaults are used if None
        """
        self.config = config or EngineConfig()

    def run(self, graph: Graph) -> Dict[str, Any]:
        """Compute every whole-graph result.

        Args:
            graph: Graph snapshot

        Returns:
            Dictionary with 'analysis', 'floyd' and 'mst' entries
        """
        logger.info(f"Building report for {graph.n} nodes")
        return {
            'analysis': self.analysis(graph),
            'floyd': compute_floyd(graph),
            'mst': compute_kruskal(graph),
        }

    def analysis(self, graph: Graph) -> GraphAnalysis:
        return analyze_graph(graph, hamiltonian_limit=self.config.hamiltonian_limit)

    @staticmethod
    def floyd(graph: Graph) -> FloydResult:
        return compute_floyd(graph)

    @staticmethod
    def dijkstra(graph: Graph, start: str, end: str) -> DijkstraResult:
        return compute_dijkstra(graph, start, end)

    @staticmethod
    def mst(graph: Graph) -> MSTResult:
        return compute_kruskal(graph)

    # Tables

    @staticmethod
    def analysis_table(analysis: GraphAnalysis) -> pd.DataFrame:
        """Render the analysis record as a two-column property table."""
        rows = []
        for key, value in analysis.to_dict().items():
            if isinstance(value, (list, tuple)):
                value = ",".join(str(v) for v in value)
            elif isinstance(value, dict):
                value = "; ".join(f"{k}: {','.join(v)}" for k, v in value.items())
            rows.append({'property': key, 'value': value})
        return pd.DataFrame(rows, columns=['property', 'value'])

    @staticmethod
    def dijkstra_table(result: DijkstraResult, labels) -> pd.DataFrame:
        """Render the Dijkstra trace as one row per step."""
        rows = []
        for step in result.steps:
            row = {'step': step.step, 'pivot': step.pivot or Symbols.NONE}
            for label, value in zip(labels, step.display_dists()):
                row[label] = value
            row['changes'] = ",".join(labels[i] for i in step.changes)
            rows.append(row)
        return pd.DataFrame(rows)

    @staticmethod
    def distance_table(matrix, labels) -> pd.DataFrame:
        """Render a distance matrix with '∞' for unreachable pairs."""
        cells = [[format_weight(d) if is_edge(d) else Symbols.INFINITY for d in row] for row in matrix]
        return pd.DataFrame(cells, index=list(labels), columns=list(labels))
