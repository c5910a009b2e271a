"""Graph algorithm engines for MatrixGraph."""

from .floyd import FloydResult, FloydStep, PathQuery, compute_floyd
from .dijkstra import DijkstraResult, DijkstraStep, compute_dijkstra
from .kruskal import MSTResult, UnionFind, compute_kruskal
from .properties import GraphAnalysis, analyze_graph
from .report import GraphReport

__all__ = [
    'FloydResult', 'FloydStep', 'PathQuery', 'compute_floyd',
    'DijkstraResult', 'DijkstraStep', 'compute_dijkstra',
    'MSTResult', 'UnionFind', 'compute_kruskal',
    'GraphAnalysis', 'analyze_graph',
    'GraphReport',
]
