#!/usr/bin/env python3
"""Tests for the Floyd-Warshall and Dijkstra engines."""

import networkx as nx
import numpy as np
import pandas as pd
import pytest

from matrixgraph.analysis import compute_dijkstra, compute_floyd
from matrixgraph.core.enums import PathStatus
from matrixgraph.core.exceptions import NodeLookupError
from matrixgraph.core.graph import NO_EDGE, GraphModel


class TestFloyd:
    """Test all-pairs shortest paths."""

    def test_path_graph_distances(self, path_model):
        result = compute_floyd(path_model.snapshot())

        assert result.distance("A", "C") == 4
        assert result.distance("A", "B") == 3
        assert result.distance("C", "A") == 4
        assert result.diameter == 4
        assert not result.has_inf_pairs

    def test_snapshots(self, path_model):
        result = compute_floyd(path_model.snapshot())

        assert len(result.steps) == 4
        assert [step.pivot for step in result.steps] == [-1, 0, 1, 2]
        assert result.steps[0].matrix[0][2] is NO_EDGE
        assert result.steps[1].matrix[0][2] is NO_EDGE
        assert result.steps[2].matrix[0][2] == 4
        assert result.steps[-1].matrix == result.dist

    def test_self_distance_is_zero(self):
        model = GraphModel(2, [[5, 1], [1, 8]])
        result = compute_floyd(model.snapshot())
        assert result.dist[0][0] == 0
        assert result.dist[1][1] == 0

    def test_query_reconstructs_path(self, path_model):
        query = compute_floyd(path_model.snapshot()).query("A", "C")

        assert query.status == PathStatus.OK
        assert query.cost == 4
        assert query.path == ("A", "B", "C")
        assert query.path_string == "A → B → C"

    def test_query_same_vertex(self, path_model):
        query = compute_floyd(path_model.snapshot()).query("B", "B")
        assert query.status == PathStatus.OK
        assert query.cost == 0
        assert query.path == ("B",)

    def test_unreachable_pairs(self, disconnected_model):
        result = compute_floyd(disconnected_model.snapshot())

        assert result.has_inf_pairs
        assert result.diameter == 5
        assert result.next_hop[0][2] is None

        query = result.query("A", "C")
        assert query.status == PathStatus.UNREACHABLE
        assert query.path_string == "-"

    def test_directed_distances(self, directed_cycle_model):
        result = compute_floyd(directed_cycle_model.snapshot())

        assert result.distance("A", "C") == 6
        assert result.distance("C", "B") == 11
        assert result.diameter == 11

    def test_unknown_label_raises(self, path_model):
        result = compute_floyd(path_model.snapshot())
        with pytest.raises(NodeLookupError):
            result.query("A", "Q")

    def test_degenerate_sizes(self):
        empty = compute_floyd(GraphModel(0).snapshot())
        assert len(empty.steps) == 1
        assert empty.diameter == 0
        assert not empty.has_inf_pairs

        single = compute_floyd(GraphModel(1).snapshot())
        assert len(single.steps) == 2
        assert single.steps[0].matrix == single.steps[1].matrix == ((0,),)

    def test_negative_weights_are_accepted(self):
        model = GraphModel(3, [[0, 4, ""], ["", 0, -2], ["", "", 0]])
        result = compute_floyd(model.snapshot())
        assert result.distance("A", "C") == 2

    def test_numeric_exports(self, disconnected_model):
        result = compute_floyd(disconnected_model.snapshot())

        array = result.as_array()
        assert array[0, 1] == 5.0
        assert np.isinf(array[0, 2])

        frame = result.as_frame(step=0)
        assert isinstance(frame, pd.DataFrame)
        assert list(frame.columns) == ["A", "B", "C"]
        assert frame.loc["B", "A"] == 5.0


class TestDijkstra:
    """Test single-source shortest paths."""

    def test_shortcut_through_middle_vertex(self):
        model = GraphModel(3, [[0, 2, 5], [2, 0, 1], [5, 1, 0]])
        result = compute_dijkstra(model.snapshot(), "A", "C")

        assert result.status == PathStatus.OK
        assert result.cost == 3
        assert result.path == ("A", "B", "C")
        assert result.path_string == "A → B → C"

    def test_trace(self):
        model = GraphModel(3, [[0, 2, 5], [2, 0, 1], [5, 1, 0]])
        steps = compute_dijkstra(model.snapshot(), "A", "C").steps

        assert len(steps) == 3
        assert steps[0].dists == (0, NO_EDGE, NO_EDGE)
        assert steps[0].pivot == "A"
        assert steps[0].changes == ()

        assert steps[1].dists == (0, 2, 5)
        assert steps[1].pivot == "B"
        assert steps[1].changes == (1, 2)

        assert steps[2].dists == (0, 2, 3)
        assert steps[2].pivot == "C"
        assert steps[2].changes == (2,)

    def test_display_dists(self):
        model = GraphModel(3, [[0, 2, ""], [2, 0, ""], ["", "", 0]])
        steps = compute_dijkstra(model.snapshot(), "A", "B").steps
        assert steps[0].display_dists() == ["0", "∞", "∞"]

    def test_terminal_step_when_nothing_reachable(self, disconnected_model):
        result = compute_dijkstra(disconnected_model.snapshot(), "A", "C")

        assert result.status == PathStatus.UNREACHABLE
        assert result.cost is None
        assert result.path == ()
        assert result.path_string == "-"
        assert result.steps[-1].pivot is None
        assert [step.pivot for step in result.steps] == ["A", "B", None]

    def test_ties_go_to_lowest_index(self):
        model = GraphModel(3, [[0, 1, 1], [1, 0, ""], [1, "", 0]])
        steps = compute_dijkstra(model.snapshot(), "A", "C").steps
        assert steps[1].pivot == "B"
        assert steps[2].pivot == "C"

    def test_start_equals_end(self, path_model):
        result = compute_dijkstra(path_model.snapshot(), "B", "B")
        assert result.status == PathStatus.OK
        assert result.cost == 0
        assert result.path == ("B",)

    @pytest.mark.parametrize("start,end", [("A", "Z"), ("Q", "A"), ("", "")])
    def test_unknown_labels_do_not_raise(self, path_model, start, end):
        result = compute_dijkstra(path_model.snapshot(), start, end)
        assert result.status == PathStatus.UNREACHABLE
        assert result.steps == ()

    def test_directed_edges_are_followed_one_way(self, directed_cycle_model):
        result = compute_dijkstra(directed_cycle_model.snapshot(), "B", "A")
        assert result.cost == 9
        assert result.path == ("B", "C", "A")


class TestShortestPathAgreement:
    """Cross-check both engines against each other and against networkx."""

    @pytest.mark.parametrize("seed", range(6))
    def test_floyd_matches_dijkstra(self, seed):
        model = GraphModel(6)
        model.generate_random(probability=0.4, max_weight=9, seed=seed)
        graph = model.snapshot()
        floyd = compute_floyd(graph)

        for start in graph.node_labels:
            for end in graph.node_labels:
                dijkstra = compute_dijkstra(graph, start, end)
                expected = floyd.distance(start, end)
                if expected is NO_EDGE:
                    assert dijkstra.status == PathStatus.UNREACHABLE
                else:
                    assert dijkstra.cost == expected

    @pytest.mark.parametrize("seed", range(6))
    def test_floyd_matches_networkx(self, seed):
        model = GraphModel(7)
        model.generate_random(probability=0.35, max_weight=15, seed=seed)
        graph = model.snapshot()
        floyd = compute_floyd(graph)
        digraph = nx.DiGraph()
        digraph.add_nodes_from(graph.node_labels)
        for i, source in enumerate(graph.node_labels):
            for j, target in enumerate(graph.node_labels):
                if graph.has_arc[i][j]:
                    digraph.add_edge(source, target, weight=graph.weights[i][j])
        oracle = dict(nx.all_pairs_dijkstra_path_length(digraph))

        for start in graph.node_labels:
            for end in graph.node_labels:
                if end in oracle[start]:
                    assert floyd.distance(start, end) == oracle[start][end]
                else:
                    assert floyd.distance(start, end) is NO_EDGE

    @pytest.mark.parametrize("seed", range(4))
    def test_reconstructed_paths_have_the_reported_cost(self, seed):
        model = GraphModel(6)
        model.generate_random(probability=0.5, max_weight=9, seed=seed)
        graph = model.snapshot()
        floyd = compute_floyd(graph)

        for start in graph.node_labels:
            for end in graph.node_labels:
                query = floyd.query(start, end)
                if query.status != PathStatus.OK:
                    continue
                indices = [graph.index_of(label) for label in query.path]
                cost = sum(graph.weights[u][v] for u, v in zip(indices, indices[1:]))
                assert cost == query.cost
