#!/usr/bin/env python3
"""Tests for weights, labels, the Graph snapshot and GraphModel."""

import math

import networkx as nx
import numpy as np
import pytest

from matrixgraph.core.exceptions import NodeLookupError
from matrixgraph.core.graph import (
    NO_EDGE, Graph, GraphModel, format_weight, index_to_label, is_connection,
    is_edge, label_to_index, make_labels, parse_number
)
from matrixgraph.core.graph.weights import add_weights, is_shorter, to_float


class TestWeights:
    """Test the NoEdge sentinel and weight helpers."""

    def test_no_edge_is_singleton(self):
        assert type(NO_EDGE)() is NO_EDGE
        assert not is_edge(NO_EDGE)
        assert is_edge(0)

    def test_arithmetic_absorbs_no_edge(self):
        assert add_weights(2, 3) == 5
        assert add_weights(NO_EDGE, 3) is NO_EDGE
        assert add_weights(3, NO_EDGE) is NO_EDGE

    def test_ordering(self):
        assert is_shorter(1, 2)
        assert not is_shorter(2, 2)
        assert is_shorter(100, NO_EDGE)
        assert not is_shorter(NO_EDGE, 100)
        assert not is_shorter(NO_EDGE, NO_EDGE)

    def test_to_float(self):
        assert to_float(NO_EDGE) == math.inf
        assert to_float(3) == 3.0

    @pytest.mark.parametrize("raw,expected", [
        (3, 3),
        ("3", 3),
        (" 4 ", 4),
        ("2.0", 2),
        ("2.5", 2.5),
        (-1, -1),
        ("", None),
        ("   ", None),
        ("abc", None),
        ("inf", None),
        ("nan", None),
        (None, None),
        (True, None),
    ])
    def test_parse_number(self, raw, expected):
        assert parse_number(raw) == expected

    def test_parse_number_returns_int_for_integral_values(self):
        assert isinstance(parse_number("7.0"), int)
        assert isinstance(parse_number(7.0), int)

    def test_format_weight(self):
        assert format_weight(3) == "3"
        assert format_weight(3.0) == "3"
        assert format_weight(2.5) == "2.5"
        assert format_weight(NO_EDGE) == ""


class TestLabels:
    """Test index <-> label mapping."""

    def test_single_letters(self):
        assert index_to_label(0) == "A"
        assert index_to_label(25) == "Z"
        assert make_labels(3) == ["A", "B", "C"]

    def test_beyond_alphabet(self):
        assert index_to_label(26) == "AA"
        assert index_to_label(27) == "AB"
        assert index_to_label(51) == "AZ"
        assert index_to_label(52) == "BA"
        assert index_to_label(701) == "ZZ"
        assert index_to_label(702) == "AAA"

    def test_round_trip(self):
        for i in range(800):
            assert label_to_index(index_to_label(i)) == i

    def test_malformed_labels(self):
        assert label_to_index("") == -1
        assert label_to_index("A1") == -1
        assert label_to_index("É") == -1

    def test_negative_index(self):
        with pytest.raises(ValueError):
            index_to_label(-1)


class TestConnectionRule:
    """Test which raw tokens declare a connection."""

    @pytest.mark.parametrize("raw", ["", "  ", "x", -1, "-1", None])
    def test_not_a_connection(self, raw):
        assert not is_connection(raw)

    def test_zero_depends_on_mode(self):
        assert not is_connection(0, zero_as_no_edge=True)
        assert not is_connection("0", zero_as_no_edge=True)
        assert is_connection(0, zero_as_no_edge=False)

    def test_numbers_are_connections(self):
        assert is_connection(5)
        assert is_connection("2.5")
        assert is_connection(-3)


class TestGraphSnapshot:
    """Test Graph.from_raw normalization."""

    def test_basic_snapshot(self, path_model):
        graph = path_model.snapshot()

        assert graph.n == 3
        assert graph.node_labels == ("A", "B", "C")
        assert graph.weights[0][1] == 3
        assert graph.weights[0][2] is NO_EDGE
        assert graph.has_arc[1][2]
        assert not graph.has_arc[0][2]
        assert graph.is_symmetric
        assert graph.edge_count == 2
        assert graph.arc_count == 4

    def test_diagonal_is_always_zero(self):
        graph = Graph.from_raw(2, [[9, 1], [1, "x"]])

        assert graph.weights[0][0] == 0
        assert graph.weights[1][1] == 0
        assert not graph.has_arc[0][0]
        assert graph.loops == (True, False)

    def test_directed_snapshot(self, directed_cycle_model):
        graph = directed_cycle_model.snapshot()

        assert not graph.is_symmetric
        assert graph.edge_count == 3
        assert graph.neighbors("A") == ["B"]
        assert graph.neighbors("C") == ["A"]

    def test_raw_values_are_kept(self):
        graph = Graph.from_raw(2, [["0", " 4 "], ["", "0"]])
        assert graph.raw_values == (("0", " 4 "), ("", "0"))
        assert graph.weights[0][1] == 4

    def test_missing_cells_are_empty(self):
        graph = Graph.from_raw(3, [[0, 1], [1]])

        assert graph.n == 3
        assert graph.has_arc[1][0]
        assert not graph.has_arc[1][2]
        assert graph.raw_values[2] == ("", "", "")

    def test_zero_mode_switch(self):
        raw = [[0, 0], [0, 0]]
        assert Graph.from_raw(2, raw, zero_as_no_edge=True).edge_count == 0
        assert Graph.from_raw(2, raw, zero_as_no_edge=False).edge_count == 1

    def test_empty_graph(self):
        graph = Graph.from_raw(0, [])
        assert graph.n == 0
        assert graph.is_symmetric
        assert graph.weight_array().shape == (0, 0)

    def test_index_lookup(self, path_model):
        graph = path_model.snapshot()
        assert graph.index_of("C") == 2
        assert graph.find_index("Z") == -1
        with pytest.raises(NodeLookupError):
            graph.index_of("Z")

    def test_weight_array(self, path_model):
        array = path_model.snapshot().weight_array()
        assert array[0, 1] == 3.0
        assert np.isinf(array[0, 2])

    def test_to_networkx(self, path_model, directed_cycle_model):
        undirected = path_model.snapshot().to_networkx()
        assert not undirected.is_directed()
        assert undirected["A"]["B"]["weight"] == 3
        assert undirected.number_of_edges() == 2

        directed = directed_cycle_model.snapshot().to_networkx()
        assert directed.is_directed()
        assert directed.has_edge("C", "A")
        assert not directed.has_edge("A", "C")
        assert nx.is_strongly_connected(directed)


class TestGraphModel:
    """Test the mutable raw matrix owner."""

    def test_default_grid(self):
        model = GraphModel(3)
        assert model.raw_matrix == [[0, "", ""], ["", 0, ""], ["", "", 0]]
        assert model.node_labels == ["A", "B", "C"]

    def test_resize_keeps_overlap(self, path_model):
        path_model.resize(4)
        assert path_model.num_nodes == 4
        assert path_model.raw_matrix[0][1] == 3
        assert path_model.raw_matrix[3] == ["", "", "", 0]

        path_model.resize(2)
        assert path_model.raw_matrix == [[0, 3], [3, 0]]

    def test_resize_negative(self, path_model):
        with pytest.raises(ValueError):
            path_model.resize(-1)

    def test_clear(self, path_model):
        path_model.clear()
        assert path_model.num_nodes == 3
        assert path_model.snapshot().edge_count == 0

    def test_generate_random_is_reproducible(self):
        first = GraphModel(6)
        second = GraphModel(6)
        first.generate_random(seed=7)
        second.generate_random(seed=7)
        assert first.raw_matrix == second.raw_matrix

    def test_generate_random_weights(self):
        model = GraphModel(8)
        model.generate_random(probability=1.0, max_weight=5, seed=1)

        for i, row in enumerate(model.raw_matrix):
            assert row[i] == 0
            for j, value in enumerate(row):
                if i != j:
                    assert 1 <= value <= 5
        assert model.snapshot().edge_count == 28

    def test_generate_random_empty(self):
        model = GraphModel(5)
        model.generate_random(probability=0.0, seed=3)
        assert model.snapshot().edge_count == 0

    def test_generate_random_invalid_arguments(self):
        model = GraphModel(3)
        with pytest.raises(ValueError):
            model.generate_random(probability=1.5)
        with pytest.raises(ValueError):
            model.generate_random(max_weight=0)

    def test_set_cell(self):
        model = GraphModel(2)
        model.set_cell(0, 1, "9")
        assert model.snapshot().weights[0][1] == 9
        with pytest.raises(IndexError):
            model.set_cell(2, 0, 1)

    def test_load_replaces_state(self, path_model):
        path_model.load(2, [["0", "6"], ["6", "0"]])
        assert path_model.num_nodes == 2
        assert path_model.raw_matrix == [["0", "6"], ["6", "0"]]

    def test_label_helpers(self):
        model = GraphModel(30)
        assert model.to_index("AC") == 28
        assert model.to_label(29) == "AD"
        with pytest.raises(NodeLookupError):
            model.to_index("AE")
        with pytest.raises(NodeLookupError):
            model.to_label(30)
